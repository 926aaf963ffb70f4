from collections import namedtuple


class Triple(namedtuple("Triple", ["subject", "predicate", "object"])):
    """
    A statement in surface syntax: IRIs as ``<iri>``, literals as ``"value"``
    or ``"value"^^<datatype>``.
    """
    __slots__ = ()

    def __str__(self):
        return "{} {} {} .".format(self.subject, self.predicate, self.object)


def strip_iri(text):
    return text.strip("<>")


def strip_quotes(text):
    return text.strip('"')
