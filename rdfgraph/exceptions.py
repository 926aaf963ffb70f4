from rdflib.exceptions import ParserError


class RDFParseError(ParserError):
    """Base class for every error raised while reading a document."""


class NonTerminatedQuoteError(RDFParseError):

    def __init__(self, pos):
        self.pos = pos
        super(NonTerminatedQuoteError, self).__init__(
            "Quote opened at offset {} is never closed".format(pos))


class UnexpectedTokenError(RDFParseError):

    def __init__(self, expected, pos=None, found=None):
        self.expected = expected
        self.pos = pos
        self.found = found
        if pos is None:
            msg = "Expected {}, reached end of input".format(expected)
        else:
            msg = "Expected {} at offset {}, found {!r}".format(expected, pos, found)
        super(UnexpectedTokenError, self).__init__(msg)


class UndefinedNamespaceError(RDFParseError):

    def __init__(self, prefix):
        self.prefix = prefix
        super(UndefinedNamespaceError, self).__init__(
            "Prefix {!r} used but never declared".format(prefix))


class LineFormatError(RDFParseError):
    reason = "Malformed statement"

    def __init__(self, lineno, line):
        self.lineno = lineno
        self.line = line
        super(LineFormatError, self).__init__(
            "{} on line {}: {!r}".format(self.reason, lineno, line))


class MissingPredicateError(LineFormatError):
    reason = "Missing predicate"


class MissingObjectError(LineFormatError):
    reason = "Missing object"


class MissingEndingDotError(LineFormatError):
    reason = "Missing ending dot"
