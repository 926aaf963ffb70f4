"""
Reader and writer for the line-oriented format: one
``subject predicate object .`` statement per line, fields separated by a
single space.
"""
import logging

from rdfgraph.exceptions import MissingEndingDotError, MissingObjectError, MissingPredicateError
from rdfgraph.triple import Triple

END = "."


def parse(buffer):
    """
    :param buffer: the document text
    :return: list of Triple, in line order
    """
    triples = []
    for lineno, line in enumerate(buffer.split("\n"), 1):
        if not line:
            continue

        fields = line.split(" ")
        if len(fields) < 2 or not fields[1]:
            raise MissingPredicateError(lineno, line)
        if len(fields) < 3 or not fields[2]:
            raise MissingObjectError(lineno, line)
        if len(fields) < 4 or fields[3] != END:
            raise MissingEndingDotError(lineno, line)

        triples.append(Triple(fields[0], fields[1], fields[2]))

    logging.debug("{} triples parsed".format(len(triples)))
    return triples


def serialize(triples):
    return "\n".join(str(triple) for triple in triples)
