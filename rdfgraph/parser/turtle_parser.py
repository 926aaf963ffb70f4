"""
Reader for the compact (Turtle-like) syntax.

Only a subset of the grammar is understood: ``@prefix`` declarations,
IRI / prefixed-name / literal terms, ``;`` predicate lists, ``.`` terminated
statements and the ``a`` shorthand for ``rdf:type``.
"""
import logging
import re
from collections import namedtuple

from rdflib import RDF

from rdfgraph.exceptions import NonTerminatedQuoteError, UnexpectedTokenError, UndefinedNamespaceError
from rdfgraph.triple import Triple

#Token kinds. Delimiter tokens use the delimiter character itself as kind.
LITERAL = "literal"
DOT = "."
SEMICOLON = ";"
DELIMITERS = (DOT, SEMICOLON)
#Characters that open a new IRI or literal, never found after a delimiter inside a term
TERM_STARTS = ("<", '"')

QUOTE = '"'
DATATYPE_SEPARATOR = "^^"
PREFIX_KEYWORD = "@prefix"
TYPE_SHORTHAND = "a"
RDF_TYPE = "<{}>".format(RDF.type)

#A leading run of letters followed by a colon, e.g. ``foaf:`` in ``foaf:name``
PREFIX_NAME = re.compile(r"([A-Za-z]+):")


class Token(namedtuple("Token", ["kind", "pos", "length"])):
    __slots__ = ()

    @property
    def is_literal(self):
        return self.kind == LITERAL

    def is_delimiter(self, char):
        return self.kind == char

    def text(self, buffer):
        return buffer[self.pos:self.pos + self.length]


class Tokenizer:

    def __init__(self):
        self.buffer = ""
        self.pos = 0

    def tokenize(self, buffer):
        """
        Split the buffer into delimiter and literal tokens.
        :param buffer: the source text
        :return: list of Token, each pointing into buffer
        """
        self.buffer = buffer
        self.pos = 0
        tokens = []
        token = self._next_token()
        while token is not None:
            tokens.append(token)
            token = self._next_token()
        return tokens

    def _next_token(self):
        self._skip_whitespace()

        if self.pos >= len(self.buffer):
            return None

        start = self.pos
        char = self.buffer[start]

        if char in DELIMITERS:
            self.pos += 1
            return Token(char, start, 1)

        quoted = False
        quote_start = None
        while self.pos < len(self.buffer):
            c = self.buffer[self.pos]
            if c == QUOTE:
                quoted = not quoted
                quote_start = self.pos
            elif not quoted:
                if c.isspace():
                    break
                # "Alice". or foaf:Person; -> the delimiter is its own token
                if c in DELIMITERS and self._at_boundary(self.pos + 1):
                    break
            self.pos += 1

        if quoted:
            raise NonTerminatedQuoteError(quote_start)

        return Token(LITERAL, start, self.pos - start)

    def _at_boundary(self, pos):
        if pos >= len(self.buffer):
            return True
        c = self.buffer[pos]
        return c.isspace() or c in DELIMITERS or c in TERM_STARTS

    def _skip_whitespace(self):
        while self.pos < len(self.buffer) and self.buffer[self.pos].isspace():
            self.pos += 1


class TurtleParser:

    def __init__(self, tokenizer=None):
        self.tokenizer = tokenizer or Tokenizer()
        self._reset("")

    def _reset(self, buffer):
        self.buffer = buffer
        self.pos = 0
        self.tokens = []
        self.prefixes = {}
        self.triples = []

    def parse(self, buffer):
        """
        Parse a whole document. Any error aborts the call, nothing is returned.
        :param buffer: the document text
        :return: list of Triple in source order
        """
        self._reset(buffer)
        self.tokens = self.tokenizer.tokenize(buffer)

        while self.pos < len(self.tokens):
            token = self.tokens[self.pos]
            if token.is_literal and token.text(buffer) == PREFIX_KEYWORD:
                self.pos += 1
                self._parse_prefix()
                continue
            self._parse_block()

        triples = self.triples
        logging.debug("{} triples parsed from {} tokens".format(len(triples), len(self.tokens)))
        self._reset("")
        return triples

    def _parse_prefix(self):
        name = self._expect_literal("prefix name")
        if not name.endswith(":"):
            raise UnexpectedTokenError("prefix name ending with ':'", self._last_pos(), name)

        value = self._expect_literal("namespace IRI")
        if len(value) < 2 or not (value.startswith("<") and value.endswith(">")):
            raise UnexpectedTokenError("namespace IRI in <>", self._last_pos(), value)

        self._expect_delimiter(DOT)

        name = name[:-1]
        if name in self.prefixes:
            logging.warning("prefix {!r} redefined as <{}>".format(name, value[1:-1]))
        self.prefixes[name] = value[1:-1]

    def _parse_block(self):
        subject = self._expect_term("subject")

        while True:
            raw = self._expect_literal("predicate")
            predicate = RDF_TYPE if raw == TYPE_SHORTHAND else self.expand(raw)
            obj = self._expect_term("object")
            self.triples.append(Triple(subject, predicate, obj))

            if self._peek_delimiter(DOT):
                break
            self._expect_delimiter(SEMICOLON)

        self._expect_delimiter(DOT)

    def expand(self, term):
        """
        Replace the namespace prefix of each ``^^`` separated part of term.
        ``foaf:name`` -> ``<http://xmlns.com/foaf/0.1/name>``
        """
        parts = []
        for part in term.split(DATATYPE_SEPARATOR, 1):
            match = PREFIX_NAME.match(part)
            if match:
                prefix = match.group(1)
                if prefix not in self.prefixes:
                    raise UndefinedNamespaceError(prefix)
                part = "<" + self.prefixes[prefix] + part[match.end():] + ">"
            parts.append(part)
        return DATATYPE_SEPARATOR.join(parts)

    def _expect_term(self, what):
        return self.expand(self._expect_literal(what))

    def _expect_literal(self, what):
        token = self._current(what)
        if not token.is_literal:
            raise UnexpectedTokenError(what, token.pos, token.text(self.buffer))
        self.pos += 1
        return token.text(self.buffer)

    def _peek_delimiter(self, char):
        return self.pos < len(self.tokens) and self.tokens[self.pos].is_delimiter(char)

    def _expect_delimiter(self, char):
        token = self._current("'{}'".format(char))
        if not token.is_delimiter(char):
            raise UnexpectedTokenError("'{}'".format(char), token.pos, token.text(self.buffer))
        self.pos += 1

    def _current(self, what):
        if self.pos >= len(self.tokens):
            raise UnexpectedTokenError(what)
        return self.tokens[self.pos]

    def _last_pos(self):
        return self.tokens[self.pos - 1].pos


def parse(buffer):
    return TurtleParser().parse(buffer)
