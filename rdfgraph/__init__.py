from rdfgraph.triple import Triple
from rdfgraph.graph import Graph, Node, LinkedData, Literal, NTRIPLES, TURTLE
from rdfgraph.exceptions import (RDFParseError, NonTerminatedQuoteError, UnexpectedTokenError,
                                 UndefinedNamespaceError, MissingPredicateError, MissingObjectError,
                                 MissingEndingDotError)
from rdfgraph.remote import load_from_url
