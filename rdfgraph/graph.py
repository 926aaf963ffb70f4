import logging

import rdflib

from rdfgraph.parser import ntriples_parser, turtle_parser
from rdfgraph.triple import Triple, strip_iri, strip_quotes

#Formats understood by Graph.load_from_string
NTRIPLES = "nt"
TURTLE = "turtle"

PARSERS = {
    NTRIPLES: ntriples_parser.parse,
    TURTLE: turtle_parser.parse,
}

DATATYPE_SEPARATOR = "^^"


class Literal:
    __slots__ = ("value", "type")

    def __init__(self, value, type=None):
        self.value = value
        self.type = type

    @classmethod
    def parse(cls, text):
        """
        ``"1973-03-26"^^<http://www.w3.org/2001/XMLSchema#date>`` -> Literal.
        The content is not validated.
        """
        parts = text.split(DATATYPE_SEPARATOR, 1)
        datatype = strip_iri(parts[1]) if len(parts) > 1 else None
        return cls(strip_quotes(parts[0]), datatype)

    def n3(self):
        if self.type is None:
            return '"{}"'.format(self.value)
        return '"{}"^^<{}>'.format(self.value, self.type)

    def __eq__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return (self.value, self.type) == (other.value, other.type)

    def __hash__(self):
        return hash((self.value, self.type))

    def __repr__(self):
        return "Literal({!r}, type={!r})".format(self.value, self.type)


class LinkedData:
    """An outgoing relation. object is either a Node of the same graph or a Literal."""
    __slots__ = ("predicate", "object")

    def __init__(self, predicate, object):
        self.predicate = predicate
        self.object = object

    @property
    def is_literal(self):
        return isinstance(self.object, Literal)

    def __repr__(self):
        obj = self.object if self.is_literal else "Node({!r})".format(self.object.name)
        return "LinkedData({!r}, {})".format(self.predicate, obj)


class Node:
    __slots__ = ("name", "related")

    def __init__(self, name):
        self.name = name
        self.related = []

    def n3(self):
        return "<{}>".format(self.name)

    def __repr__(self):
        return "Node({!r}, {} relations)".format(self.name, len(self.related))


class Graph:
    """
    Nodes deduplicated by name, kept in first-seen order. Each node holds
    its outgoing relations in arrival order; repeated relations are kept.
    """

    def __init__(self):
        self.nodes = []
        self._index = {}

    def load_from_string(self, format, buffer):
        """
        Parse buffer and add every triple to the graph.
        Nothing is added when parsing fails.
        :param format: NTRIPLES or TURTLE
        :param buffer: the document text
        """
        try:
            parse = PARSERS[format]
        except KeyError:
            raise ValueError("Unknown format {!r}, expected one of {}".format(format, sorted(PARSERS)))

        triples = parse(buffer)
        for triple in triples:
            self.add_triple(triple)
        logging.debug("{} triples loaded, graph has {} nodes".format(len(triples), len(self.nodes)))

    def add_triple(self, triple):
        subject = self._get_or_create_node(triple.subject)

        # a leading double quote marks a literal
        if triple.object.startswith('"'):
            obj = Literal.parse(triple.object)
        else:
            obj = self._get_or_create_node(triple.object)

        subject.related.append(LinkedData(strip_iri(triple.predicate), obj))

    def _get_or_create_node(self, term):
        name = _node_name(term)
        node = self._index.get(name)
        if node is None:
            node = Node(name)
            self._index[name] = node
            self.nodes.append(node)
        return node

    def get_node(self, name):
        return self._index.get(_node_name(name))

    def triples(self):
        for node in self.nodes:
            for link in node.related:
                yield Triple(node.n3(), "<{}>".format(link.predicate), link.object.n3())

    def serialize(self):
        return ntriples_parser.serialize(self.triples())

    def to_rdflib(self, graph=None):
        """
        Copy the statements into an rdflib graph.
        :param graph: target rdflib.Graph, a new one when omitted
        :return: the rdflib graph
        """
        if graph is None:
            graph = rdflib.Graph()
        for node in self.nodes:
            subject = rdflib.URIRef(node.name)
            for link in node.related:
                if link.is_literal:
                    datatype = rdflib.URIRef(link.object.type) if link.object.type else None
                    obj = rdflib.Literal(link.object.value, datatype=datatype)
                else:
                    obj = rdflib.URIRef(link.object.name)
                graph.add((subject, rdflib.URIRef(link.predicate), obj))
        return graph

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __contains__(self, name):
        return self.get_node(name) is not None


def _node_name(term):
    return term.strip('<>"')
