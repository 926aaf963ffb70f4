import unittest

from rdfgraph.exceptions import NonTerminatedQuoteError
from rdfgraph.parser.turtle_parser import Tokenizer, LITERAL, DOT, SEMICOLON
from tests.data import PERSONS_TTL, TOKENIZER_TTL


class TestTokenizer(unittest.TestCase):

    def setUp(self):
        self.tokenizer = Tokenizer()

    def texts(self, buffer):
        return [t.text(buffer) for t in self.tokenizer.tokenize(buffer)]

    def test_document(self):
        tokens = self.tokenizer.tokenize(TOKENIZER_TTL)
        self.assertEqual(len(tokens), 14)
        self.assertEqual(tokens[0].kind, LITERAL)
        self.assertEqual(tokens[0].text(TOKENIZER_TTL), "@prefix")
        self.assertEqual(tokens[3].kind, DOT)
        self.assertEqual(tokens[-1].kind, DOT)

    def test_spans_point_into_buffer(self):
        buffer = "  <s>\t<p> <o> ."
        tokens = self.tokenizer.tokenize(buffer)
        self.assertEqual([(t.pos, t.length) for t in tokens], [(2, 3), (6, 3), (10, 3), (14, 1)])

    def test_whitespace_only(self):
        self.assertEqual(self.tokenizer.tokenize(" \n\t "), [])
        self.assertEqual(self.tokenizer.tokenize(""), [])

    def test_quoted_whitespace(self):
        self.assertEqual(self.texts('<s> <p> "Alice Smith" .'), ["<s>", "<p>", '"Alice Smith"', "."])

    def test_quoted_delimiters(self):
        self.assertEqual(self.texts('"a; b. c" .'), ['"a; b. c"', "."])

    def test_delimiters_without_whitespace(self):
        buffer = '<s> a foaf:Person;\n foaf:name "Alice".'
        tokens = self.tokenizer.tokenize(buffer)
        self.assertEqual([t.text(buffer) for t in tokens],
                         ["<s>", "a", "foaf:Person", ";", "foaf:name", '"Alice"', "."])
        self.assertEqual(tokens[3].kind, SEMICOLON)

    def test_delimiter_before_next_term(self):
        buffer = '<s> <p> "x";<p2> "y".<s2> <p> <o> .'
        self.assertEqual([t.text(buffer) for t in self.tokenizer.tokenize(buffer)],
                         ["<s>", "<p>", '"x"', ";", "<p2>", '"y"', ".", "<s2>", "<p>", "<o>", "."])

    def test_two_prefix_document(self):
        self.assertEqual(len(self.tokenizer.tokenize(PERSONS_TTL)), 18)

    def test_dots_inside_terms(self):
        self.assertEqual(self.texts("<http://xmlns.com/foaf/0.1/> ."), ["<http://xmlns.com/foaf/0.1/>", "."])

    def test_consecutive_delimiters(self):
        tokens = self.tokenizer.tokenize(";.")
        self.assertEqual([t.kind for t in tokens], [SEMICOLON, DOT])

    def test_typed_literal(self):
        self.assertEqual(self.texts('"30"^^xsd:integer .'), ['"30"^^xsd:integer', "."])

    def test_non_terminated_quote(self):
        with self.assertRaises(NonTerminatedQuoteError) as cm:
            self.tokenizer.tokenize('<s> <p> "Alice .')
        self.assertEqual(cm.exception.pos, 8)

    def test_no_state_between_calls(self):
        with self.assertRaises(NonTerminatedQuoteError):
            self.tokenizer.tokenize('"open')
        self.assertEqual(self.texts("<s> <p> <o> ."), ["<s>", "<p>", "<o>", "."])


if __name__ == '__main__':
    unittest.main()
