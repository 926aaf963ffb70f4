from rdfgraph.parser.turtle_parser import Tokenizer, Token, TurtleParser
from rdfgraph.parser import ntriples_parser, turtle_parser
