"""Combinator parser module.

Module Organization:
- combinators.py: Parser node classes and the construction API
- core.py: parse() entry point, ParserConfig and GrammarParser
- grammar.py: Arithmetic expression grammar built from the combinators

Public API:
    GrammarParser: Compressed grammar ready for repeated parsing
    ParserConfig: Depth and size limits
    SimpleExpressionGrammar: Example arithmetic grammar
"""

from combparse.syntax.parser.combinators import (
    Alternation,
    CharacterRange,
    CombinatorialParser,
    EndOfInput,
    ForwardReference,
    Repetition,
    Sequence,
    Transform,
    Wrap,
    character,
    character_range,
    compress,
    end_of_input,
    forward_reference,
    one_of,
    repeat,
    sequence_of,
    wrap,
)
from combparse.syntax.parser.core import GrammarParser, ParserConfig, parse
from combparse.syntax.parser.grammar import (
    SimpleExpressionGrammar,
    build_expression_parser,
)

__all__ = [
    "Alternation",
    "CharacterRange",
    "CombinatorialParser",
    "EndOfInput",
    "ForwardReference",
    "GrammarParser",
    "ParserConfig",
    "Repetition",
    "Sequence",
    "SimpleExpressionGrammar",
    "Transform",
    "Wrap",
    "build_expression_parser",
    "character",
    "character_range",
    "compress",
    "end_of_input",
    "forward_reference",
    "one_of",
    "parse",
    "repeat",
    "sequence_of",
    "wrap",
]
