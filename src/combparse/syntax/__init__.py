"""Combinator parsing package.

Provides the cursor, the parser node algebra, compression and the
arithmetic example grammar.

Python 3.13+.
"""

from .cursor import Cursor, ParseResult
from .parser import (
    Alternation,
    CharacterRange,
    CombinatorialParser,
    EndOfInput,
    ForwardReference,
    GrammarParser,
    ParserConfig,
    Repetition,
    Sequence,
    SimpleExpressionGrammar,
    Transform,
    Wrap,
    build_expression_parser,
    character,
    character_range,
    compress,
    end_of_input,
    forward_reference,
    one_of,
    parse,
    repeat,
    sequence_of,
    wrap,
)

__all__ = [
    "Alternation",
    "CharacterRange",
    "CombinatorialParser",
    "Cursor",
    "EndOfInput",
    "ForwardReference",
    "GrammarParser",
    "ParseResult",
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
    "evaluate",
    "forward_reference",
    "one_of",
    "parse",
    "repeat",
    "sequence_of",
    "wrap",
]


def evaluate(source: str) -> int:
    """Evaluate an arithmetic expression with the example grammar.

    Convenience function for build_expression_parser().parse(). Builds and
    compresses a fresh grammar on every call; keep a GrammarParser around
    when parsing repeatedly.

    Args:
        source: Expression over single digits, ``+``, ``*`` and parentheses

    Returns:
        Value folded modulo 0xFFFF

    Raises:
        ParseFailedError: If source is not a well-formed expression

    Example:
        >>> from combparse.syntax import evaluate
        >>> evaluate("1+2*3")
        7
    """
    return build_expression_parser().parse(source)
