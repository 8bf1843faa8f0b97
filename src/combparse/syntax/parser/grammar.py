"""Arithmetic expression grammar.

Left-associative sums and products of single digits with parentheses,
evaluated while parsing. Sums and products are folded modulo
``EVAL_MODULUS`` (0xFFFF).

Grammar:
    start     ::= exp EOI
    exp       ::= e1 (plus e1)*
    e1        ::= e2 (times e2)*
    e2        ::= number | paren_exp
    paren_exp ::= lparen exp rparen
    number    ::= digit

Every production is a forward reference, bound in ``__init__``. The grammar
is therefore cyclic (``exp`` reaches itself through ``paren_exp``) and must
be compressed before use; ``build_expression_parser()`` does both.
"""

from __future__ import annotations

from typing import Any

from combparse.constants import EVAL_MODULUS
from combparse.syntax.parser.combinators import (
    ForwardReference,
    character,
    character_range,
    end_of_input,
    forward_reference,
)
from combparse.syntax.parser.core import GrammarParser, ParserConfig

__all__ = ["SimpleExpressionGrammar", "build_expression_parser"]


def _first(value: tuple[Any, ...]) -> Any:
    return value[0]


def _second(value: tuple[Any, ...]) -> Any:
    return value[1]


def _fold_sum(value: tuple[int, tuple[tuple[str, int], ...]]) -> int:
    """Fold ``(lhs, ((op, rhs), ...))`` left to right with addition."""
    lhs, rhss = value
    for _, rhs in rhss:
        lhs = (lhs + rhs) % EVAL_MODULUS
    return lhs


def _fold_product(value: tuple[int, tuple[tuple[str, int], ...]]) -> int:
    """Fold ``(lhs, ((op, rhs), ...))`` left to right with multiplication."""
    lhs, rhss = value
    for _, rhs in rhss:
        lhs = (lhs * rhs) % EVAL_MODULUS
    return lhs


def _digit_value(char: str) -> int:
    return int(char)


class SimpleExpressionGrammar:
    """The arithmetic grammar's productions, wired together.

    Attributes:
        start: Root production; parse with ``start`` after compressing it
        exp, e1, e2, paren_exp, number: Non-terminal productions
        plus, times, digit, lparen, rparen: Terminal productions

    Example:
        >>> grammar = SimpleExpressionGrammar()
        >>> root = compress(grammar.start)
        >>> root.parse_with_context(Cursor("1+2*3")).value
        7
    """

    __slots__ = (
        "digit",
        "e1",
        "e2",
        "exp",
        "lparen",
        "number",
        "paren_exp",
        "plus",
        "rparen",
        "start",
        "times",
    )

    def __init__(self) -> None:
        self.start: ForwardReference = forward_reference("start")
        self.exp: ForwardReference = forward_reference("exp")
        self.e1: ForwardReference = forward_reference("e1")
        self.e2: ForwardReference = forward_reference("e2")

        self.paren_exp: ForwardReference = forward_reference("paren_exp")
        self.number: ForwardReference = forward_reference("number")

        self.plus: ForwardReference = forward_reference("plus")
        self.times: ForwardReference = forward_reference("times")
        self.digit: ForwardReference = forward_reference("digit")
        self.lparen: ForwardReference = forward_reference("lparen")
        self.rparen: ForwardReference = forward_reference("rparen")

        self.start.bind(self.exp.then(end_of_input()).wrap(_first))
        self.exp.bind(self.e1.then(self.plus.then(self.e1).star()).wrap(_fold_sum))
        self.e1.bind(self.e2.then(self.times.then(self.e2).star()).wrap(_fold_product))
        self.e2.bind(self.number.or_(self.paren_exp))
        self.paren_exp.bind(self.lparen.then(self.exp).then(self.rparen).wrap(_second))
        self.number.bind(self.digit.wrap(_digit_value))

        self.plus.bind(character("+"))
        self.times.bind(character("*"))
        self.digit.bind(character_range("0", "9"))
        self.lparen.bind(character("("))
        self.rparen.bind(character(")"))


def build_expression_parser(config: ParserConfig | None = None) -> GrammarParser:
    """Build and compress the arithmetic grammar.

    Args:
        config: Parse limits (default: ParserConfig())

    Returns:
        GrammarParser rooted at ``start``

    Example:
        >>> build_expression_parser().parse("(1+2)*3")
        9
    """
    return GrammarParser(SimpleExpressionGrammar().start, config)
