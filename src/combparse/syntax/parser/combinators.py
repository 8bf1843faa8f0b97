"""Parser combinators: the node algebra grammars are composed from.

A grammar is a graph of CombinatorialParser nodes. The set of node kinds is
closed:

- CharacterRange: one character in ``[lower_bound, upper_bound]``
- Sequence: every child in order, value is a tuple of child values
- Alternation: left child, or the right child from the same position
- Repetition: the child zero or more times, value is a tuple
- Wrap: the child, value passed through a transform
- EndOfInput: matches only at the end, value is None
- ForwardReference: placeholder for a production that does not exist yet

Two failure classes:
    A grammar mismatch is a ``None`` result. Alternation and Repetition
    restore the cursor and carry on; nothing else inspects it.
    A construction bug (unbound or twice-bound reference, parsing through a
    reference, calling an abstract operation) raises a GrammarError.

Recursive grammars:
    Forward references let a production mention itself before it is built.
    ``compress()`` runs once on the root before the first parse. It replaces
    every link to a forward reference with the reference's target, so
    steady-state parsing never dispatches through a placeholder. The
    ``compressed`` flag on each composite stops the pass from re-entering a
    node, which is what makes compression terminate on cyclic graphs.

Example:
    >>> digit = character_range("0", "9")
    >>> number = digit.then(digit.star()).wrap(lambda v: int(v[0] + "".join(v[1])))
    >>> number.compress().parse_with_context(Cursor("42")).value
    42
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from combparse.diagnostics import (
    AlreadyBoundError,
    CyclicReferenceError,
    ErrorTemplate,
    GrammarError,
    SubclassResponsibilityError,
    UnboundReferenceError,
    UncompressedReferenceError,
)
from combparse.syntax.cursor import Cursor, ParseResult

__all__ = [
    "Alternation",
    "CharacterRange",
    "CombinatorialParser",
    "EndOfInput",
    "ForwardReference",
    "Repetition",
    "Sequence",
    "Transform",
    "Wrap",
    "character",
    "character_range",
    "compress",
    "end_of_input",
    "forward_reference",
    "one_of",
    "repeat",
    "sequence_of",
    "wrap",
]

logger = logging.getLogger(__name__)

Transform: TypeAlias = Callable[[Any], Any]


class CombinatorialParser:
    """Base class of every parser node.

    Subclasses implement ``parse_with_context`` and ``compress``. The fluent
    builder methods (``then``, ``or_``, ``star``, ``wrap``) are shared.

    Attributes:
        compressed: Set once the node has been visited by compression
    """

    __slots__ = ("compressed",)

    def __init__(self) -> None:
        self.compressed = False

    def parse_with_context(self, cursor: Cursor) -> ParseResult[Any] | None:
        """Attempt a match at the cursor.

        Returns:
            ParseResult on match, None on grammar mismatch
        """
        raise SubclassResponsibilityError(
            ErrorTemplate.subclass_responsibility(type(self).__name__, "parse_with_context")
        )

    def compress(self) -> CombinatorialParser:
        """Resolve forward references below this node, in place.

        Returns:
            The node that should replace this one in its parent
        """
        raise SubclassResponsibilityError(
            ErrorTemplate.subclass_responsibility(type(self).__name__, "compress")
        )

    def bind(self, parser: CombinatorialParser) -> None:  # noqa: ARG002
        """Only forward references can be bound."""
        raise GrammarError(ErrorTemplate.bind_unsupported(type(self).__name__))

    def then(self, parser: CombinatorialParser) -> Sequence:
        """Sequence this parser with another."""
        return Sequence((self, parser))

    def or_(self, parser: CombinatorialParser) -> Alternation:
        """Try this parser, then ``parser`` from the same position."""
        return Alternation(self, parser)

    def star(self) -> Repetition:
        """Match this parser zero or more times."""
        return Repetition(self)

    def wrap(self, transform: Transform) -> Wrap:
        """Pass this parser's value through ``transform``."""
        return Wrap(self, transform)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CharacterRange(CombinatorialParser):
    """Single character between two bounds, inclusive.

    Checks the character before consuming it, so a mismatch never moves
    the cursor.
    """

    __slots__ = ("lower_bound", "upper_bound")

    def __init__(self, lower_bound: str, upper_bound: str) -> None:
        """Initialize range.

        Raises:
            ValueError: If a bound is not a single character or the range
                is empty
        """
        super().__init__()
        if len(lower_bound) != 1 or len(upper_bound) != 1:
            msg = f"Range bounds must be single characters, got {lower_bound!r}, {upper_bound!r}"
            raise ValueError(msg)
        if lower_bound > upper_bound:
            msg = f"Empty character range {lower_bound!r}-{upper_bound!r}"
            raise ValueError(msg)
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    def parse_with_context(self, cursor: Cursor) -> ParseResult[str] | None:
        pos = cursor.pos
        source = cursor.source
        if pos < len(source):
            char = source[pos]
            if self.lower_bound <= char <= self.upper_bound:
                cursor.pos = pos + 1
                return ParseResult(char, pos + 1)
        return None

    def compress(self) -> CharacterRange:
        return self

    def __repr__(self) -> str:
        return f"CharacterRange({self.lower_bound!r}, {self.upper_bound!r})"


class Sequence(CombinatorialParser):
    """Children matched one after another on the same cursor.

    On a mismatch the cursor is left where the failing child left it.
    Restoring it is the job of the enclosing Alternation or Repetition.
    """

    __slots__ = ("subparsers",)

    def __init__(self, subparsers: tuple[CombinatorialParser, ...] | list[CombinatorialParser]) -> None:
        super().__init__()
        # List so compression can splice references out in place
        self.subparsers: list[CombinatorialParser] = list(subparsers)

    def then(self, parser: CombinatorialParser) -> Sequence:
        """Return a new sequence with ``parser`` appended."""
        return Sequence((*self.subparsers, parser))

    def parse_with_context(self, cursor: Cursor) -> ParseResult[tuple[Any, ...]] | None:
        values: list[Any] = []
        with cursor.guard:
            for parser in self.subparsers:
                result = parser.parse_with_context(cursor)
                if result is None:
                    return None
                values.append(result.value)
        return ParseResult(tuple(values), cursor.pos)

    def compress(self) -> Sequence:
        if self.compressed:
            return self
        self.compressed = True
        try:
            for i, parser in enumerate(self.subparsers):
                self.subparsers[i] = parser.compress()
        except GrammarError:
            self.compressed = False
            raise
        return self

    def __repr__(self) -> str:
        return f"Sequence(<{len(self.subparsers)} parsers>)"


class Alternation(CombinatorialParser):
    """Ordered choice: first match wins, no ambiguity resolution."""

    __slots__ = ("p", "q")

    def __init__(self, p: CombinatorialParser, q: CombinatorialParser) -> None:
        super().__init__()
        self.p = p
        self.q = q

    def parse_with_context(self, cursor: Cursor) -> ParseResult[Any] | None:
        pos = cursor.position
        with cursor.guard:
            result = self.p.parse_with_context(cursor)
            if result is not None:
                return result
            cursor.position = pos
            return self.q.parse_with_context(cursor)

    def compress(self) -> Alternation:
        if self.compressed:
            return self
        self.compressed = True
        try:
            self.p = self.p.compress()
            self.q = self.q.compress()
        except GrammarError:
            self.compressed = False
            raise
        return self


class Repetition(CombinatorialParser):
    """Zero or more matches of the child. Never fails.

    A match that consumes nothing ends the loop without being recorded;
    it would otherwise repeat forever at the same position.
    """

    __slots__ = ("p",)

    def __init__(self, p: CombinatorialParser) -> None:
        super().__init__()
        self.p = p

    def parse_with_context(self, cursor: Cursor) -> ParseResult[tuple[Any, ...]]:
        values: list[Any] = []
        with cursor.guard:
            while True:
                pos = cursor.position
                result = self.p.parse_with_context(cursor)
                if result is None:
                    cursor.position = pos
                    break
                if cursor.pos == pos:
                    break
                values.append(result.value)
        return ParseResult(tuple(values), cursor.pos)

    def compress(self) -> Repetition:
        if self.compressed:
            return self
        self.compressed = True
        try:
            self.p = self.p.compress()
        except GrammarError:
            self.compressed = False
            raise
        return self


class Wrap(CombinatorialParser):
    """Semantic action: the child's value mapped through a transform."""

    __slots__ = ("p", "transform")

    def __init__(self, p: CombinatorialParser, transform: Transform) -> None:
        super().__init__()
        self.p = p
        self.transform = transform

    def parse_with_context(self, cursor: Cursor) -> ParseResult[Any] | None:
        with cursor.guard:
            result = self.p.parse_with_context(cursor)
        if result is None:
            return None
        return ParseResult(self.transform(result.value), result.pos)

    def compress(self) -> Wrap:
        if self.compressed:
            return self
        self.compressed = True
        try:
            self.p = self.p.compress()
        except GrammarError:
            self.compressed = False
            raise
        return self


class EndOfInput(CombinatorialParser):
    """Matches only when the cursor is exhausted. Never consumes."""

    __slots__ = ()

    def parse_with_context(self, cursor: Cursor) -> ParseResult[None] | None:
        if cursor.is_eof:
            return ParseResult(None, cursor.pos)
        return None

    def compress(self) -> EndOfInput:
        return self


class ForwardReference(CombinatorialParser):
    """Construction-time placeholder for a production built later.

    Bind exactly once; compression then splices the reference out of the
    graph. A compressed grammar never dispatches through one.
    """

    __slots__ = ("forwardee", "name")

    def __init__(self, name: str | None = None) -> None:
        super().__init__()
        self.name = name
        self.forwardee: CombinatorialParser | None = None

    @property
    def is_bound(self) -> bool:
        """True once bind() has been called."""
        return self.forwardee is not None

    @property
    def label(self) -> str:
        """Display label used in error messages."""
        if self.name is None:
            return f"<anonymous at {id(self):#x}>"
        return repr(self.name)

    def bind(self, parser: CombinatorialParser) -> None:
        """Bind the placeholder to the parser it stands for.

        Raises:
            AlreadyBoundError: If already bound
        """
        if self.forwardee is not None:
            raise AlreadyBoundError(ErrorTemplate.reference_already_bound(self.label))
        self.forwardee = parser
        logger.debug("Bound forward reference %s to %r", self.label, parser)

    def resolve(self) -> CombinatorialParser:
        """Follow the chain of forward references to a concrete parser.

        Raises:
            UnboundReferenceError: If any reference in the chain is unbound
            CyclicReferenceError: If the chain loops without reaching a
                concrete parser
        """
        chain: list[ForwardReference] = []
        target: CombinatorialParser | None = self
        while isinstance(target, ForwardReference):
            if any(ref is target for ref in chain):
                labels = [ref.label for ref in chain] + [target.label]
                raise CyclicReferenceError(ErrorTemplate.reference_cycle(labels))
            if target.forwardee is None:
                raise UnboundReferenceError(ErrorTemplate.unbound_reference(target.label))
            chain.append(target)
            target = target.forwardee
        return target

    def compress(self) -> CombinatorialParser:
        return self.resolve().compress()

    def parse_with_context(self, cursor: Cursor) -> ParseResult[Any] | None:
        raise UncompressedReferenceError(ErrorTemplate.reference_not_compressed(self.label))

    def __repr__(self) -> str:
        return f"ForwardReference({self.name!r})"


# =============================================================================
# Construction API
# =============================================================================


def character(char: str) -> CharacterRange:
    """Parser for exactly ``char``."""
    return CharacterRange(char, char)


def character_range(lower_bound: str, upper_bound: str) -> CharacterRange:
    """Parser for one character in ``[lower_bound, upper_bound]``."""
    return CharacterRange(lower_bound, upper_bound)


def sequence_of(*parsers: CombinatorialParser) -> Sequence:
    """Parser for every argument in order."""
    return Sequence(parsers)


def one_of(
    first: CombinatorialParser, second: CombinatorialParser, *rest: CombinatorialParser
) -> Alternation:
    """Ordered choice over two or more parsers, tried left to right."""
    if rest:
        return Alternation(first, one_of(second, *rest))
    return Alternation(first, second)


def repeat(parser: CombinatorialParser) -> Repetition:
    """Parser for zero or more ``parser`` matches."""
    return Repetition(parser)


def wrap(parser: CombinatorialParser, transform: Transform) -> Wrap:
    """Parser whose value is ``transform`` applied to ``parser``'s value."""
    return Wrap(parser, transform)


def end_of_input() -> EndOfInput:
    """Parser that matches only at end of input."""
    return EndOfInput()


def forward_reference(name: str | None = None) -> ForwardReference:
    """Unbound placeholder; call ``bind()`` on it once the target exists."""
    return ForwardReference(name)


def compress(root: CombinatorialParser) -> CombinatorialParser:
    """Compress a grammar once before parsing with it.

    Idempotent: compressing an already compressed root returns the same
    node without walking the graph again.

    A failed pass clears the ``compressed`` flag on every node it was still
    inside when the error surfaced, so binding the missing reference and
    compressing again completes the grammar.

    Returns:
        The root to parse with (the bound target when ``root`` is a
        forward reference)

    Raises:
        UnboundReferenceError: If a reachable reference is unbound
        CyclicReferenceError: If references resolve only to each other
    """
    compressed = root.compress()
    logger.debug("Compressed grammar rooted at %r", compressed)
    return compressed
