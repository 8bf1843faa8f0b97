"""Cursor infrastructure for backtracking parsing.

Design Philosophy:
    - The source is immutable; only the position moves
    - EOF is a state (is_eof), not a return value
    - Backtracking is an explicit save/restore of ``position``
    - One cursor per parse: it owns the parse's DepthGuard, so combinator
      nodes never hold per-parse state and can be shared across threads

Pattern Reference:
    - parsimonious (Python PEG parser)
    - Haskell Parsec
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from combparse.core.depth_guard import DepthGuard
from combparse.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult"]

T = TypeVar("T")


@dataclass(slots=True)
class Cursor:
    """Mutable position over an immutable source string.

    Key Design Decisions:
        1. Slots - the cursor is created once per parse and touched for
           every character
        2. Simple position - just an integer offset
        3. EOF is a property - not a return value
        4. position setter validates - a restore can never leave the cursor
           outside the source

    Invariant:
        ``0 <= pos <= len(source)``

    Example:
        >>> cursor = Cursor("hi")
        >>> cursor.next()
        'h'
        >>> saved = cursor.position
        >>> cursor.next()
        'i'
        >>> cursor.is_eof
        True
        >>> cursor.position = saved
        >>> cursor.current
        'i'
        >>> Cursor("hi", 2).next()
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2
    """

    source: str
    pos: int = 0
    guard: DepthGuard = field(default_factory=DepthGuard, repr=False)

    def __post_init__(self) -> None:
        """Validate the starting position.

        Raises:
            ValueError: If pos is outside 0..len(source)
        """
        self._check_position(self.pos)

    def _check_position(self, pos: int) -> None:
        if not 0 <= pos <= len(self.source):
            msg = f"Cursor position {pos} outside source of length {len(self.source)}"
            raise ValueError(msg)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position == source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character without advancing.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def remaining(self) -> int:
        """Number of characters not yet consumed."""
        return len(self.source) - self.pos

    @property
    def position(self) -> int:
        """Current offset, for saving before a guarded attempt."""
        return self.pos

    @position.setter
    def position(self, pos: int) -> None:
        """Restore a previously saved offset.

        Raises:
            ValueError: If pos is outside 0..len(source)
        """
        self._check_position(pos)
        self.pos = pos

    def next(self) -> str:
        """Return the current character and advance past it.

        Raises:
            EOFError: If at end of input. Callers check is_eof first.
        """
        char = self.current
        self.pos += 1
        return char

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Successful parse: the produced value and the position after it.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every combinator has signature:
            def parse_with_context(self, cursor: Cursor) -> ParseResult[Any] | None

        ``None`` is the recoverable no-match signal. It is distinct from a
        successful ParseResult whose value happens to be None (end of input).

    Example:
        >>> cursor = Cursor("hello")
        >>> result = ParseResult(cursor.next(), cursor.position)
        >>> result.value
        'h'
        >>> result.pos
        1
    """

    value: T
    pos: int
