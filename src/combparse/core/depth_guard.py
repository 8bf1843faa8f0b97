"""Depth limiting for recursion protection during parsing.

Every composite combinator is one level of Python recursion, so a deeply
nested input (or a left-recursive grammar) can exhaust the interpreter
stack. DepthGuard turns that into a DepthLimitExceededError raised before
Python's own RecursionError.

Thread-safe: uses explicit state, no thread-local storage. Each parse owns
its guard through its cursor.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from combparse.constants import MAX_PARSE_DEPTH, RECURSION_RESERVE_FRAMES
from combparse.diagnostics import CombinatorError
from combparse.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(CombinatorError):
    """Raised when maximum combinator nesting depth is exceeded.

    This error indicates either:
    - Input nested more deeply than the configured limit allows
    - A left-recursive grammar (a production that reaches itself
      without consuming input)
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in a composite combinator:
        with cursor.guard:
            result = self.p.parse_with_context(cursor)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_PARSE_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_PARSE_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing: __exit__ is not called
        when __enter__ raises, so incrementing first would leave
        current_depth permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.max_depth_exceeded(self.max_depth)
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1


def depth_clamp(
    requested_depth: int, reserve_frames: int = RECURSION_RESERVE_FRAMES
) -> int:
    """Clamp requested depth against Python recursion limit.

    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 200)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(500)  # OK, within limit
        500
        >>> depth_clamp(900)  # Exceeds limit, clamped to 800
        800
    """
    max_safe_depth = sys.getrecursionlimit() - reserve_frames
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
