"""Deterministic arithmetic expression generator.

Produces reproducible input for the expression grammar from a small linear
congruential generator:

    seed = (seed * 0xDEAD + 0xC0DE) & 0x0FFF

``expression(depth)`` is a single digit at depth 0. Above that it picks one
of ``f+f``, ``f*f`` or ``(f)`` by ``next_random() % 3``, where each ``f`` is
an expression one level shallower, generated left operand first.

With the default seed, depth 20 yields a 41137-character expression that
evaluates to 31615.

Python 3.13+. Zero external dependencies.
"""

from combparse.constants import (
    DEFAULT_SEED,
    RANDOM_INCREMENT,
    RANDOM_MASK,
    RANDOM_MULTIPLIER,
)

__all__ = ["ExpressionGenerator", "random_expression"]


class ExpressionGenerator:
    """Stateful generator; each call advances the shared seed.

    Example:
        >>> gen = ExpressionGenerator()
        >>> len(gen.expression(20))
        41137
    """

    __slots__ = ("seed",)

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed

    def next_random(self) -> int:
        """Advance the generator and return the new 12-bit seed."""
        self.seed = (self.seed * RANDOM_MULTIPLIER + RANDOM_INCREMENT) & RANDOM_MASK
        return self.seed

    def expression(self, depth: int) -> str:
        """Generate an expression nested ``depth`` levels deep."""
        return "".join(self._emit(depth, []))

    def _emit(self, depth: int, out: list[str]) -> list[str]:
        if depth < 1:
            out.append(str(self.next_random() % 10))
            return out
        match self.next_random() % 3:
            case 0:
                self._emit(depth - 1, out)
                out.append("+")
                self._emit(depth - 1, out)
            case 1:
                self._emit(depth - 1, out)
                out.append("*")
                self._emit(depth - 1, out)
            case _:
                out.append("(")
                self._emit(depth - 1, out)
                out.append(")")
        return out


def random_expression(depth: int, seed: int = DEFAULT_SEED) -> str:
    """Generate an expression from a fresh generator.

    Args:
        depth: Nesting depth (0 gives a single digit)
        seed: Initial generator state

    Returns:
        Expression text
    """
    return ExpressionGenerator(seed).expression(depth)
