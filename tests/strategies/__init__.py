"""Hypothesis strategies for combparse property-based testing.

Usage:
    from tests.strategies import arithmetic_expressions, malformed_expressions

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - arithmetic_expressions, malformed_expressions
"""

from .expressions import (
    arithmetic_expressions,
    digits,
    malformed_expressions,
    source_text,
)

__all__ = [
    "arithmetic_expressions",
    "digits",
    "malformed_expressions",
    "source_text",
]
