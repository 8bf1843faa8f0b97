"""Shared constants for combparse.

This module provides centralized configuration constants used across
the syntax, analysis and generator packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing
- Input limits: DoS prevention via size constraints
- Expression grammar: Arithmetic folded by the example grammar
- Expression generator: Deterministic input for the end-to-end fixture

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_PARSE_DEPTH",
    "RECURSION_RESERVE_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Expression grammar
    "EVAL_MODULUS",
    # Expression generator
    "DEFAULT_SEED",
    "RANDOM_MULTIPLIER",
    "RANDOM_INCREMENT",
    "RANDOM_MASK",
    "BENCHMARK_DEPTH",
    "BENCHMARK_EXPRESSION_LENGTH",
    "BENCHMARK_EXPRESSION_VALUE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Every composite combinator (sequence, alternation, repetition, wrap) is one
# level of Python recursion. In the example grammar each parenthesized
# sub-expression costs seven levels, and the start rule plus the innermost
# digit cost eight together, so n nested parentheses need 8 + 7n levels.
# The default of 500 therefore admits at most 70 nested parentheses; 71
# raise DepthLimitExceededError. The depth-20 benchmark expression nests no
# more than 20. The effective limit is also clamped to
# sys.getrecursionlimit() - RECURSION_RESERVE_FRAMES (800 under the default
# interpreter limit of 1000).
#
# ============================================================================

# Maximum combinator nesting depth for a single parse.
MAX_PARSE_DEPTH: int = 500

# Stack frames reserved for the caller's own stack (application code, test
# runners) when clamping against sys.getrecursionlimit().
RECURSION_RESERVE_FRAMES: int = 200

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB of ASCII).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# EXPRESSION GRAMMAR
# ============================================================================

# Sums and products are folded modulo this value.
EVAL_MODULUS: int = 0xFFFF

# ============================================================================
# EXPRESSION GENERATOR
# ============================================================================

# seed = (seed * RANDOM_MULTIPLIER + RANDOM_INCREMENT) & RANDOM_MASK
DEFAULT_SEED: int = 0xCAFE
RANDOM_MULTIPLIER: int = 0xDEAD
RANDOM_INCREMENT: int = 0xC0DE
RANDOM_MASK: int = 0x0FFF

# Known-good output for DEFAULT_SEED at BENCHMARK_DEPTH.
BENCHMARK_DEPTH: int = 20
BENCHMARK_EXPRESSION_LENGTH: int = 41137
BENCHMARK_EXPRESSION_VALUE: int = 31615
