"""Performance benchmarks for combparse.

Benchmarks use pytest-benchmark to measure and track performance of grammar
preparation and parsing. Prevents performance regressions in the combinator
engine.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
