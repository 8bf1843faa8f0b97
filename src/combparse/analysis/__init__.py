"""Graph analysis utilities for parser grammars.

Provides traversal and unbound-reference detection over the (possibly
cyclic) graph of parser nodes.

Python 3.13+.
"""

from .graph import count_parsers, find_unbound_references, walk_parsers

__all__ = [
    "count_parsers",
    "find_unbound_references",
    "walk_parsers",
]
