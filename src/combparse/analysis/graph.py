"""Graph algorithms over parser node graphs.

Grammars built with forward references are cyclic. These helpers walk them
without recursion, visiting every node once, and follow forward references
to their targets whether or not the grammar has been compressed.

Python 3.13+.
"""

from collections.abc import Iterator

from combparse.syntax.parser.combinators import (
    Alternation,
    CombinatorialParser,
    ForwardReference,
    Repetition,
    Sequence,
    Wrap,
)

__all__ = ["count_parsers", "find_unbound_references", "walk_parsers"]


def _children(node: CombinatorialParser) -> tuple[CombinatorialParser, ...]:
    """Direct successors of a node in the grammar graph."""
    match node:
        case Sequence():
            return tuple(node.subparsers)
        case Alternation():
            return (node.p, node.q)
        case Repetition() | Wrap():
            return (node.p,)
        case ForwardReference() if node.forwardee is not None:
            return (node.forwardee,)
        case _:
            return ()


def walk_parsers(root: CombinatorialParser) -> Iterator[CombinatorialParser]:
    """Yield every node reachable from root exactly once, depth-first.

    Implements iterative DFS with explicit stack to avoid RecursionError
    on long grammar chains. Nodes are tracked by identity: two distinct
    ``character("+")`` nodes are both yielded.

    Args:
        root: Grammar root (compressed or not)

    Yields:
        Reachable nodes in pre-order, children left to right

    Example:
        >>> exp = forward_reference("exp")
        >>> exp.bind(character("(").then(exp).then(character(")")).or_(character("x")))
        >>> [type(n).__name__ for n in walk_parsers(exp)]
        ['ForwardReference', 'Alternation', 'Sequence', 'CharacterRange', 'CharacterRange', 'CharacterRange']
    """
    visited: set[int] = set()
    stack: list[CombinatorialParser] = [root]

    while stack:
        node = stack.pop()
        if id(node) in visited:
            continue
        visited.add(id(node))
        yield node
        # Reversed so the leftmost child is popped first
        stack.extend(
            child for child in reversed(_children(node)) if id(child) not in visited
        )


def find_unbound_references(root: CombinatorialParser) -> list[ForwardReference]:
    """List every reachable forward reference that was never bound.

    Compression stops at the first unbound reference it meets; this reports
    all of them so a grammar can be fixed in one pass.

    Args:
        root: Grammar root, before compression

    Returns:
        Unbound references in traversal order. Empty list if none.
    """
    return [
        node
        for node in walk_parsers(root)
        if isinstance(node, ForwardReference) and not node.is_bound
    ]


def count_parsers(root: CombinatorialParser) -> int:
    """Number of distinct nodes reachable from root."""
    return sum(1 for _ in walk_parsers(root))
