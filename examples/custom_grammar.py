"""Custom Grammar Example - Building Your Own Parser.

Demonstrates building a grammar from the combinator construction API:

1. Terminals and character ranges
2. Repetition and semantic actions
3. Recursive productions with forward references
4. Validation of unfinished grammars
5. Inspecting the compressed graph

The grammar parses nested integer lists such as ``[1,[22,333],[]]`` into
Python lists.

Python 3.13+.
"""

from __future__ import annotations


from combparse import (
    GrammarParser,
    UnboundReferenceError,
    character,
    character_range,
    end_of_input,
    forward_reference,
    one_of,
    repeat,
    sequence_of,
)
from combparse.analysis import walk_parsers


def build_list_grammar() -> GrammarParser:
    """Grammar for nested lists of non-negative integers.

    document ::= value EOI
    value    ::= integer | list
    list     ::= '[' (value (',' value)*)? ']'
    integer  ::= digit digit*
    """
    digit = character_range("0", "9")
    integer = sequence_of(digit, repeat(digit)).wrap(lambda v: int(v[0] + "".join(v[1])))

    value = forward_reference("value")
    items = sequence_of(value, repeat(sequence_of(character(","), value))).wrap(
        lambda v: [v[0], *(rhs for _, rhs in v[1])]
    )
    closing = character("]")
    list_ = one_of(
        sequence_of(character("["), closing).wrap(lambda _: []),
        sequence_of(character("["), items, closing).wrap(lambda v: v[1]),
    )
    value.bind(integer.or_(list_))

    document = sequence_of(value, end_of_input()).wrap(lambda v: v[0])
    return GrammarParser(document)


def example_1_parse_lists() -> None:
    """Parse nested lists."""
    print("=" * 60)
    print("Example 1: Parsing Nested Lists")
    print("=" * 60)

    parser = build_list_grammar()
    for source in ["7", "[]", "[1,22,333]", "[1,[2,[3]],[]]"]:
        print(f"{source!r:20} -> {parser.parse(source)!r}")
    print()


def example_2_rejection() -> None:
    """Malformed input is a mismatch, not an exception."""
    print("=" * 60)
    print("Example 2: Rejected Input")
    print("=" * 60)

    parser = build_list_grammar()
    for source in ["[1,", "[,]", "[1 2]", "01a"]:
        print(f"{source!r:20} -> {parser.try_parse(source)!r}")
    print()


def example_3_unbound_reference() -> None:
    """GrammarParser reports every unbound reference at once."""
    print("=" * 60)
    print("Example 3: Unfinished Grammar")
    print("=" * 60)

    key = forward_reference("key")
    value = forward_reference("value")
    pair = sequence_of(key, character("="), value)

    try:
        GrammarParser(pair)
    except UnboundReferenceError as e:
        print(e)
    print()


def example_4_inspect_graph() -> None:
    """Count node kinds in the compressed grammar."""
    print("=" * 60)
    print("Example 4: Inspecting the Compressed Graph")
    print("=" * 60)

    parser = build_list_grammar()
    kinds: dict[str, int] = {}
    for node in walk_parsers(parser.root):
        kinds[type(node).__name__] = kinds.get(type(node).__name__, 0) + 1

    for kind, count in sorted(kinds.items()):
        print(f"{kind:20} {count}")
    print(f"{'total':20} {parser.node_count}")
    print()


def main() -> None:
    """Run all custom grammar examples."""
    print()
    print("combparse Custom Grammar Examples")
    print()

    example_1_parse_lists()
    example_2_rejection()
    example_3_unbound_reference()
    example_4_inspect_graph()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
