"""Tests for syntax.parser.combinators: per-variant match semantics.

Each combinator is exercised directly against a Cursor, before and after
compression where it matters.
"""

from __future__ import annotations

import pytest

from combparse.diagnostics import (
    AlreadyBoundError,
    DiagnosticCode,
    GrammarError,
    SubclassResponsibilityError,
    UncompressedReferenceError,
)
from combparse.syntax.cursor import Cursor
from combparse.syntax.parser.combinators import (
    Alternation,
    CharacterRange,
    CombinatorialParser,
    EndOfInput,
    ForwardReference,
    Repetition,
    Sequence,
    Wrap,
    character,
    character_range,
    end_of_input,
    forward_reference,
    one_of,
    repeat,
    sequence_of,
    wrap,
)

# ============================================================================
# CHARACTER RANGE
# ============================================================================


class TestCharacterRange:
    """Test the single-character leaf."""

    def test_matches_in_range(self) -> None:
        """Character inside the bounds is consumed and returned."""
        cursor = Cursor("5")

        result = character_range("0", "9").parse_with_context(cursor)

        assert result is not None
        assert result.value == "5"
        assert result.pos == 1
        assert cursor.pos == 1

    @pytest.mark.parametrize("char", ["0", "9"])
    def test_bounds_are_inclusive(self, char: str) -> None:
        """Both bounds match."""
        assert character_range("0", "9").parse_with_context(Cursor(char)) is not None

    def test_mismatch_does_not_consume(self) -> None:
        """A character outside the range leaves the cursor unchanged."""
        cursor = Cursor("x")

        assert character_range("0", "9").parse_with_context(cursor) is None
        assert cursor.pos == 0

    def test_eof_is_mismatch(self) -> None:
        """At end of input the range fails without raising."""
        cursor = Cursor("1", 1)

        assert character("1").parse_with_context(cursor) is None
        assert cursor.pos == 1

    def test_single_character(self) -> None:
        """character(c) matches only c."""
        plus = character("+")

        assert plus.parse_with_context(Cursor("+")) is not None
        assert plus.parse_with_context(Cursor("*")) is None

    @pytest.mark.parametrize(("lo", "hi"), [("", "a"), ("ab", "c"), ("a", "")])
    def test_bounds_must_be_single_characters(self, lo: str, hi: str) -> None:
        """Multi-character or empty bounds are rejected."""
        with pytest.raises(ValueError, match="single characters"):
            CharacterRange(lo, hi)

    def test_empty_range_rejected(self) -> None:
        """Lower bound above upper bound is rejected."""
        with pytest.raises(ValueError, match="Empty character range"):
            character_range("9", "0")

    def test_compress_returns_self(self) -> None:
        """Leaves compress to themselves."""
        leaf = character("a")

        assert leaf.compress() is leaf


# ============================================================================
# SEQUENCE
# ============================================================================


class TestSequence:
    """Test ordered composition."""

    def test_returns_tuple_of_child_values(self) -> None:
        """Success value has one entry per child."""
        parser = sequence_of(character("a"), character("b"), character("c"))

        result = parser.parse_with_context(Cursor("abc"))

        assert result is not None
        assert result.value == ("a", "b", "c")
        assert result.pos == 3

    def test_any_child_failure_fails_sequence(self) -> None:
        """The first mismatching child fails the whole sequence."""
        parser = sequence_of(character("a"), character("b"))

        assert parser.parse_with_context(Cursor("ax")) is None

    def test_failure_leaves_partial_consumption(self) -> None:
        """Sequence does not restore; the enclosing combinator does."""
        cursor = Cursor("ax")

        sequence_of(character("a"), character("b")).parse_with_context(cursor)

        assert cursor.pos == 1

    def test_then_builds_flat_sequence(self) -> None:
        """Chained then() appends rather than nesting."""
        parser = character("a").then(character("b")).then(character("c"))

        assert isinstance(parser, Sequence)
        assert len(parser.subparsers) == 3
        assert parser.parse_with_context(Cursor("abc")).value == ("a", "b", "c")

    def test_then_does_not_mutate_original(self) -> None:
        """Appending returns a new sequence."""
        base = sequence_of(character("a"))

        extended = base.then(character("b"))

        assert len(base.subparsers) == 1
        assert len(extended.subparsers) == 2

    def test_empty_sequence_matches_nothing(self) -> None:
        """A sequence with no children succeeds with an empty tuple."""
        result = sequence_of().parse_with_context(Cursor("x"))

        assert result is not None
        assert result.value == ()


# ============================================================================
# ALTERNATION
# ============================================================================


class TestAlternation:
    """Test ordered choice."""

    def test_left_wins_when_it_matches(self) -> None:
        """Left alternative is tried first."""
        parser = character_range("a", "z").or_(character("a").wrap(lambda _: "right"))

        assert parser.parse_with_context(Cursor("a")).value == "a"

    def test_falls_back_to_right(self) -> None:
        """Right alternative is tried when left fails."""
        parser = character("a").or_(character("b"))

        assert parser.parse_with_context(Cursor("b")).value == "b"

    def test_restores_position_before_right(self) -> None:
        """Partial consumption by the left branch is undone."""
        left = sequence_of(character("a"), character("b"))
        right = sequence_of(character("a"), character("c"))
        cursor = Cursor("ac")

        result = left.or_(right).parse_with_context(cursor)

        assert result is not None
        assert result.value == ("a", "c")

    def test_right_failure_is_returned_as_is(self) -> None:
        """No further fallback after the right branch fails."""
        parser = character("a").or_(character("b"))

        assert parser.parse_with_context(Cursor("c")) is None

    def test_one_of_is_ordered(self) -> None:
        """one_of() tries alternatives left to right."""
        parser = one_of(
            character("a").wrap(lambda _: 1),
            character_range("a", "z").wrap(lambda _: 2),
            character_range("a", "z").wrap(lambda _: 3),
        )

        assert parser.parse_with_context(Cursor("a")).value == 1
        assert parser.parse_with_context(Cursor("q")).value == 2
        assert parser.parse_with_context(Cursor("Q")) is None

    def test_one_of_two(self) -> None:
        """one_of() with two parsers is a single alternation."""
        parser = one_of(character("a"), character("b"))

        assert isinstance(parser, Alternation)
        assert isinstance(parser.q, CharacterRange)


# ============================================================================
# REPETITION
# ============================================================================


class TestRepetition:
    """Test zero-or-more."""

    def test_collects_all_matches(self) -> None:
        """Every consecutive match is collected."""
        result = repeat(character("a")).parse_with_context(Cursor("aaab"))

        assert result is not None
        assert result.value == ("a", "a", "a")
        assert result.pos == 3

    def test_zero_matches_is_success(self) -> None:
        """No match at all gives an empty tuple, not a failure."""
        cursor = Cursor("b")

        result = character("a").star().parse_with_context(cursor)

        assert result is not None
        assert result.value == ()
        assert cursor.pos == 0

    def test_succeeds_at_eof(self) -> None:
        """Repetition succeeds at end of input."""
        assert repeat(character("a")).parse_with_context(Cursor("")).value == ()

    def test_restores_after_partial_iteration(self) -> None:
        """A failed iteration that consumed input is rolled back."""
        pair = sequence_of(character("a"), character("b"))
        cursor = Cursor("ababac")

        result = repeat(pair).parse_with_context(cursor)

        assert result.value == (("a", "b"), ("a", "b"))
        assert cursor.pos == 4

    def test_stops_on_zero_width_match(self) -> None:
        """A child that matches without consuming ends the loop."""
        result = repeat(end_of_input()).parse_with_context(Cursor(""))

        assert result is not None
        assert result.value == ()

    def test_nested_star_terminates(self) -> None:
        """star of star does not loop forever."""
        result = character("a").star().star().parse_with_context(Cursor("aa"))

        assert result.value == (("a", "a"),)


# ============================================================================
# WRAP
# ============================================================================


class TestWrap:
    """Test semantic transforms."""

    def test_transform_applied(self) -> None:
        """The child's value is passed through the transform."""
        parser = wrap(character_range("0", "9"), int)

        assert parser.parse_with_context(Cursor("7")).value == 7

    def test_failure_propagates(self) -> None:
        """Transform is not called on mismatch."""
        calls: list[object] = []
        parser = character("a").wrap(calls.append)

        assert parser.parse_with_context(Cursor("b")) is None
        assert calls == []

    def test_transform_may_return_none(self) -> None:
        """A None-valued transform result is still a match."""
        result = character("a").wrap(lambda _: None).parse_with_context(Cursor("a"))

        assert result is not None
        assert result.value is None

    def test_transform_exceptions_propagate(self) -> None:
        """Errors raised by a transform are not mistaken for a mismatch."""

        def boom(_: object) -> object:
            raise ZeroDivisionError

        with pytest.raises(ZeroDivisionError):
            character("a").wrap(boom).parse_with_context(Cursor("a"))


# ============================================================================
# END OF INPUT
# ============================================================================


class TestEndOfInput:
    """Test the end-of-input leaf."""

    def test_matches_at_end(self) -> None:
        """Succeeds with None at end of input."""
        result = end_of_input().parse_with_context(Cursor("ab", 2))

        assert result is not None
        assert result.value is None
        assert result.pos == 2

    def test_fails_before_end(self) -> None:
        """Fails (without consuming) when input remains."""
        cursor = Cursor("ab", 1)

        assert EndOfInput().parse_with_context(cursor) is None
        assert cursor.pos == 1


# ============================================================================
# FORWARD REFERENCE
# ============================================================================


class TestForwardReference:
    """Test forward reference binding rules."""

    def test_bind_once(self) -> None:
        """A reference can be bound to a parser."""
        ref = forward_reference("digit")
        target = character_range("0", "9")

        ref.bind(target)

        assert ref.is_bound
        assert ref.forwardee is target

    def test_bind_twice_is_fatal(self) -> None:
        """Binding twice raises AlreadyBoundError."""
        ref = forward_reference("digit")
        ref.bind(character("1"))

        with pytest.raises(AlreadyBoundError, match="'digit' is already bound") as exc_info:
            ref.bind(character("2"))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.REFERENCE_ALREADY_BOUND

    def test_failed_rebind_keeps_first_target(self) -> None:
        """The original binding survives a rejected second bind."""
        ref = forward_reference()
        first = character("1")
        ref.bind(first)

        with pytest.raises(AlreadyBoundError):
            ref.bind(character("2"))
        assert ref.forwardee is first

    def test_parse_through_reference_is_fatal(self) -> None:
        """Parsing an uncompressed reference raises, it is not a mismatch."""
        ref = forward_reference("exp")
        ref.bind(character("1"))

        with pytest.raises(UncompressedReferenceError, match="compressed away"):
            ref.parse_with_context(Cursor("1"))

    def test_parse_through_nested_uncompressed_reference_is_fatal(self) -> None:
        """An uncompressed reference inside a composite is also fatal."""
        ref = forward_reference("b")
        ref.bind(character("b"))
        parser = character("a").then(ref)

        with pytest.raises(UncompressedReferenceError):
            parser.parse_with_context(Cursor("ab"))

    def test_anonymous_label(self) -> None:
        """Unnamed references get an identity-based label."""
        assert forward_reference().label.startswith("<anonymous at 0x")

    def test_named_label(self) -> None:
        """Named references use the quoted name."""
        assert ForwardReference("exp").label == "'exp'"


# ============================================================================
# BASE CLASS CONTRACT
# ============================================================================


class TestBaseParser:
    """Test the abstract base and builder methods."""

    def test_parse_is_subclass_responsibility(self) -> None:
        """The base parse_with_context is abstract."""
        with pytest.raises(SubclassResponsibilityError, match="parse_with_context"):
            CombinatorialParser().parse_with_context(Cursor(""))

    def test_compress_is_subclass_responsibility(self) -> None:
        """The base compress is abstract."""
        with pytest.raises(SubclassResponsibilityError, match="compress"):
            CombinatorialParser().compress()

    @pytest.mark.parametrize(
        "parser",
        [character("a"), sequence_of(), end_of_input(), repeat(character("a"))],
    )
    def test_bind_only_on_forward_references(self, parser: CombinatorialParser) -> None:
        """bind() on anything but a forward reference is a grammar error."""
        with pytest.raises(GrammarError, match="cannot be bound"):
            parser.bind(character("b"))

    def test_builder_methods_return_variants(self) -> None:
        """Fluent builders produce the matching node kinds."""
        a = character("a")

        assert isinstance(a.then(a), Sequence)
        assert isinstance(a.or_(a), Alternation)
        assert isinstance(a.star(), Repetition)
        assert isinstance(a.wrap(str), Wrap)

    def test_repr_does_not_recurse(self) -> None:
        """repr of a cyclic grammar terminates."""
        ref = forward_reference("loop")
        seq = character("(").then(ref)
        ref.bind(seq.or_(character("x")))

        assert repr(seq) == "Sequence(<2 parsers>)"
        assert repr(ref) == "ForwardReference('loop')"
