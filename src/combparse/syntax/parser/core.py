"""Parse entry points.

This module provides the plain ``parse(root, cursor)`` entry point and the
GrammarParser class that prepares a grammar once and then parses source
strings with it.

Architecture:
    GrammarParser checks the grammar for unbound forward references (all of
    them, not just the first), compresses it once, and then creates a fresh
    :class:`~combparse.syntax.cursor.Cursor` per parse. The compressed node
    graph is never mutated by parsing, so one GrammarParser can serve any
    number of threads.

Security:
    Includes configurable input size limit and combinator nesting depth
    limit so hostile input fails with a CombinatorError instead of
    exhausting memory or the interpreter stack.

See Also:
    - :mod:`combparse.syntax.parser.combinators` - the node algebra
    - :mod:`combparse.syntax.parser.grammar` - the arithmetic example grammar
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from combparse.analysis.graph import count_parsers, find_unbound_references
from combparse.constants import MAX_PARSE_DEPTH, MAX_SOURCE_SIZE
from combparse.core.depth_guard import DepthGuard
from combparse.diagnostics import (
    ErrorTemplate,
    ParseFailedError,
    UnboundReferenceError,
)
from combparse.syntax.cursor import Cursor, ParseResult
from combparse.syntax.parser.combinators import CombinatorialParser, compress

__all__ = ["GrammarParser", "ParserConfig", "parse"]

logger = logging.getLogger(__name__)


def parse(root: CombinatorialParser, cursor: Cursor) -> ParseResult[Any] | None:
    """Run a compressed grammar against a cursor.

    Args:
        root: Compressed grammar root
        cursor: Fresh cursor, owned by this call

    Returns:
        ParseResult on match, None if the input does not match
    """
    return root.parse_with_context(cursor)


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for GrammarParser.

    All fields have sensible defaults; ``ParserConfig()`` is usable as is.

    Attributes:
        max_depth: Maximum combinator nesting depth per parse
            (default: 500, which admits 70 nested parentheses in the
            example grammar). Clamped against the interpreter recursion limit
            when each parse starts.
        max_source_size: Maximum source length in characters
            (default: 10 MB). 0 disables the limit (not recommended).

    Example:
        >>> config = ParserConfig(max_depth=200)
        >>> parser = GrammarParser(grammar.start, config)
        >>> parser.config.max_depth
        200
    """

    max_depth: int = MAX_PARSE_DEPTH
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive or max_source_size is
                negative
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if self.max_source_size < 0:
            msg = "max_source_size must be non-negative"
            raise ValueError(msg)


class GrammarParser:
    """A grammar prepared for repeated parsing.

    Attributes:
        root: Compressed grammar root
        config: Limits applied to every parse
        node_count: Distinct nodes in the compressed grammar
    """

    __slots__ = ("_config", "_node_count", "_root")

    def __init__(
        self,
        root: CombinatorialParser,
        config: ParserConfig | None = None,
    ) -> None:
        """Validate and compress the grammar.

        Args:
            root: Grammar root, compressed or not
            config: Parse limits (default: ParserConfig())

        Raises:
            UnboundReferenceError: If any reachable forward reference is unbound
            CyclicReferenceError: If forward references resolve only to each other
        """
        self._config = config if config is not None else ParserConfig()

        unbound = find_unbound_references(root)
        if unbound:
            labels = ", ".join(ref.label for ref in unbound)
            raise UnboundReferenceError(ErrorTemplate.unbound_reference(labels))

        self._root = compress(root)
        self._node_count = count_parsers(self._root)
        logger.debug(
            "GrammarParser ready: %d parsers, max_depth=%d, max_source_size=%d",
            self._node_count,
            self._config.max_depth,
            self._config.max_source_size,
        )

    @property
    def root(self) -> CombinatorialParser:
        """Compressed grammar root."""
        return self._root

    @property
    def config(self) -> ParserConfig:
        """Limits applied to every parse."""
        return self._config

    @property
    def node_count(self) -> int:
        """Distinct nodes in the compressed grammar."""
        return self._node_count

    def _new_cursor(self, source: str) -> Cursor:
        max_size = self._config.max_source_size
        if max_size > 0 and len(source) > max_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), max_size)
            raise ValueError(diagnostic.format_error())
        return Cursor(source, 0, DepthGuard(max_depth=self._config.max_depth))

    def try_parse(self, source: str) -> ParseResult[Any] | None:
        """Parse source, returning None when it does not match.

        Raises:
            ValueError: If source exceeds max_source_size
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        return parse(self._root, self._new_cursor(source))

    def parse(self, source: str) -> Any:
        """Parse source and return the grammar's value for it.

        Args:
            source: Complete input text

        Returns:
            Value produced by the root parser

        Raises:
            ParseFailedError: If the source does not match the grammar
            ValueError: If source exceeds max_source_size
            DepthLimitExceededError: If nesting exceeds max_depth

        Example:
            >>> parser = build_expression_parser()
            >>> parser.parse("(1+2)*3")
            9
        """
        result = self.try_parse(source)
        if result is None:
            raise ParseFailedError(ErrorTemplate.input_not_matched())
        return result.value
