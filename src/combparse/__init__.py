"""combparse - composable recursive-descent parsing from primitive combinators.

Grammars are built by composing seven node kinds (character range, sequence,
alternation, repetition, wrap, end of input, forward reference). Forward
references make mutually recursive grammars constructible; a one-time
compression pass splices them out before parsing.

Public API:
    GrammarParser - Compressed grammar ready for repeated parsing
    ParserConfig - Depth and size limits
    Cursor - Position over the input, one per parse
    ParseResult - Successful match (value, position); None means no match
    character, character_range, sequence_of, one_of, repeat, wrap,
    end_of_input, forward_reference, compress - Grammar construction
    SimpleExpressionGrammar, build_expression_parser - Example grammar
    ExpressionGenerator, random_expression - Deterministic test input

Exceptions:
    CombinatorError - Base exception class
    GrammarError - Grammar assembled incorrectly
    ParseFailedError - Input does not match the grammar
    DepthLimitExceededError - Nesting exceeded ParserConfig.max_depth

Submodules:
    combparse.syntax.parser.combinators - Parser node classes
    combparse.analysis - Grammar graph traversal
    combparse.diagnostics - Error types and diagnostic codes
"""

from .core import DepthLimitExceededError
from .diagnostics import (
    AlreadyBoundError,
    CombinatorError,
    CyclicReferenceError,
    GrammarError,
    ParseFailedError,
    UnboundReferenceError,
    UncompressedReferenceError,
)
from .generator import ExpressionGenerator, random_expression
from .syntax import (
    CombinatorialParser,
    Cursor,
    GrammarParser,
    ParseResult,
    ParserConfig,
    SimpleExpressionGrammar,
    build_expression_parser,
    character,
    character_range,
    compress,
    end_of_input,
    evaluate,
    forward_reference,
    one_of,
    parse,
    repeat,
    sequence_of,
    wrap,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "AlreadyBoundError",
    "CombinatorError",
    "CombinatorialParser",
    "Cursor",
    "CyclicReferenceError",
    "DepthLimitExceededError",
    "ExpressionGenerator",
    "GrammarError",
    "GrammarParser",
    "ParseFailedError",
    "ParseResult",
    "ParserConfig",
    "SimpleExpressionGrammar",
    "UnboundReferenceError",
    "UncompressedReferenceError",
    "__version__",
    "build_expression_parser",
    "character",
    "character_range",
    "compress",
    "end_of_input",
    "evaluate",
    "forward_reference",
    "one_of",
    "parse",
    "random_expression",
    "repeat",
    "sequence_of",
    "wrap",
]
