"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for fatal engine errors.
Match failures are never diagnosed; they are plain ``None`` parse results.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar construction errors (programmer errors)
        2000-2999: Evaluation errors (limits hit while parsing)
        3000-3999: Input errors (cursor misuse, rejected input)
    """

    # Grammar construction errors (1000-1999)
    REFERENCE_ALREADY_BOUND = 1001
    REFERENCE_UNBOUND = 1002
    REFERENCE_CYCLE = 1003
    REFERENCE_NOT_COMPRESSED = 1004
    SUBCLASS_RESPONSIBILITY = 1005
    BIND_UNSUPPORTED = 1006

    # Evaluation errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Input errors (3000-3999)
    UNEXPECTED_EOF = 3001
    INPUT_NOT_MATCHED = 3002
    SOURCE_TOO_LARGE = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[REFERENCE_UNBOUND]: Forward reference 'exp' was never bound
              = help: Call bind() on every forward reference before compressing

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
