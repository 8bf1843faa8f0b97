"""Diagnostic formatting service.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Formats Diagnostic objects in Rust compiler style.

    Used by Diagnostic.format_error() to build every exception message.

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.unbound_reference("'exp'")
        >>> print(formatter.format(diagnostic))
        error[REFERENCE_UNBOUND]: Forward reference 'exp' was never bound
          = help: Call bind() on every forward reference before compressing
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        parts = [f"error[{diagnostic.code.name}]: {diagnostic.message}"]
        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")
        return "\n".join(parts)
