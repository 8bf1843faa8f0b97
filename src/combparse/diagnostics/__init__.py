"""Diagnostic system for combparse errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    AlreadyBoundError,
    CombinatorError,
    CyclicReferenceError,
    GrammarError,
    ParseFailedError,
    SubclassResponsibilityError,
    UnboundReferenceError,
    UncompressedReferenceError,
)
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "AlreadyBoundError",
    "CombinatorError",
    "CyclicReferenceError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarError",
    "ParseFailedError",
    "SubclassResponsibilityError",
    "UnboundReferenceError",
    "UncompressedReferenceError",
]
