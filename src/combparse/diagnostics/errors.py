"""Exception hierarchy with structured diagnostics.

Every exception here is fatal: it signals a construction bug or a limit,
never an ordinary grammar mismatch. Mismatches are ``None`` parse results
and are handled by alternation and repetition as normal control flow.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CombinatorError(Exception):
    """Base exception for all combparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(CombinatorError):
    """Grammar was assembled incorrectly.

    Raised at construction or compression time, or when a parse reaches a
    node the grammar should never have exposed.
    """


class AlreadyBoundError(GrammarError):
    """Forward reference bound a second time."""


class UnboundReferenceError(GrammarError):
    """Forward reference compressed (or found by analysis) while unbound."""


class CyclicReferenceError(GrammarError):
    """Forward references bound only to one another.

    Example:
        a.bind(b); b.bind(a)  <- no concrete parser to resolve to
    """


class UncompressedReferenceError(GrammarError):
    """Parse dispatched through a forward reference.

    Compression splices every forward reference out of the graph, so this
    means the root was never compressed.
    """


class SubclassResponsibilityError(GrammarError):
    """Abstract CombinatorialParser operation invoked directly."""


class ParseFailedError(CombinatorError):
    """Top-level parse produced no match.

    Carries no position or reason: the engine reports only that the input
    does not belong to the grammar.
    """
