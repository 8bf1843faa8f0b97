"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every fatal error case the
    engine can raise.
    """

    # =========================================================================
    # GRAMMAR CONSTRUCTION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def reference_already_bound(label: str) -> Diagnostic:
        """Forward reference bound a second time.

        Args:
            label: Display label of the forward reference

        Returns:
            Diagnostic for REFERENCE_ALREADY_BOUND
        """
        msg = f"Forward reference {label} is already bound"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_ALREADY_BOUND,
            message=msg,
            hint="Each forward reference must be bound exactly once",
        )

    @staticmethod
    def unbound_reference(label: str) -> Diagnostic:
        """Forward reference compressed before being bound.

        Args:
            label: Display label of the forward reference (or a comma-separated
                list when several references are unbound)

        Returns:
            Diagnostic for REFERENCE_UNBOUND
        """
        msg = f"Forward reference {label} was never bound"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_UNBOUND,
            message=msg,
            hint="Call bind() on every forward reference before compressing",
        )

    @staticmethod
    def reference_cycle(labels: list[str]) -> Diagnostic:
        """Forward references bound to each other without a concrete parser.

        Args:
            labels: Labels of the forward references forming the cycle

        Returns:
            Diagnostic for REFERENCE_CYCLE
        """
        chain = " -> ".join(labels)
        msg = f"Forward references resolve only to each other: {chain}"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_CYCLE,
            message=msg,
            hint="Bind at least one reference in the chain to a concrete parser",
        )

    @staticmethod
    def reference_not_compressed(label: str) -> Diagnostic:
        """Parse dispatched through a forward reference.

        Args:
            label: Display label of the forward reference

        Returns:
            Diagnostic for REFERENCE_NOT_COMPRESSED
        """
        msg = f"Forward reference {label} should have been compressed away"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_NOT_COMPRESSED,
            message=msg,
            hint="Call compress() on the grammar root once before parsing",
        )

    @staticmethod
    def subclass_responsibility(type_name: str, operation: str) -> Diagnostic:
        """Abstract parser operation invoked directly.

        Args:
            type_name: Class name of the receiver
            operation: Name of the abstract operation

        Returns:
            Diagnostic for SUBCLASS_RESPONSIBILITY
        """
        msg = f"{type_name}.{operation}() is a subclass responsibility"
        return Diagnostic(
            code=DiagnosticCode.SUBCLASS_RESPONSIBILITY,
            message=msg,
            hint="Build grammars from the concrete combinator classes",
        )

    @staticmethod
    def bind_unsupported(type_name: str) -> Diagnostic:
        """bind() called on a parser that is not a forward reference.

        Args:
            type_name: Class name of the receiver

        Returns:
            Diagnostic for BIND_UNSUPPORTED
        """
        msg = f"{type_name} cannot be bound; only forward references can"
        return Diagnostic(
            code=DiagnosticCode.BIND_UNSUPPORTED,
            message=msg,
        )

    # =========================================================================
    # EVALUATION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Combinator nesting depth exceeded during a parse.

        Args:
            max_depth: The maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum parse depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce input nesting or raise ParserConfig.max_depth",
        )

    # =========================================================================
    # INPUT ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character read past the end of input.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            hint="Check cursor.is_eof before calling next()",
        )

    @staticmethod
    def input_not_matched() -> Diagnostic:
        """Top-level parse returned no match.

        Returns:
            Diagnostic for INPUT_NOT_MATCHED
        """
        msg = "Input does not match the grammar"
        return Diagnostic(
            code=DiagnosticCode.INPUT_NOT_MATCHED,
            message=msg,
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Source rejected before parsing because of its size.

        Args:
            size: Length of the rejected source
            max_size: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({max_size:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure ParserConfig.max_source_size to increase the limit",
        )
