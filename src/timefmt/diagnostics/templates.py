"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


def _point(position: int | None) -> SourceSpan | None:
    return None if position is None else SourceSpan(position, position)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents all error cases in one
    place.
    """

    @staticmethod
    def unknown_specifier(specifier: str, position: int | None = None) -> Diagnostic:
        """Unrecognized character after '%' in a format string.

        Args:
            specifier: The character following '%'
            position: Offset of the '%' in the format string

        Returns:
            Diagnostic for UNKNOWN_SPECIFIER
        """
        msg = f"Unknown specifier '%{specifier}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_SPECIFIER,
            message=msg,
            span=_point(position),
            hint="See the specifier table for supported conversions",
            specifier=f"%{specifier}",
        )

    @staticmethod
    def render_write_failed(reason: str) -> Diagnostic:
        """Output sink rejected a write.

        Args:
            reason: Description of the underlying failure

        Returns:
            Diagnostic for RENDER_WRITE_FAILED
        """
        msg = f"Failed to write rendered text: {reason}"
        return Diagnostic(
            code=DiagnosticCode.RENDER_WRITE_FAILED,
            message=msg,
            hint="Check that the output stream is open and writable",
        )

    @staticmethod
    def unexpected_character(field: str, char: str, position: int) -> Diagnostic:
        """Input held a character the field's grammar does not allow.

        Args:
            field: Name of the field being read
            char: The offending input character
            position: Offset of the character in the input text

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Expected {field} but got {char!r}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=SourceSpan(position, position + 1),
            field_name=field,
        )

    @staticmethod
    def unexpected_end(field: str, position: int) -> Diagnostic:
        """Input ended before the field was complete.

        Args:
            field: Name of the field being read
            position: Offset where the input ended

        Returns:
            Diagnostic for UNEXPECTED_END
        """
        msg = f"Expected {field} but reached the end of input"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END,
            message=msg,
            span=_point(position),
            field_name=field,
        )

    @staticmethod
    def no_match(field: str, position: int) -> Diagnostic:
        """No candidate text matched the input.

        Args:
            field: Name of the field or literal being matched
            position: Offset in the input text

        Returns:
            Diagnostic for NO_MATCH
        """
        msg = f"Expected {field} but found no match"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message=msg,
            span=_point(position),
            field_name=field,
        )

    @staticmethod
    def component_out_of_range(
        field: str, value: int, position: int | None = None
    ) -> Diagnostic:
        """Numeric value parsed but outside the field's domain.

        Args:
            field: Name of the field
            value: The parsed value
            position: Offset of the value in the input text

        Returns:
            Diagnostic for COMPONENT_OUT_OF_RANGE
        """
        msg = f"Value {value} out of range for {field}"
        return Diagnostic(
            code=DiagnosticCode.COMPONENT_OUT_OF_RANGE,
            message=msg,
            span=_point(position),
            field_name=field,
        )

    @staticmethod
    def unconverted_data(leftover: str, position: int) -> Diagnostic:
        """Strict recovery finished with input remaining.

        Args:
            leftover: Unconsumed input text
            position: Offset where the leftover starts

        Returns:
            Diagnostic for UNCONVERTED_DATA_REMAINS
        """
        msg = f"Unconverted data remains: {leftover!r}"
        return Diagnostic(
            code=DiagnosticCode.UNCONVERTED_DATA_REMAINS,
            message=msg,
            span=SourceSpan(position, position + len(leftover)),
            hint="Extend the format to cover the trailing text or use non-strict mode",
        )

    @staticmethod
    def component_range(field: str, value: int, minimum: int, maximum: int) -> Diagnostic:
        """Calendar value construction rejected a component.

        Args:
            field: Name of the component (e.g. "day")
            value: The rejected value
            minimum: Smallest valid value
            maximum: Largest valid value in this context

        Returns:
            Diagnostic for COMPONENT_RANGE
        """
        msg = f"{field} must be in {minimum}..={maximum}, got {value}"
        return Diagnostic(
            code=DiagnosticCode.COMPONENT_RANGE,
            message=msg,
            field_name=field,
        )

    @staticmethod
    def no_corresponding_representation(specifier: str, description: str) -> Diagnostic:
        """Specifier cannot be expressed as a program node.

        Args:
            specifier: The rejected specifier character (e.g. "C")
            description: What the specifier denotes

        Returns:
            Diagnostic for NO_CORRESPONDING_REPRESENTATION
        """
        msg = f"No program item represents {description}"
        return Diagnostic(
            code=DiagnosticCode.NO_CORRESPONDING_REPRESENTATION,
            message=msg,
            hint="Use the one-shot render/recover functions for this specifier",
            specifier=f"%{specifier}",
        )
