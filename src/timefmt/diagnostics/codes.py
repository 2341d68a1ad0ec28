"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for TimeFormatError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        FORMAT: Problems with the format string itself (unknown specifier)
        RENDER: Writing rendered text to the output sink failed
        RECOVER: Input text does not match the format
        CALENDAR: Recovered fields do not form a valid date or time
        COMPILE: Format string has no compiled program representation
    """

    FORMAT = "format"
    RENDER = "render"
    RECOVER = "recover"
    CALENDAR = "calendar"
    COMPILE = "compile"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Format string errors
        2000-2999: Render errors
        3000-3999: Recover (input) errors
        4000-4999: Calendar construction errors
        5000-5999: Program compilation errors
    """

    # Format string errors (1000-1999)
    UNKNOWN_SPECIFIER = 1001

    # Render errors (2000-2999)
    RENDER_WRITE_FAILED = 2001

    # Recover errors (3000-3999)
    UNEXPECTED_CHARACTER = 3001
    UNEXPECTED_END = 3002
    NO_MATCH = 3003
    COMPONENT_OUT_OF_RANGE = 3004
    UNCONVERTED_DATA_REMAINS = 3005

    # Calendar construction errors (4000-4999)
    COMPONENT_RANGE = 4001

    # Program compilation errors (5000-5999)
    NO_CORRESPONDING_REPRESENTATION = 5001

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric block."""
        match self.value // 1000:
            case 1:
                return ErrorCategory.FORMAT
            case 2:
                return ErrorCategory.RENDER
            case 3:
                return ErrorCategory.RECOVER
            case 4:
                return ErrorCategory.CALENDAR
            case _:
                return ErrorCategory.COMPILE


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside the format string or the input text.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the input text or format string (None if unknown)
        hint: Suggestion for fixing the error
        field_name: Date/time field involved (e.g. "day-of-month")
        specifier: Format specifier involved (e.g. "%C")
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    field_name: str | None = None
    specifier: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[COMPONENT_OUT_OF_RANGE]: Value out of range for day-of-month
              --> position 8
              = field: day-of-month
              = help: Day of month must be between 1 and 31

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
