"""timefmt exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Collectors raise these exceptions to abort a walk; the public entry points
catch them and return them in the errors tuple.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ComponentOutOfRangeError",
    "ComponentRangeError",
    "NoCorrespondingRepresentationError",
    "NoMatchError",
    "RecoverError",
    "RenderError",
    "TimeFormatError",
    "UnconvertedDataError",
    "UnexpectedCharacterError",
    "UnexpectedEndError",
    "UnknownSpecifierError",
]


class TimeFormatError(Exception):
    """Base exception for all timefmt errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TimeFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownSpecifierError(TimeFormatError):
    """Unrecognized character after '%' in a format string.

    Attributes:
        specifier: The character that followed '%'
    """

    def __init__(self, message: str | Diagnostic, *, specifier: str) -> None:
        super().__init__(message)
        self.specifier = specifier


class RenderError(TimeFormatError):
    """The output sink rejected rendered text."""


class RecoverError(TimeFormatError):
    """Input text could not be matched against the format.

    Attributes:
        field: Name of the field or literal being read ("" if not applicable)
        position: Offset in the input text where the failure occurred
    """

    def __init__(
        self, message: str | Diagnostic, *, field: str = "", position: int = 0
    ) -> None:
        super().__init__(message)
        self.field = field
        self.position = position


class UnexpectedCharacterError(RecoverError):
    """A field met a character its grammar does not allow.

    Attributes:
        char: The offending input character
    """

    def __init__(
        self, message: str | Diagnostic, *, field: str, char: str, position: int = 0
    ) -> None:
        super().__init__(message, field=field, position=position)
        self.char = char


class UnexpectedEndError(RecoverError):
    """Input ended while a field still required characters."""


class NoMatchError(RecoverError):
    """Textual field or literal did not match the input."""


class ComponentOutOfRangeError(RecoverError):
    """Numeric value parsed but outside the field's valid domain.

    Attributes:
        value: The parsed value
    """

    def __init__(
        self, message: str | Diagnostic, *, field: str, value: int, position: int = 0
    ) -> None:
        super().__init__(message, field=field, position=position)
        self.value = value


class UnconvertedDataError(RecoverError):
    """Strict recovery left input unconsumed.

    Attributes:
        leftover: The unconsumed input text
    """

    def __init__(self, message: str | Diagnostic, *, leftover: str, position: int = 0) -> None:
        super().__init__(message, position=position)
        self.leftover = leftover


class ComponentRangeError(TimeFormatError, ValueError):
    """A calendar value could not be constructed from its components.

    Raised by the value types (CalendarDate, ClockTime, UtcOffset) and
    propagated unchanged by recovery, e.g. for day 31 in April.

    Attributes:
        component: Name of the rejected component
        value: The rejected value
    """

    def __init__(self, message: str | Diagnostic, *, component: str, value: int) -> None:
        super().__init__(message)
        self.component = component
        self.value = value


class NoCorrespondingRepresentationError(TimeFormatError):
    """A specifier has no node in a compiled program.

    Attributes:
        specifier: The rejected specifier character (e.g. "C")
    """

    def __init__(self, message: str | Diagnostic, *, specifier: str) -> None:
        super().__init__(message)
        self.specifier = specifier
