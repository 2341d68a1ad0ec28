"""Recover entry points.

- recover() returns tuple[Recovered | None, tuple[TimeFormatError, ...]]
- recover_strict() additionally rejects unconsumed input
- Functions NEVER raise - errors are returned in tuple

Thread-safe. Each call owns its collector.

Python 3.13+.
"""

from timefmt.core import DateTime
from timefmt.diagnostics import TimeFormatError
from timefmt.grammar import dispatch

from .accumulator import ZoneSpecifier
from .collector import RecoverCollector

__all__ = ["Recovered", "recover", "recover_strict"]

type Recovered = tuple[DateTime, ZoneSpecifier | None]


def recover(
    format_string: str,
    text: str,
    *,
    strict: bool = False,
) -> tuple[Recovered | None, tuple[TimeFormatError, ...]]:
    """Recover a date-time from text written in format_string.

    Default mode ignores input left over after the last specifier.

    Args:
        format_string: Format such as "%FT%T %z"
        text: Input text
        strict: Require rendered field widths and reject leftover input

    Returns:
        Tuple of (result, errors):
        - result: (DateTime, zone) where zone is a UtcOffset, a ZoneName or
          None; None when recovery failed
        - errors: Tuple of TimeFormatError (empty on success)

    Examples:
        >>> result, errors = recover("%F %T", "2022-03-06 12:34:56")
        >>> result[0]
        DateTime(date=CalendarDate(year=2022, month=3, day=6), time=ClockTime(hour=12, minute=34, second=56, nanosecond=0))

        >>> recover("%I %p", "1 pm")[0][0].time.hour
        13
    """
    collector = RecoverCollector(text, strict=strict)
    try:
        return (dispatch(format_string, collector), ())
    except TimeFormatError as e:
        return (None, (e,))


def recover_strict(
    format_string: str,
    text: str,
) -> tuple[Recovered | None, tuple[TimeFormatError, ...]]:
    """Strict recovery: fails with UnconvertedDataError on leftover input.

    Examples:
        >>> result, errors = recover_strict("%F", "2022-03-06T12:34:56Z")
        >>> type(errors[0]).__name__, errors[0].leftover
        ('UnconvertedDataError', 'T12:34:56Z')
    """
    return recover(format_string, text, strict=True)
