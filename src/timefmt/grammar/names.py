"""Fixed day, month and period name tables.

Names are loaded once from Babel's CLDR data for the POSIX locale and
frozen. Formatting and parsing never consult any other locale; this keeps
%a/%b/%p output identical on every host regardless of process locale.

Thread-safe. Uses Babel CLDR data (loaded once, cached).

Python 3.13+.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from functools import cache

from babel import Locale

from timefmt.constants import POSIX_LOCALE
from timefmt.core import Month, Weekday

__all__ = [
    "NameTable",
    "ampm_lower",
    "ampm_upper",
    "get_name_table",
    "month_from_number",
    "month_long",
    "month_names",
    "month_short",
    "weekday_long",
    "weekday_names",
    "weekday_short",
]


@dataclass(frozen=True, slots=True)
class NameTable:
    """Immutable name lookup tables.

    Attributes:
        weekday_short: Abbreviated weekday names, indexed Monday = 0
        weekday_long: Full weekday names, indexed Monday = 0
        month_short: Abbreviated month names, indexed January = 0
        month_long: Full month names, indexed January = 0
        am: Ante meridiem marker (upper case)
        pm: Post meridiem marker (upper case)
    """

    weekday_short: tuple[str, ...]
    weekday_long: tuple[str, ...]
    month_short: tuple[str, ...]
    month_long: tuple[str, ...]
    am: str
    pm: str


@cache
def get_name_table() -> NameTable:
    """Load the POSIX name tables from CLDR.

    Babel numbers weekdays Monday = 0 and months January = 1, matching
    Weekday and Month.

    Returns:
        The shared NameTable instance
    """
    locale = Locale.parse(POSIX_LOCALE)
    days = locale.days["format"]
    months = locale.months["format"]
    periods = locale.day_periods["format"]["abbreviated"]
    return NameTable(
        weekday_short=tuple(days["abbreviated"][d] for d in Weekday),
        weekday_long=tuple(days["wide"][d] for d in Weekday),
        month_short=tuple(months["abbreviated"][m] for m in Month),
        month_long=tuple(months["wide"][m] for m in Month),
        am=periods["am"].upper(),
        pm=periods["pm"].upper(),
    )


def weekday_short(weekday: Weekday) -> str:
    return get_name_table().weekday_short[weekday]


def weekday_long(weekday: Weekday) -> str:
    return get_name_table().weekday_long[weekday]


def month_short(month: Month) -> str:
    return get_name_table().month_short[month - 1]


def month_long(month: Month) -> str:
    return get_name_table().month_long[month - 1]


def ampm_upper(hour: int) -> str:
    """AM for hours 0-11, PM for 12-23."""
    table = get_name_table()
    return table.am if hour < 12 else table.pm


def ampm_lower(hour: int) -> str:
    return ampm_upper(hour).lower()


def month_from_number(number: int) -> Month | None:
    """Map 1-12 to Month; None outside that range."""
    if 1 <= number <= 12:
        return Month(number)
    return None


def weekday_names() -> Iterator[tuple[Weekday, str, str]]:
    """Yield (weekday, long name, short name) from Monday to Sunday."""
    table = get_name_table()
    for weekday in Weekday:
        yield weekday, table.weekday_long[weekday], table.weekday_short[weekday]


def month_names() -> Iterator[tuple[Month, str, str]]:
    """Yield (month, long name, short name) from January to December."""
    table = get_name_table()
    for month in Month:
        yield month, table.month_long[month - 1], table.month_short[month - 1]
