"""Proleptic Gregorian calendar arithmetic.

Pure functions over plain integers. Years may be zero or negative
(astronomical numbering: year 0 is 1 BCE).

This module is not part of the public API.
"""

__all__ = [
    "calendar_from_ordinal",
    "days_from_civil",
    "days_in_month",
    "days_in_year",
    "iso_week_date",
    "is_leap_year",
    "ordinal_from_calendar",
    "weekday_from_monday",
    "weeks_in_iso_year",
]

# Days in each month for non-leap years. Index 0 is unused.
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Days before each month (cumulative) for non-leap years. Index 0 is unused.
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# 1970-01-01 was a Thursday (Monday = 0).
_EPOCH_WEEKDAY = 3


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in month (1-12) of year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def ordinal_from_calendar(year: int, month: int, day: int) -> int:
    """Return the 1-based day of year for a valid calendar date."""
    leap_day = 1 if month > 2 and is_leap_year(year) else 0
    return _DAYS_BEFORE_MONTH[month] + leap_day + day


def calendar_from_ordinal(year: int, ordinal: int) -> tuple[int, int]:
    """Return (month, day) for a valid 1-based day of year."""
    remaining = ordinal
    for month in range(1, 13):
        length = days_in_month(year, month)
        if remaining <= length:
            return month, remaining
        remaining -= length
    msg = f"ordinal {ordinal} exceeds the length of year {year}"
    raise ValueError(msg)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the number of days since 1970-01-01 (negative before it).

    Uses the era/year-of-era decomposition, which stays exact for any
    integer year because Python's floor division rounds toward -infinity.
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = month - 3 if month > 2 else month + 9
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def weekday_from_monday(year: int, month: int, day: int) -> int:
    """Return the weekday, Monday = 0 through Sunday = 6."""
    return (days_from_civil(year, month, day) + _EPOCH_WEEKDAY) % 7


def weeks_in_iso_year(year: int) -> int:
    """Return 53 if the ISO week-based year has 53 weeks, else 52.

    A year has 53 weeks when January 1 is a Thursday, or a Wednesday in a
    leap year.
    """
    jan1 = weekday_from_monday(year, 1, 1)
    if jan1 == 3 or (jan1 == 2 and is_leap_year(year)):
        return 53
    return 52


def iso_week_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Return (iso_year, iso_week, iso_weekday) with iso_weekday 1-7.

    Examples:
        >>> iso_week_date(2022, 3, 6)
        (2022, 9, 7)
        >>> iso_week_date(2021, 1, 1)
        (2020, 53, 5)
    """
    iso_weekday = weekday_from_monday(year, month, day) + 1
    week = (ordinal_from_calendar(year, month, day) - iso_weekday + 10) // 7
    if week < 1:
        return year - 1, weeks_in_iso_year(year - 1), iso_weekday
    if week > weeks_in_iso_year(year):
        return year + 1, 1, iso_weekday
    return year, week, iso_weekday
