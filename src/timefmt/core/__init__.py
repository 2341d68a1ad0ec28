"""Calendar value capability used by the format engine.

Exports:
    CalendarDate: Proleptic Gregorian date with a wide year range
    ClockTime: Time of day with nanosecond precision
    UtcOffset: Signed offset from UTC
    DateTime: Date paired with time of day
    Month, Weekday: Enumerations

Python 3.13+.
"""

from .values import (
    UTC_OFFSET,
    CalendarDate,
    ClockTime,
    DateTime,
    Month,
    UtcOffset,
    Weekday,
)

__all__ = [
    "UTC_OFFSET",
    "CalendarDate",
    "ClockTime",
    "DateTime",
    "Month",
    "UtcOffset",
    "Weekday",
]
