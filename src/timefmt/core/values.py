"""Calendar value types consumed by the format engine.

The engine treats these as an opaque capability: it constructs them from
recovered components, reads their fields when rendering, and propagates
ComponentRangeError unchanged when a combination of components is invalid.

Python's ``datetime`` types stop at microseconds and at years 1-9999, so the
values here keep nanosecond precision and a wider proleptic Gregorian year
range. Conversions to and from the standard library types are provided.

Python 3.13+.
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, timezone
from enum import IntEnum

from timefmt.constants import MAX_YEAR, MIN_YEAR, NANOSECONDS_PER_SECOND
from timefmt.diagnostics import ComponentRangeError, ErrorTemplate

from . import calendar

__all__ = [
    "CalendarDate",
    "ClockTime",
    "DateTime",
    "Month",
    "UTC_OFFSET",
    "UtcOffset",
    "Weekday",
]


def _check(component: str, value: int, minimum: int, maximum: int) -> None:
    if not minimum <= value <= maximum:
        raise ComponentRangeError(
            ErrorTemplate.component_range(component, value, minimum, maximum),
            component=component,
            value=value,
        )


class Month(IntEnum):
    """Calendar month, January = 1."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    """Day of week, Monday = 0 (same numbering as ``date.weekday()``)."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def number_from_monday(self) -> int:
        """1 (Monday) through 7 (Sunday), as rendered by %u."""
        return self.value + 1

    @property
    def number_days_from_sunday(self) -> int:
        """0 (Sunday) through 6 (Saturday), as rendered by %w."""
        return (self.value + 1) % 7


@dataclass(frozen=True, slots=True, order=True)
class CalendarDate:
    """Proleptic Gregorian calendar date.

    Attributes:
        year: Astronomical year (0 is 1 BCE), MIN_YEAR..MAX_YEAR
        month: 1-12
        day: 1 through the length of the month

    Raises:
        ComponentRangeError: If any component is out of range, e.g.
            ``CalendarDate(2022, 4, 31)``.

    Example:
        >>> d = CalendarDate(2022, 3, 6)
        >>> d.weekday
        <Weekday.SUNDAY: 6>
        >>> d.ordinal
        65
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        _check("year", self.year, MIN_YEAR, MAX_YEAR)
        _check("month", self.month, 1, 12)
        _check("day", self.day, 1, calendar.days_in_month(self.year, self.month))

    @classmethod
    def from_ordinal_date(cls, year: int, ordinal: int) -> "CalendarDate":
        """Construct from a year and a 1-based day of year.

        Raises:
            ComponentRangeError: If year is out of range or ordinal exceeds
                the year's length (366 in a common year).
        """
        _check("year", year, MIN_YEAR, MAX_YEAR)
        _check("ordinal", ordinal, 1, calendar.days_in_year(year))
        month, day = calendar.calendar_from_ordinal(year, ordinal)
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        """Convert a standard library date (or datetime)."""
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        """Convert to a standard library date.

        Raises:
            ValueError: If the year is outside 1..9999.
        """
        return date(self.year, self.month, self.day)

    @property
    def month_enum(self) -> Month:
        return Month(self.month)

    @property
    def ordinal(self) -> int:
        """Day of year, 1-366."""
        return calendar.ordinal_from_calendar(self.year, self.month, self.day)

    @property
    def weekday(self) -> Weekday:
        return Weekday(calendar.weekday_from_monday(self.year, self.month, self.day))

    def iso_week_date(self) -> tuple[int, int, int]:
        """Return (iso_year, iso_week, iso_weekday)."""
        return calendar.iso_week_date(self.year, self.month, self.day)

    @property
    def iso_week(self) -> int:
        return self.iso_week_date()[1]

    @property
    def sunday_based_week(self) -> int:
        """Week of year 0-53, weeks starting on Sunday (%U)."""
        return (self.ordinal + 6 - self.weekday.number_days_from_sunday) // 7

    @property
    def monday_based_week(self) -> int:
        """Week of year 0-53, weeks starting on Monday (%W)."""
        return (self.ordinal + 6 - self.weekday.value) // 7


@dataclass(frozen=True, slots=True, order=True)
class ClockTime:
    """Time of day with nanosecond precision.

    Attributes:
        hour: 0-23
        minute: 0-59
        second: 0-59
        nanosecond: 0-999_999_999

    Raises:
        ComponentRangeError: If any component is out of range.
    """

    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        _check("hour", self.hour, 0, 23)
        _check("minute", self.minute, 0, 59)
        _check("second", self.second, 0, 59)
        _check("nanosecond", self.nanosecond, 0, NANOSECONDS_PER_SECOND - 1)

    @classmethod
    def from_time(cls, value: time | datetime) -> "ClockTime":
        """Convert a standard library time (or datetime)."""
        return cls(value.hour, value.minute, value.second, value.microsecond * 1000)

    def to_time(self) -> time:
        """Convert to a standard library time, truncating to microseconds."""
        return time(self.hour, self.minute, self.second, self.nanosecond // 1000)


@dataclass(frozen=True, slots=True, order=True)
class UtcOffset:
    """Signed offset from UTC.

    All non-zero components share one sign: ``UtcOffset(-1, -23)`` is
    -01:23.

    Raises:
        ComponentRangeError: If a component is out of range or the signs of
            the components disagree.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        _check("offset-hour", self.hours, -25, 25)
        _check("offset-minute", self.minutes, -59, 59)
        _check("offset-second", self.seconds, -59, 59)
        signs = {c > 0 for c in (self.hours, self.minutes, self.seconds) if c}
        if len(signs) > 1:
            raise ComponentRangeError(
                ErrorTemplate.component_range("offset-minute", self.minutes, -59, 59),
                component="offset-minute",
                value=self.minutes,
            )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "UtcOffset":
        total = int(delta.total_seconds())
        sign = -1 if total < 0 else 1
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)
        return cls(sign * hours, sign * minutes, sign * seconds)

    @property
    def is_negative(self) -> bool:
        return self.hours < 0 or self.minutes < 0 or self.seconds < 0

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def to_timezone(self) -> timezone:
        if self.total_seconds == 0:
            return UTC
        return timezone(timedelta(seconds=self.total_seconds))


UTC_OFFSET = UtcOffset()


@dataclass(frozen=True, slots=True, order=True)
class DateTime:
    """Calendar date paired with a time of day, without an offset.

    Example:
        >>> DateTime(CalendarDate(2022, 3, 6), ClockTime(12, 34, 56))
        DateTime(date=CalendarDate(year=2022, month=3, day=6), time=ClockTime(hour=12, minute=34, second=56, nanosecond=0))
    """

    date: CalendarDate
    time: ClockTime = ClockTime()

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> "DateTime":
        """Construct from plain components."""
        return cls(CalendarDate(year, month, day), ClockTime(hour, minute, second, nanosecond))

    @classmethod
    def from_datetime(cls, value: datetime | date) -> "DateTime":
        """Convert a standard library datetime or date; tzinfo is ignored."""
        if isinstance(value, datetime):
            return cls(CalendarDate.from_date(value), ClockTime.from_time(value))
        return cls(CalendarDate.from_date(value))

    def to_datetime(self, offset: UtcOffset | None = None) -> datetime:
        """Convert to a standard library datetime (aware when offset is given)."""
        naive = datetime.combine(self.date.to_date(), self.time.to_time())
        if offset is None:
            return naive
        return naive.replace(tzinfo=offset.to_timezone())
