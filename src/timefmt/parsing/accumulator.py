"""Recovery accumulator: per-field states and their precedence rules.

Several specifiers can describe the same logical field with different
precision. Each field is a small tagged union; the transitions below are the
only place where precedence is decided:

    Year:  %Y sets FullYear unconditionally; %C and %y refine a CenturyYear
           and are ignored once FullYear is set.
    Day:   %j sets OrdinalDay unconditionally; %m %b %B %d refine a MonthDay
           and are ignored once OrdinalDay is set.
    Hour:  %H %k set FullDayHour unconditionally; %I %l %p refine a
           HalfDayHour and are ignored once FullDayHour is set.

Between equally precise specifiers the later one wins.

Python 3.13+.
"""

from dataclasses import dataclass, field, replace

from timefmt.constants import DEFAULT_YEAR, MAX_YEAR, MIN_YEAR, YEAR_SUFFIX_PIVOT
from timefmt.core import CalendarDate, ClockTime, DateTime, UtcOffset
from timefmt.diagnostics import ComponentOutOfRangeError, ErrorTemplate, SourceSpan

__all__ = [
    "CenturyYear",
    "DayState",
    "FullDayHour",
    "FullYear",
    "HalfDayHour",
    "HourState",
    "MonthDay",
    "OrdinalDay",
    "RecoverAccumulator",
    "UnspecifiedDay",
    "UnspecifiedHour",
    "UnspecifiedYear",
    "YearState",
    "ZoneName",
    "ZoneSpecifier",
]


# ============================================================================
# YEAR
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnspecifiedYear:
    """No year specifier seen."""


@dataclass(frozen=True, slots=True)
class FullYear:
    """Explicit year from %Y."""

    year: int


@dataclass(frozen=True, slots=True)
class CenturyYear:
    """Year assembled from %C and/or %y."""

    century: int | None = None
    suffix: int | None = None


type YearState = UnspecifiedYear | FullYear | CenturyYear


# ============================================================================
# DAY OF YEAR
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnspecifiedDay:
    """No month or day specifier seen."""


@dataclass(frozen=True, slots=True)
class MonthDay:
    """Day given as month and day of month."""

    month: int = 1
    day: int = 1


@dataclass(frozen=True, slots=True)
class OrdinalDay:
    """Day given as day of year (%j)."""

    ordinal: int


type DayState = UnspecifiedDay | MonthDay | OrdinalDay


# ============================================================================
# HOUR
# ============================================================================


@dataclass(frozen=True, slots=True)
class UnspecifiedHour:
    """No hour specifier seen."""


@dataclass(frozen=True, slots=True)
class FullDayHour:
    """Hour 0-23 from %H or %k."""

    hour: int


@dataclass(frozen=True, slots=True)
class HalfDayHour:
    """Hour 0-11 (12 stored as 0) plus the period from %p."""

    hour: int = 0
    is_pm: bool = False


type HourState = UnspecifiedHour | FullDayHour | HalfDayHour


# ============================================================================
# ZONE
# ============================================================================


@dataclass(frozen=True, slots=True)
class ZoneName:
    """Opaque zone name recovered by %Z.

    Attributes:
        name: The recovered text, not resolved to an offset
        span: Offsets of the name within the recovered input
    """

    name: str
    span: SourceSpan


type ZoneSpecifier = UtcOffset | ZoneName


def resolve_suffix_year(suffix: int) -> int:
    """POSIX two-digit year: 69-99 -> 1969-1999, 00-68 -> 2000-2068.

    Example:
        >>> resolve_suffix_year(69), resolve_suffix_year(68)
        (1969, 2068)
    """
    return (1900 if suffix >= YEAR_SUFFIX_PIVOT else 2000) + suffix


@dataclass(slots=True)
class RecoverAccumulator:
    """Mutable state of one recovery call.

    Created empty, updated once per specifier, consumed once by finish().
    """

    year: YearState = field(default_factory=UnspecifiedYear)
    day: DayState = field(default_factory=UnspecifiedDay)
    hour: HourState = field(default_factory=UnspecifiedHour)
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    zone: ZoneSpecifier | None = None

    # ------------------------------------------------------------------
    # Year
    # ------------------------------------------------------------------

    def set_full_year(self, year: int) -> None:
        self.year = FullYear(year)

    def set_century(self, century: int) -> None:
        match self.year:
            case UnspecifiedYear():
                self.year = CenturyYear(century=century)
            case CenturyYear() as current:
                self.year = replace(current, century=century)
            case FullYear():
                pass

    def set_year_suffix(self, suffix: int) -> None:
        match self.year:
            case UnspecifiedYear():
                self.year = CenturyYear(suffix=suffix)
            case CenturyYear() as current:
                self.year = replace(current, suffix=suffix)
            case FullYear():
                pass

    # ------------------------------------------------------------------
    # Day
    # ------------------------------------------------------------------

    def set_ordinal(self, ordinal: int) -> None:
        self.day = OrdinalDay(ordinal)

    def set_month(self, month: int) -> None:
        match self.day:
            case UnspecifiedDay():
                self.day = MonthDay(month=month)
            case MonthDay() as current:
                self.day = replace(current, month=month)
            case OrdinalDay():
                pass

    def set_day_of_month(self, day: int) -> None:
        match self.day:
            case UnspecifiedDay():
                self.day = MonthDay(day=day)
            case MonthDay() as current:
                self.day = replace(current, day=day)
            case OrdinalDay():
                pass

    # ------------------------------------------------------------------
    # Hour
    # ------------------------------------------------------------------

    def set_full_day_hour(self, hour: int) -> None:
        self.hour = FullDayHour(hour)

    def set_half_day_hour(self, hour: int) -> None:
        """Record a 1-12 clock hour; 12 is stored as 0."""
        match self.hour:
            case UnspecifiedHour():
                self.hour = HalfDayHour(hour=hour % 12)
            case HalfDayHour() as current:
                self.hour = replace(current, hour=hour % 12)
            case FullDayHour():
                pass

    def set_period(self, *, is_pm: bool) -> None:
        match self.hour:
            case UnspecifiedHour():
                self.hour = HalfDayHour(is_pm=is_pm)
            case HalfDayHour() as current:
                self.hour = replace(current, is_pm=is_pm)
            case FullDayHour():
                pass

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def resolve_year(self) -> int:
        """Resolve the year state.

        Raises:
            ComponentOutOfRangeError: If century and suffix combine to a year
                outside the supported range
        """
        match self.year:
            case UnspecifiedYear():
                return DEFAULT_YEAR
            case FullYear(year=year):
                return year
            case CenturyYear(century=None, suffix=None):
                return DEFAULT_YEAR
            case CenturyYear(century=None, suffix=suffix):
                return resolve_suffix_year(suffix)
            case CenturyYear(century=century, suffix=suffix):
                year = century * 100 + (suffix or 0)
                if not MIN_YEAR <= year <= MAX_YEAR:
                    raise ComponentOutOfRangeError(
                        ErrorTemplate.component_out_of_range("year", year),
                        field="year",
                        value=year,
                    )
                return year

    def resolve_hour(self) -> int:
        match self.hour:
            case UnspecifiedHour():
                return 0
            case FullDayHour(hour=hour):
                return hour
            case HalfDayHour(hour=hour, is_pm=is_pm):
                return hour + 12 if is_pm else hour

    def finish(self) -> tuple[DateTime, ZoneSpecifier | None]:
        """Build the recovered value.

        Raises:
            ComponentOutOfRangeError: If the year cannot be resolved
            ComponentRangeError: If the resolved fields do not form a valid
                date or time (e.g. April 31, second 60)
        """
        year = self.resolve_year()
        match self.day:
            case UnspecifiedDay():
                date = CalendarDate.from_ordinal_date(year, 1)
            case MonthDay(month=month, day=day):
                date = CalendarDate(year, month, day)
            case OrdinalDay(ordinal=ordinal):
                date = CalendarDate.from_ordinal_date(year, ordinal)
        time = ClockTime(self.resolve_hour(), self.minute, self.second, self.nanosecond)
        return DateTime(date, time), self.zone
