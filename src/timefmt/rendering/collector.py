"""Render realization of the specifier grammar.

Each primitive writes one field of a calendar value into a text sink.
Rendering performs no bounds validation: values are validated when they are
constructed. The only failures are unknown specifiers and sink write faults.

Python 3.13+.
"""

from typing import Protocol

from timefmt.core import DateTime, UtcOffset
from timefmt.diagnostics import (
    ErrorTemplate,
    RenderError,
    SourceSpan,
    UnknownSpecifierError,
)
from timefmt.grammar import Collector, names

__all__ = [
    "RenderCollector",
    "TextSink",
    "format_century",
    "format_offset",
    "format_subsecond",
    "format_year",
]


class TextSink(Protocol):
    """Anything with a text write() method (io.StringIO, open files, sys.stdout)."""

    def write(self, text: str, /) -> object: ...


def format_year(year: int) -> str:
    """Year zero padded to at least 4 characters, sign included.

    Example:
        >>> format_year(2022), format_year(-1), format_year(12345)
        ('2022', '-001', '12345')
    """
    return f"{year:04d}"


def format_century(year: int) -> str:
    """Floor-division century, at least 2 characters.

    Example:
        >>> format_century(410), format_century(-1), format_century(-1000)
        ('04', '-1', '-10')
    """
    return f"{year // 100:02d}"


def format_subsecond(nanosecond: int) -> str:
    """Nanoseconds as a fraction with trailing zeros removed.

    Example:
        >>> format_subsecond(900_000_000), format_subsecond(2), format_subsecond(0)
        ('9', '000000002', '0')
    """
    if nanosecond == 0:
        return "0"
    return f"{nanosecond:09d}".rstrip("0")


def format_offset(offset: UtcOffset) -> str:
    """Sign, 2-digit hour and 2-digit minute; seconds are not rendered."""
    sign = "-" if offset.is_negative else "+"
    return f"{sign}{abs(offset.hours):02d}{abs(offset.minutes):02d}"


class RenderCollector(Collector[None]):
    """Writes fields of one value into a sink.

    Args:
        sink: Destination text stream
        value: Date and time to render
        offset: Offset for %z (renders nothing when None)
        zone_name: Name for %Z (renders nothing when None)
    """

    __slots__ = ("_date", "_offset", "_sink", "_time", "_zone_name")

    def __init__(
        self,
        sink: TextSink,
        value: DateTime,
        *,
        offset: UtcOffset | None = None,
        zone_name: str | None = None,
    ) -> None:
        self._sink = sink
        self._date = value.date
        self._time = value.time
        self._offset = offset
        self._zone_name = zone_name

    def _write(self, text: str) -> None:
        try:
            self._sink.write(text)
        except (OSError, ValueError) as e:
            raise RenderError(ErrorTemplate.render_write_failed(str(e))) from e

    # ------------------------------------------------------------------
    # Text hooks
    # ------------------------------------------------------------------

    def static_str(self, text: str) -> None:
        self._write(text)

    def literal(self, text: str, span: SourceSpan) -> None:
        self._write(text)

    def spaces(self) -> None:
        self._write(" ")

    def unknown(self, specifier: str, position: int) -> None:
        raise UnknownSpecifierError(
            ErrorTemplate.unknown_specifier(specifier, position), specifier=specifier
        )

    def output(self) -> None:
        return None

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def weekday_name_short(self) -> None:
        self._write(names.weekday_short(self._date.weekday))

    def weekday_name_long(self) -> None:
        self._write(names.weekday_long(self._date.weekday))

    def month_name_short(self) -> None:
        self._write(names.month_short(self._date.month_enum))

    def month_name_long(self) -> None:
        self._write(names.month_long(self._date.month_enum))

    def ampm(self) -> None:
        self._write(names.ampm_upper(self._time.hour))

    def ampm_lower(self) -> None:
        self._write(names.ampm_lower(self._time.hour))

    # ------------------------------------------------------------------
    # Date fields
    # ------------------------------------------------------------------

    def century(self) -> None:
        self._write(format_century(self._date.year))

    def year(self) -> None:
        self._write(format_year(self._date.year))

    def year_suffix(self) -> None:
        self._write(f"{abs(self._date.year) % 100:02d}")

    def iso_year(self) -> None:
        self._write(format_year(self._date.iso_week_date()[0]))

    def iso_year_suffix(self) -> None:
        self._write(f"{abs(self._date.iso_week_date()[0]) % 100:02d}")

    def month_of_year(self) -> None:
        self._write(f"{self._date.month:02d}")

    def day_of_month(self) -> None:
        self._write(f"{self._date.day:02d}")

    def day_of_month_blank(self) -> None:
        self._write(f"{self._date.day:2d}")

    def day_of_year(self) -> None:
        self._write(f"{self._date.ordinal:03d}")

    def weekday_from_monday(self) -> None:
        self._write(str(self._date.weekday.number_from_monday))

    def weekday_from_sunday(self) -> None:
        self._write(str(self._date.weekday.number_days_from_sunday))

    def week_of_year_from_sunday(self) -> None:
        self._write(f"{self._date.sunday_based_week:02d}")

    def week_of_year_from_monday(self) -> None:
        self._write(f"{self._date.monday_based_week:02d}")

    def iso_week(self) -> None:
        self._write(f"{self._date.iso_week:02d}")

    # ------------------------------------------------------------------
    # Time fields
    # ------------------------------------------------------------------

    def hour_of_day(self) -> None:
        self._write(f"{self._time.hour:02d}")

    def hour_of_day_blank(self) -> None:
        self._write(f"{self._time.hour:2d}")

    def hour_of_day_12(self) -> None:
        self._write(f"{self._time.hour % 12 or 12:02d}")

    def hour_of_day_12_blank(self) -> None:
        self._write(f"{self._time.hour % 12 or 12:2d}")

    def minute(self) -> None:
        self._write(f"{self._time.minute:02d}")

    def second(self) -> None:
        self._write(f"{self._time.second:02d}")

    def subsecond(self) -> None:
        self._write(format_subsecond(self._time.nanosecond))

    # ------------------------------------------------------------------
    # Zone
    # ------------------------------------------------------------------

    def offset(self) -> None:
        if self._offset is not None:
            self._write(format_offset(self._offset))

    def zone_name(self) -> None:
        if self._zone_name is not None:
            self._write(self._zone_name)
