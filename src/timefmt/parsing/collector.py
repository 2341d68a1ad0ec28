"""Recover realization of the specifier grammar.

Each primitive consumes a prefix of the remaining input and records what it
read in a RecoverAccumulator. The first failure aborts the walk.

Numeric fields:
    Read at most max_digits ASCII digits. Strict mode also requires the
    field's rendered width (sign included, so year -1 needs "-001").
    Space-padded fields skip leading spaces first.

Textual fields:
    Case-insensitive prefix match, long name before short name.

Python 3.13+.
"""

from timefmt.constants import (
    MAX_CENTURY_DIGITS,
    MAX_ORDINAL_DIGITS,
    MAX_TWO_DIGITS,
    MAX_WEEKDAY_DIGITS,
    MAX_YEAR_DIGITS,
    NANOSECONDS_PER_SECOND,
    OFFSET_DIGITS,
    SUBSECOND_DIGITS,
    UTC_DESIGNATORS,
)
from timefmt.core import UTC_OFFSET, DateTime, UtcOffset
from timefmt.diagnostics import (
    ComponentOutOfRangeError,
    ErrorTemplate,
    NoMatchError,
    SourceSpan,
    UnconvertedDataError,
    UnexpectedCharacterError,
    UnexpectedEndError,
    UnknownSpecifierError,
)
from timefmt.grammar import Collector, Cursor, names

from .accumulator import RecoverAccumulator, ZoneName, ZoneSpecifier

__all__ = ["RecoverCollector"]

_DIGITS = frozenset("0123456789")


class RecoverCollector(Collector[tuple[DateTime, ZoneSpecifier | None]]):
    """Consumes input text field by field.

    Args:
        text: Input to recover a value from
        strict: Enforce rendered field widths and reject leftover input
    """

    splits_whitespace = True

    __slots__ = ("_acc", "_cursor", "_strict")

    def __init__(self, text: str, *, strict: bool = False) -> None:
        self._cursor = Cursor(text)
        self._strict = strict
        self._acc = RecoverAccumulator()

    @property
    def position(self) -> int:
        """Offset of the next unconsumed input character."""
        return self._cursor.pos

    # ------------------------------------------------------------------
    # Token readers
    # ------------------------------------------------------------------

    def _missing(self, field: str, cursor: Cursor) -> UnexpectedEndError | UnexpectedCharacterError:
        """Error for a required character that is absent at cursor."""
        if cursor.is_eof:
            return UnexpectedEndError(
                ErrorTemplate.unexpected_end(field, cursor.pos), field=field, position=cursor.pos
            )
        return UnexpectedCharacterError(
            ErrorTemplate.unexpected_character(field, cursor.current, cursor.pos),
            field=field,
            char=cursor.current,
            position=cursor.pos,
        )

    def _read_number(
        self,
        field: str,
        max_digits: int,
        *,
        width: int = 1,
        signed: bool = False,
        blank: bool = False,
    ) -> int:
        """Consume an integer and return it.

        Args:
            field: Field name for error reports
            max_digits: Upper bound on digits read
            width: Minimum characters (sign included) in strict mode
            signed: Accept a leading '+' or '-'
            blank: Skip leading spaces first

        Raises:
            UnexpectedEndError: Input ended before enough digits
            UnexpectedCharacterError: A non-digit where a digit is required
        """
        cursor = self._cursor.skip_spaces() if blank else self._cursor
        start = cursor.pos
        negative = False
        if signed and not cursor.is_eof and cursor.current in "+-":
            negative = cursor.current == "-"
            cursor = cursor.advance()

        digits_start = cursor.pos
        while (
            cursor.pos - digits_start < max_digits
            and not cursor.is_eof
            and cursor.current in _DIGITS
        ):
            cursor = cursor.advance()

        required = width if self._strict else 1
        if cursor.pos == digits_start or cursor.pos - start < required:
            raise self._missing(field, cursor)

        value = int(cursor.source[digits_start : cursor.pos])
        self._cursor = cursor
        return -value if negative else value

    def _read_in_range(
        self,
        field: str,
        max_digits: int,
        minimum: int,
        maximum: int,
        *,
        width: int = 1,
        blank: bool = False,
    ) -> int:
        """Consume an integer and check minimum <= value <= maximum.

        Raises:
            ComponentOutOfRangeError: If the value is outside the range
        """
        start = self._cursor.pos
        value = self._read_number(field, max_digits, width=width, blank=blank)
        if not minimum <= value <= maximum:
            raise ComponentOutOfRangeError(
                ErrorTemplate.component_out_of_range(field, value, start),
                field=field,
                value=value,
                position=start,
            )
        return value

    def _read_fixed_digits(self, field: str, count: int) -> int:
        """Consume exactly count digits."""
        cursor = self._cursor
        for _ in range(count):
            if cursor.is_eof or cursor.current not in _DIGITS:
                raise self._missing(field, cursor)
            cursor = cursor.advance()
        value = int(self._cursor.slice_to(cursor.pos))
        self._cursor = cursor
        return value

    def _read_name[V](self, field: str, candidates: list[tuple[V, str, str]]) -> V:
        """Consume the first (long, then short) name that prefixes the input.

        Raises:
            NoMatchError: If no candidate matches
        """
        cursor = self._cursor
        for value, long_name, short_name in candidates:
            for name in (long_name, short_name):
                if cursor.starts_with_ignore_case(name):
                    self._cursor = cursor.advance(len(name))
                    return value
        raise NoMatchError(
            ErrorTemplate.no_match(field, cursor.pos), field=field, position=cursor.pos
        )

    def _match_text(self, text: str, field: str) -> None:
        if not self._cursor.starts_with(text):
            raise NoMatchError(
                ErrorTemplate.no_match(field, self._cursor.pos),
                field=field,
                position=self._cursor.pos,
            )
        self._cursor = self._cursor.advance(len(text))

    # ------------------------------------------------------------------
    # Text hooks
    # ------------------------------------------------------------------

    def static_str(self, text: str) -> None:
        self._match_text(text, f"separator {text!r}")

    def literal(self, text: str, span: SourceSpan) -> None:
        self._match_text(text, "literal")

    def spaces(self) -> None:
        self._cursor = self._cursor.skip_whitespace()

    def unknown(self, specifier: str, position: int) -> None:
        raise UnknownSpecifierError(
            ErrorTemplate.unknown_specifier(specifier, position), specifier=specifier
        )

    def output(self) -> tuple[DateTime, ZoneSpecifier | None]:
        """Finish recovery.

        Raises:
            UnconvertedDataError: Strict mode and input remains
            ComponentOutOfRangeError: Century and suffix overflow the year
            ComponentRangeError: Fields do not form a valid date or time
        """
        if self._strict and not self._cursor.is_eof:
            leftover = self._cursor.rest
            raise UnconvertedDataError(
                ErrorTemplate.unconverted_data(leftover, self._cursor.pos),
                leftover=leftover,
                position=self._cursor.pos,
            )
        return self._acc.finish()

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def weekday_name_short(self) -> None:
        # Weekday names are validated and otherwise ignored.
        self._read_name("day of week name", list(names.weekday_names()))

    def weekday_name_long(self) -> None:
        self.weekday_name_short()

    def month_name_short(self) -> None:
        month = self._read_name("month name", list(names.month_names()))
        self._acc.set_month(month)

    def month_name_long(self) -> None:
        self.month_name_short()

    def ampm(self) -> None:
        table = names.get_name_table()
        is_pm = self._read_name("am/pm", [(False, table.am, table.am), (True, table.pm, table.pm)])
        self._acc.set_period(is_pm=is_pm)

    def ampm_lower(self) -> None:
        self.ampm()

    # ------------------------------------------------------------------
    # Date fields
    # ------------------------------------------------------------------

    def century(self) -> None:
        century = self._read_number(
            "century", MAX_CENTURY_DIGITS, width=MAX_CENTURY_DIGITS, signed=True
        )
        self._acc.set_century(century)

    def year(self) -> None:
        year = self._read_number("year", MAX_YEAR_DIGITS, width=MAX_YEAR_DIGITS, signed=True)
        self._acc.set_full_year(year)

    def year_suffix(self) -> None:
        suffix = self._read_in_range("year-suffix", MAX_TWO_DIGITS, 0, 99, width=2)
        self._acc.set_year_suffix(suffix)

    def iso_year(self) -> None:
        self._read_number("iso-year", MAX_YEAR_DIGITS, width=MAX_YEAR_DIGITS, signed=True)

    def iso_year_suffix(self) -> None:
        self._read_in_range("iso-year-suffix", MAX_TWO_DIGITS, 0, 99, width=2)

    def month_of_year(self) -> None:
        self._acc.set_month(self._read_in_range("month", MAX_TWO_DIGITS, 1, 12, width=2))

    def day_of_month(self) -> None:
        day = self._read_in_range("day-of-month", MAX_TWO_DIGITS, 1, 31, width=2)
        self._acc.set_day_of_month(day)

    def day_of_month_blank(self) -> None:
        day = self._read_in_range("day-of-month", MAX_TWO_DIGITS, 1, 31, blank=True)
        self._acc.set_day_of_month(day)

    def day_of_year(self) -> None:
        ordinal = self._read_in_range(
            "day-of-year", MAX_ORDINAL_DIGITS, 1, 366, width=MAX_ORDINAL_DIGITS
        )
        self._acc.set_ordinal(ordinal)

    def weekday_from_monday(self) -> None:
        self._read_in_range("day-of-week", MAX_WEEKDAY_DIGITS, 1, 7)

    def weekday_from_sunday(self) -> None:
        self._read_in_range("day-of-week", MAX_WEEKDAY_DIGITS, 0, 6)

    def week_of_year_from_sunday(self) -> None:
        self._read_in_range("week-number", MAX_TWO_DIGITS, 0, 53, width=2)

    def week_of_year_from_monday(self) -> None:
        self._read_in_range("week-number", MAX_TWO_DIGITS, 0, 53, width=2)

    def iso_week(self) -> None:
        self._read_in_range("iso-week", MAX_TWO_DIGITS, 1, 53, width=2)

    # ------------------------------------------------------------------
    # Time fields
    # ------------------------------------------------------------------

    def hour_of_day(self) -> None:
        hour = self._read_in_range("hour-of-day", MAX_TWO_DIGITS, 0, 23, width=2)
        self._acc.set_full_day_hour(hour)

    def hour_of_day_blank(self) -> None:
        hour = self._read_in_range("hour-of-day", MAX_TWO_DIGITS, 0, 23, blank=True)
        self._acc.set_full_day_hour(hour)

    def hour_of_day_12(self) -> None:
        hour = self._read_in_range("hour-of-half-day", MAX_TWO_DIGITS, 1, 12, width=2)
        self._acc.set_half_day_hour(hour)

    def hour_of_day_12_blank(self) -> None:
        hour = self._read_in_range("hour-of-half-day", MAX_TWO_DIGITS, 1, 12, blank=True)
        self._acc.set_half_day_hour(hour)

    def minute(self) -> None:
        self._acc.minute = self._read_in_range("minute", MAX_TWO_DIGITS, 0, 59, width=2)

    def second(self) -> None:
        # 60 passes here; ClockTime rejects it at finalization.
        self._acc.second = self._read_in_range("second", MAX_TWO_DIGITS, 0, 60, width=2)

    def subsecond(self) -> None:
        start = self._cursor.pos
        value = self._read_number("subsecond", SUBSECOND_DIGITS)
        digits = self._cursor.pos - start
        self._acc.nanosecond = value * NANOSECONDS_PER_SECOND // 10**digits

    # ------------------------------------------------------------------
    # Zone
    # ------------------------------------------------------------------

    def offset(self) -> None:
        """Consume 'Z'/'z' or a sign, 2 digits, optional ':' and 2 digits."""
        cursor = self._cursor
        if cursor.is_eof or cursor.current not in UTC_DESIGNATORS + "+-":
            raise self._missing("offset", cursor)
        if cursor.current in UTC_DESIGNATORS:
            self._cursor = cursor.advance()
            self._acc.zone = UTC_OFFSET
            return

        sign = -1 if cursor.current == "-" else 1
        self._cursor = cursor.advance()
        hours_at = self._cursor.pos
        hours = self._read_fixed_digits("offset-hour", OFFSET_DIGITS)
        self._cursor = self._cursor.expect(":") or self._cursor
        minutes_at = self._cursor.pos
        minutes = self._read_fixed_digits("offset-minute", OFFSET_DIGITS)

        for field, value, maximum, at in (
            ("offset-hour", hours, 23, hours_at),
            ("offset-minute", minutes, 59, minutes_at),
        ):
            if value > maximum:
                raise ComponentOutOfRangeError(
                    ErrorTemplate.component_out_of_range(field, value, at),
                    field=field,
                    value=value,
                    position=at,
                )
        self._acc.zone = UtcOffset(sign * hours, sign * minutes)

    def zone_name(self) -> None:
        """Consume the run of non-whitespace input as an opaque name.

        An empty run, at end of input or before whitespace, records no zone
        and is not an error; the zone stays None unless another %Z or %z
        sets it.
        """
        cursor = self._cursor
        while not cursor.is_eof and not cursor.current.isspace():
            cursor = cursor.advance()
        if cursor.pos > self._cursor.pos:
            span = SourceSpan(self._cursor.pos, cursor.pos)
            self._acc.zone = ZoneName(self._cursor.slice_to(cursor.pos), span)
        self._cursor = cursor
