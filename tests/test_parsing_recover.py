"""Tests for recover() and recover_strict().

Functions return tuple[value, errors]:
- recover() returns tuple[Recovered | None, tuple[TimeFormatError, ...]]
- Recovered is (DateTime, UtcOffset | ZoneName | None)
"""

from __future__ import annotations

import pytest

from timefmt import (
    CalendarDate,
    ClockTime,
    ComponentOutOfRangeError,
    ComponentRangeError,
    DateTime,
    NoMatchError,
    UnconvertedDataError,
    UnexpectedCharacterError,
    UnexpectedEndError,
    UnknownSpecifierError,
    UtcOffset,
    ZoneName,
    recover,
    recover_strict,
)
from timefmt.diagnostics import DiagnosticCode, SourceSpan


def recovered(format_string: str, text: str, *, strict: bool = False) -> DateTime:
    result, errors = recover(format_string, text, strict=strict)
    assert errors == (), errors
    assert result is not None
    return result[0]


def failure(format_string: str, text: str, *, strict: bool = False) -> Exception:
    result, errors = recover(format_string, text, strict=strict)
    assert result is None
    assert len(errors) == 1
    return errors[0]


# ============================================================================
# FIELDS
# ============================================================================


class TestNames:
    """Test textual fields."""

    def test_weekday_names_any_case(self) -> None:
        """Long or short names in any case are accepted by %a and %A."""
        value = recovered("%a %A %a", "wED Wed weDnesDay")

        assert value == DateTime.of(1900, 1, 1)

    def test_month_names_any_case(self) -> None:
        """A misspelled long name still matches its short prefix."""
        value = recovered("%b %B %b", "feB FEb feburaRy")

        assert value.date == CalendarDate(1900, 2, 1)

    def test_long_name_preferred(self) -> None:
        """The long name is consumed entirely when it matches."""
        result, errors = recover_strict("%B", "June")

        assert errors == ()
        assert result is not None
        assert result[0].date.month == 6

    def test_unknown_month_name(self) -> None:
        """A name that matches nothing fails with NoMatchError."""
        error = failure("%b", "Foo")

        assert isinstance(error, NoMatchError)
        assert error.field == "month name"
        assert error.position == 0

    def test_weekday_not_checked_against_date(self) -> None:
        """Weekday names are validated but do not affect the result."""
        value = recovered("%a %F", "Mon 2022-03-06")

        assert value.date == CalendarDate(2022, 3, 6)


class TestNumericFields:
    """Test numeric fields in default mode."""

    def test_composite_c(self) -> None:
        """%c recovers its own rendering."""
        value = recovered("%c", "Sun Mar  6 12:34:56 2022")

        assert value == DateTime.of(2022, 3, 6, 12, 34, 56)

    @pytest.mark.parametrize(
        ("format_string", "text", "expected"),
        [
            ("%C", "20", DateTime.of(2000, 1, 1)),
            ("%d", "5", DateTime.of(1900, 1, 5)),
            ("%e", "5", DateTime.of(1900, 1, 5)),
            ("%e", " 5", DateTime.of(1900, 1, 5)),
            ("%H", "2", DateTime.of(1900, 1, 1, 2)),
            ("%k", "2", DateTime.of(1900, 1, 1, 2)),
            ("%I", "2", DateTime.of(1900, 1, 1, 2)),
            ("%l", "12", DateTime.of(1900, 1, 1, 0)),
            ("%j", "38", DateTime.of(1900, 2, 7)),
            ("%m", "8", DateTime.of(1900, 8, 1)),
            ("%M", "8", DateTime.of(1900, 1, 1, 0, 8)),
            ("%S", "8", DateTime.of(1900, 1, 1, 0, 0, 8)),
            ("%y", "69", DateTime.of(1969, 1, 1)),
            ("%y", "68", DateTime.of(2068, 1, 1)),
            ("%Y", "-1", DateTime.of(-1, 1, 1)),
            ("%Y", "+2022", DateTime.of(2022, 1, 1)),
        ],
    )
    def test_single_field(self, format_string: str, text: str, expected: DateTime) -> None:
        """One digit suffices in default mode; missing fields take defaults."""
        assert recovered(format_string, text) == expected

    def test_whitespace_specifiers(self) -> None:
        """%n, %t and literal spaces each skip any run of whitespace."""
        value = recovered("%n%t %Y", " \t\n  \n2022")

        assert value.date.year == 2022

    def test_whitespace_may_be_absent(self) -> None:
        """Whitespace in the format matches zero characters."""
        assert recovered("%Y %m", "2022\t7").date == CalendarDate(2022, 7, 1)

    @pytest.mark.parametrize(
        ("text", "nanosecond"),
        [(".123", 123_000_000), (".000001234", 1_234), (".5", 500_000_000)],
    )
    def test_subsecond_scaling(self, text: str, nanosecond: int) -> None:
        """%f scales its digits to nanoseconds."""
        assert recovered("%T.%f", "01:23:45" + text).time == ClockTime(1, 23, 45, nanosecond)

    def test_validated_and_ignored_fields(self) -> None:
        """Week, weekday-number and ISO fields do not affect the result."""
        value = recovered("%U %W %w %u %V %g %G %F", "10 09 0 7 09 22 2022 2022-03-06")

        assert value == DateTime.of(2022, 3, 6)

    def test_out_of_range(self) -> None:
        """A month of 13 fails with its field and position."""
        error = failure("%Y-%m", "2022-13")

        assert isinstance(error, ComponentOutOfRangeError)
        assert error.field == "month"
        assert error.value == 13
        assert error.position == 5
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.COMPONENT_OUT_OF_RANGE

    def test_missing_digits(self) -> None:
        """A non-digit where a digit is required."""
        error = failure("%H:%M", "12:xx")

        assert isinstance(error, UnexpectedCharacterError)
        assert error.field == "minute"
        assert error.char == "x"
        assert error.position == 3

    def test_input_ends_early(self) -> None:
        """Input ending before a field fails with UnexpectedEndError."""
        error = failure("%F %T", "2022-03-06")

        assert isinstance(error, UnexpectedEndError)
        assert error.field == "hour-of-day"

    def test_literal_mismatch(self) -> None:
        """Literal text must match exactly."""
        error = failure("%Y年", "2022-")

        assert isinstance(error, NoMatchError)
        assert error.field == "literal"
        assert error.position == 4


class TestHalfDay:
    """Test the 12-hour clock."""

    @pytest.mark.parametrize(
        ("text", "hour"),
        [("12 AM", 0), ("1 AM", 1), ("1 pm", 13), ("12 pm", 12), ("11 Pm", 23)],
    )
    def test_period(self, text: str, hour: int) -> None:
        """%I with %p maps onto the 24-hour clock."""
        assert recovered("%I %p", text).time.hour == hour

    def test_period_before_hour(self) -> None:
        """The period may precede the hour."""
        assert recovered("%p %I", "PM 3").time.hour == 15

    def test_full_day_hour_wins(self) -> None:
        """%H overrides %I and %p regardless of order."""
        assert recovered("%I %p %H", "3 PM 09").time.hour == 9
        assert recovered("%H %I %p", "09 3 PM").time.hour == 9


# ============================================================================
# PRECEDENCE
# ============================================================================


class TestPrecedence:
    """Test specifiers that describe the same field."""

    def test_century_and_suffix(self) -> None:
        """%C and %y combine."""
        assert recovered("%C%y", "2022").date.year == 2022

    def test_century_alone_has_zero_suffix(self) -> None:
        """%C without %y means the first year of the century."""
        assert recovered("%C", "19").date.year == 1900

    def test_full_year_wins(self) -> None:
        """%Y overrides %C and %y in either order."""
        assert recovered("%C %Y", "19 2022").date.year == 2022
        assert recovered("%Y %y", "2022 99").date.year == 2022

    def test_ordinal_wins(self) -> None:
        """%j overrides month and day of month."""
        assert recovered("%j %m %d", "065 12 31").date == CalendarDate(1900, 3, 6)

    def test_later_equal_specifier_wins(self) -> None:
        """Between two month specifiers the later one wins."""
        assert recovered("%m %b", "01 Mar").date.month == 3


# ============================================================================
# ZONE
# ============================================================================


class TestZone:
    """Test %z and %Z."""

    @pytest.mark.parametrize(
        ("text", "offset"),
        [
            ("2022-03-06T12:34:56Z", UtcOffset()),
            ("2022-03-06T12:34:56z", UtcOffset()),
            ("2022-03-06T12:34:56+0900", UtcOffset(9)),
            ("2022-03-06T12:34:56+09:00", UtcOffset(9)),
            ("2022-03-06T12:34:56-1234", UtcOffset(-12, -34)),
            ("2022-03-06T12:34:56-0123", UtcOffset(-1, -23)),
            ("2022-03-06T12:34:56-00:30", UtcOffset(0, -30)),
        ],
    )
    def test_offset(self, text: str, offset: UtcOffset) -> None:
        """Z, z and signed offsets with or without a colon."""
        result, errors = recover("%FT%T%z", text)

        assert errors == ()
        assert result == (DateTime.of(2022, 3, 6, 12, 34, 56), offset)

    @pytest.mark.parametrize(
        ("text", "error_type", "field"),
        [
            ("+2:34", UnexpectedCharacterError, "offset-hour"),
            ("+234", UnexpectedEndError, "offset-minute"),
            ("0900", UnexpectedCharacterError, "offset"),
            ("+2400", ComponentOutOfRangeError, "offset-hour"),
            ("+0960", ComponentOutOfRangeError, "offset-minute"),
        ],
    )
    def test_malformed_offset(self, text: str, error_type: type, field: str) -> None:
        """Offsets need a sign and exactly two digits on each side."""
        error = failure("%z", text)

        assert isinstance(error, error_type)
        assert error.field == field  # type: ignore[attr-defined]

    def test_zone_name(self) -> None:
        """%Z records the name and where it was found."""
        result, errors = recover("%F %T %Z", "2022-03-06 12:34:56 JST")

        assert errors == ()
        assert result is not None
        assert result[1] == ZoneName("JST", SourceSpan(20, 23))

    def test_zone_name_stops_at_whitespace(self) -> None:
        """The name is the run of non-whitespace characters."""
        result, _ = recover("%Z %Y", "America/New_York 2022")

        assert result is not None
        assert result[1] == ZoneName("America/New_York", SourceSpan(0, 16))
        assert result[0].date.year == 2022

    def test_empty_zone_name(self) -> None:
        """An empty run records no zone."""
        result, errors = recover("%Z", "")

        assert errors == ()
        assert result == (DateTime.of(1900, 1, 1), None)

    def test_empty_zone_name_before_whitespace(self) -> None:
        """A %Z facing whitespace consumes nothing and parsing continues."""
        result, errors = recover("%Z %H", " 09")

        assert errors == ()
        assert result == (DateTime.of(1900, 1, 1, 9), None)

    def test_no_zone(self) -> None:
        """Without zone specifiers the zone is None."""
        result, _ = recover("%F", "2022-03-06")

        assert result is not None
        assert result[1] is None


# ============================================================================
# STRICT MODE AND FINALIZATION
# ============================================================================


class TestStrict:
    """Test recover_strict()."""

    def test_leftover_ignored_by_default(self) -> None:
        """Default mode ignores trailing input."""
        assert recovered("%F", "2022-03-06T12:34:56Z").date == CalendarDate(2022, 3, 6)

    def test_leftover_rejected(self) -> None:
        """Strict mode reports the unconsumed input."""
        result, errors = recover_strict("%F", "2022-03-06T12:34:56Z")

        assert result is None
        error = errors[0]
        assert isinstance(error, UnconvertedDataError)
        assert error.leftover == "T12:34:56Z"
        assert error.position == 10
        assert error.diagnostic is not None
        assert error.diagnostic.span == SourceSpan(10, 20)

    def test_short_width_rejected(self) -> None:
        """Strict mode requires the rendered width."""
        error = failure("%m-%d", "3-06", strict=True)

        assert isinstance(error, UnexpectedCharacterError)
        assert error.field == "month"
        assert error.char == "-"

    def test_short_width_at_end(self) -> None:
        """A short field at the end of input fails with UnexpectedEndError."""
        assert isinstance(failure("%m", "3", strict=True), UnexpectedEndError)

    def test_sign_counts_toward_width(self) -> None:
        """Year -1 needs "-001" in strict mode."""
        assert recovered("%Y", "-001", strict=True).date.year == -1
        assert isinstance(failure("%Y", "-01", strict=True), UnexpectedEndError)

    def test_space_padded_fields_need_one_digit(self) -> None:
        """%e and %k accept a single digit after optional spaces."""
        value = recovered("%e %k", " 6  7", strict=True)

        assert value == DateTime.of(1900, 1, 6, 7)

    def test_literal_zone_designator(self) -> None:
        """A literal Z in the format consumes the Z in the input."""
        result, errors = recover_strict("%FT%TZ", "2022-03-06T12:34:56Z")

        assert errors == ()
        assert result == (DateTime.of(2022, 3, 6, 12, 34, 56), None)

    def test_exact_input_accepted(self) -> None:
        """Fully consumed input succeeds."""
        result, errors = recover_strict("%FT%T%z", "2022-03-06T12:34:56+0900")

        assert errors == ()
        assert result == (DateTime.of(2022, 3, 6, 12, 34, 56), UtcOffset(9))


class TestFinalization:
    """Test errors raised when fields are assembled."""

    def test_invalid_day_for_month(self) -> None:
        """April 31 passes the field check but not date construction."""
        error = failure("%F", "2022-04-31")

        assert isinstance(error, ComponentRangeError)
        assert error.component == "day"
        assert error.value == 31

    def test_leap_second_rejected(self) -> None:
        """Second 60 is read but ClockTime rejects it."""
        error = failure("%T", "23:59:60")

        assert isinstance(error, ComponentRangeError)
        assert error.component == "second"

    def test_ordinal_366_in_common_year(self) -> None:
        """Day 366 only exists in leap years."""
        assert recovered("%Y %j", "2020 366").date == CalendarDate(2020, 12, 31)
        assert isinstance(failure("%Y %j", "2022 366"), ComponentRangeError)

    def test_defaults(self) -> None:
        """An empty format recovers 1900-01-01 00:00:00."""
        result, errors = recover("", "anything")

        assert errors == ()
        assert result == (DateTime(CalendarDate(1900, 1, 1), ClockTime()), None)


class TestFormatErrors:
    """Test errors in the format string itself."""

    def test_unknown_specifier(self) -> None:
        """Unknown specifiers fail the call."""
        error = failure("%Y %Q", "2022 x")

        assert isinstance(error, UnknownSpecifierError)
        assert error.specifier == "Q"

    def test_trailing_percent_matches_percent(self) -> None:
        """A lone trailing % matches a literal %."""
        assert recovered("%Y%", "2022%").date.year == 2022
