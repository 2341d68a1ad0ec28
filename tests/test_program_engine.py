"""Tests for rendering and parsing with compiled programs."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given

from timefmt import (
    CalendarDate,
    ComponentOutOfRangeError,
    ComponentRangeError,
    DateTime,
    NoMatchError,
    UnconvertedDataError,
    UnexpectedCharacterError,
    UtcOffset,
    compile_format,
    compile_parse,
    parse_program,
    render_program,
)
from timefmt.program import Program

from tests.strategies import date_times, utc_offsets

ISO_SECONDS = "%Y-%m-%d %H:%M:%S %z"


def format_program(format_string: str) -> Program:
    program, errors = compile_format(format_string)
    assert errors == ()
    assert program is not None
    return program


def parse_prog(format_string: str) -> Program:
    program, errors = compile_parse(format_string)
    assert errors == ()
    assert program is not None
    return program


def parsed(format_string: str, text: str) -> tuple[DateTime, UtcOffset | None]:
    result, errors = parse_program(parse_prog(format_string), text)
    assert errors == (), errors
    assert result is not None
    return result


def parse_failure(format_string: str, text: str) -> Exception:
    result, errors = parse_program(parse_prog(format_string), text)
    assert result is None
    assert len(errors) == 1
    return errors[0]


# ============================================================================
# RENDER
# ============================================================================


class TestRenderProgram:
    """Test render_program()."""

    def test_with_offset(self) -> None:
        program = format_program(ISO_SECONDS)
        value = DateTime.of(2012, 5, 21, 12, 9, 14)

        result, errors = render_program(program, value, offset=UtcOffset(9))

        assert errors == ()
        assert result == "2012-05-21 12:09:14 +0900"

    def test_without_offset(self) -> None:
        """Offset fields render nothing when no offset is known."""
        result, _ = render_program(format_program(ISO_SECONDS), DateTime.of(2012, 5, 21))

        assert result == "2012-05-21 00:00:00 "

    def test_negative_offset(self) -> None:
        result, _ = render_program(
            format_program("%z"), DateTime.of(2012, 5, 21), offset=UtcOffset(0, -30)
        )

        assert result == "-0030"

    def test_aware_datetime(self) -> None:
        """An aware datetime supplies its own offset."""
        value = datetime(2012, 5, 21, 12, 9, 14, tzinfo=timezone(timedelta(hours=-5)))

        result, _ = render_program(format_program(ISO_SECONDS), value)

        assert result == "2012-05-21 12:09:14 -0500"

    def test_padding_excludes_sign(self) -> None:
        """Year -1 zero-pads its digits to four."""
        result, _ = render_program(format_program("%Y"), CalendarDate(-1, 1, 1))

        assert result == "-0001"

    @pytest.mark.parametrize(
        ("format_string", "expected"),
        [
            ("%e|%k|%l", " 6| 7| 7"),
            ("%a %A %b %B", "Sun Sunday Mar March"),
            ("%p %P", "AM am"),
            ("%j %U %W %V %u %w", "065 10 09 09 7 0"),
            ("%f", "5"),
        ],
    )
    def test_fields(self, format_string: str, expected: str) -> None:
        value = DateTime.of(2022, 3, 6, 7, 0, 0, 500_000_000)

        result, _ = render_program(format_program(format_string), value)

        assert result == expected

    def test_parse_program_renders(self) -> None:
        """A parse program renders with the first alternative of each node."""
        result, _ = render_program(parse_prog("%F %T"), DateTime.of(2022, 3, 6, 12, 34, 56))

        assert result == "2022-03-06 12:34:56"


# ============================================================================
# PARSE
# ============================================================================


class TestParseProgram:
    """Test parse_program()."""

    @pytest.mark.parametrize("text", ["2012-05-21 12:09:14 +0900", "2012-05-21 12:09:14 +09:00"])
    def test_offset_with_or_without_colon(self, text: str) -> None:
        assert parsed(ISO_SECONDS, text) == (DateTime.of(2012, 5, 21, 12, 9, 14), UtcOffset(9))

    def test_negative_zero_hour_offset(self) -> None:
        """The sign survives a zero hour."""
        assert parsed("%z", "-00:30")[1] == UtcOffset(0, -30)

    def test_utc_designator_not_accepted(self) -> None:
        """Programs need a signed offset."""
        error = parse_failure("%z", "Z")

        assert isinstance(error, UnexpectedCharacterError)
        assert error.field == "offset-hour"

    def test_unpadded_number(self) -> None:
        """A single digit matches through the unpadded alternative."""
        assert parsed("%d", "5")[0].date == CalendarDate(1900, 1, 5)

    def test_space_padded_number(self) -> None:
        assert parsed("%d", " 5")[0].date == CalendarDate(1900, 1, 5)

    def test_mixed_widths(self) -> None:
        """Zero-padded month then unpadded day."""
        assert parsed("%m%d", "123")[0].date == CalendarDate(1900, 12, 3)

    def test_twelve_hour_clock(self) -> None:
        assert parsed("%I:%M %p", "12:05 am")[0].time.hour == 0
        assert parsed("%I:%M %p", "01:05 PM")[0].time.hour == 13

    def test_names_any_case(self) -> None:
        value, _ = parsed("%a %d %b %Y", "MONDAY 7 feb 2022")

        assert value.date == CalendarDate(2022, 2, 7)

    def test_ordinal(self) -> None:
        assert parsed("%Y %j", "2022 065")[0].date == CalendarDate(2022, 3, 6)

    def test_year_last_two(self) -> None:
        assert parsed("%y", "69")[0].date.year == 1969

    def test_signed_year(self) -> None:
        assert parsed("%Y", "-0001")[0].date.year == -1

    def test_subsecond(self) -> None:
        assert parsed("%S.%f", "01.000001234")[0].time.nanosecond == 1_234

    def test_whitespace_is_optional(self) -> None:
        assert parsed("%H %M", "0930")[0].time == parsed("%H:%M", "09:30")[0].time


class TestParseFailures:
    """Test parse_program() errors."""

    def test_leftover(self) -> None:
        """All input must be consumed."""
        error = parse_failure("%d", "5x")

        assert isinstance(error, UnconvertedDataError)
        assert error.leftover == "x"
        assert error.position == 1

    def test_literal_mismatch(self) -> None:
        """The furthest failure is reported."""
        error = parse_failure("%Y-%m", "2022/03")

        assert isinstance(error, NoMatchError)
        assert error.field == "literal"
        assert error.position == 4

    def test_out_of_range(self) -> None:
        error = parse_failure("%m", "13")

        assert isinstance(error, ComponentOutOfRangeError)
        assert error.field == "month"
        assert error.value == 13

    def test_invalid_date(self) -> None:
        """A full match whose fields do not form a date."""
        error = parse_failure("%F", "2022-04-31")

        assert isinstance(error, ComponentRangeError)
        assert error.component == "day"

    def test_empty_input(self) -> None:
        assert parse_failure("%Y", "") is not None


# ============================================================================
# PROPERTIES
# ============================================================================


class TestProgramRoundTrip:
    """Rendered text parses back to the rendered value."""

    @given(value=date_times(), offset=utc_offsets())
    def test_iso_round_trip(self, value: DateTime, offset: UtcOffset) -> None:
        fmt = "%Y-%m-%dT%H:%M:%S.%f%z"
        text, _ = render_program(format_program(fmt), value, offset=offset)
        assert text is not None

        assert parsed(fmt, text) == (value, offset)

    @given(value=date_times())
    def test_names_round_trip(self, value: DateTime) -> None:
        fmt = "%A %d %B %Y %I:%M:%S %p"
        text, _ = render_program(format_program(fmt), value)
        assert text is not None

        result, _ = parsed(fmt, text)
        assert result == DateTime.of(
            value.date.year,
            value.date.month,
            value.date.day,
            value.time.hour,
            value.time.minute,
            value.time.second,
        )


# ============================================================================
# MATCHING COST
# ============================================================================


class TestFailingInputCost:
    """Failing input is rejected without walking every path.

    Each numeric field has three padding alternatives and each whitespace
    run is optional, so the number of paths grows exponentially with the
    number of fields.
    """

    def test_many_numeric_fields_with_leftover(self) -> None:
        """Twenty fields and a trailing character fail quickly."""
        program = parse_prog("%M" * 20)
        text = "00" * 20 + "x"

        start = time.perf_counter()
        result, errors = parse_program(program, text)
        elapsed = time.perf_counter() - start

        assert result is None
        error = errors[0]
        assert isinstance(error, UnconvertedDataError)
        assert error.leftover == "x"
        assert error.position == 40
        assert elapsed < 0.5, f"parse_program too slow on failing input: {elapsed:.4f}s"

    def test_many_fields_and_spaces_with_mismatch(self) -> None:
        """Optional whitespace nodes do not multiply the work either."""
        program = parse_prog("%H %M %S " * 6 + "%Y")
        text = "01 02 03 " * 6 + "year"

        start = time.perf_counter()
        result, errors = parse_program(program, text)
        elapsed = time.perf_counter() - start

        assert result is None
        assert isinstance(errors[0], UnexpectedCharacterError)
        assert errors[0].position == 54
        assert elapsed < 0.5, f"parse_program too slow on failing input: {elapsed:.4f}s"

    def test_many_fields_success(self) -> None:
        """A long matching input still parses, with the later field winning."""
        value, offset = parsed("%M" * 20, "00" * 19 + "07")

        assert value.time.minute == 7
        assert offset is None

    def test_skipped_whitespace_path(self) -> None:
        """Blank padding after a separator is absorbed by the field."""
        value, _ = parsed("%Y %e %H", "2022  7 09")

        assert (value.date.day, value.time.hour) == (7, 9)
