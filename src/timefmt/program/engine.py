"""Replay compiled programs.

render_program() writes every node: Optional renders its item and First
renders its first alternative. Numeric padding widths exclude the sign, so a
zero-padded year -1 renders as "-0001".

parse_program() matches nodes left to right. First tries its alternatives
in order and backtracks into the next alternative when a later node fails;
Optional tries its item, then nothing. The whole input must be consumed.
A (node index, position) state that led to no match is remembered and not
explored again, so the work is bounded by nodes times input length rather
than by the number of paths. When no path succeeds, the failure that got
furthest into the input is reported.

Thread-safe. Programs are immutable and matching state is per call.

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from timefmt.constants import DEFAULT_YEAR, NANOSECONDS_PER_SECOND, SUBSECOND_DIGITS
from timefmt.core import CalendarDate, ClockTime, DateTime, UtcOffset
from timefmt.diagnostics import (
    ComponentOutOfRangeError,
    ErrorTemplate,
    NoMatchError,
    RecoverError,
    TimeFormatError,
    UnconvertedDataError,
    UnexpectedCharacterError,
    UnexpectedEndError,
)
from timefmt.grammar import names
from timefmt.parsing.accumulator import resolve_suffix_year
from timefmt.rendering.collector import format_subsecond
from timefmt.rendering.render import RenderValue, coerce_value

from .nodes import Component, Field, First, Literal, Node, Optional, Padding, Program

__all__ = ["parse_program", "render_program"]

_C = Component

type Captures = Mapping[str, int]

# Field width for every numeric component, sign excluded.
_WIDTHS: Mapping[Component, int] = MappingProxyType(
    {
        _C.DAY: 2,
        _C.MONTH_NUMERIC: 2,
        _C.ORDINAL: 3,
        _C.YEAR: 4,
        _C.YEAR_LAST_TWO: 2,
        _C.ISO_YEAR: 4,
        _C.ISO_YEAR_LAST_TWO: 2,
        _C.HOUR_24: 2,
        _C.HOUR_12: 2,
        _C.MINUTE: 2,
        _C.SECOND: 2,
        _C.WEEK_ISO: 2,
        _C.WEEK_SUNDAY: 2,
        _C.WEEK_MONDAY: 2,
        _C.WEEKDAY_MONDAY: 1,
        _C.WEEKDAY_SUNDAY: 1,
        _C.OFFSET_HOUR: 2,
        _C.OFFSET_MINUTE: 2,
    }
)

# Accepted range on parse; years are bounded by their width only.
_RANGES: Mapping[Component, tuple[int, int]] = MappingProxyType(
    {
        _C.DAY: (1, 31),
        _C.MONTH_NUMERIC: (1, 12),
        _C.ORDINAL: (1, 366),
        _C.YEAR_LAST_TWO: (0, 99),
        _C.ISO_YEAR_LAST_TWO: (0, 99),
        _C.HOUR_24: (0, 23),
        _C.HOUR_12: (1, 12),
        _C.MINUTE: (0, 59),
        _C.SECOND: (0, 60),
        _C.WEEK_ISO: (1, 53),
        _C.WEEK_SUNDAY: (0, 53),
        _C.WEEK_MONDAY: (0, 53),
        _C.WEEKDAY_MONDAY: (1, 7),
        _C.WEEKDAY_SUNDAY: (0, 6),
        _C.OFFSET_HOUR: (0, 23),
        _C.OFFSET_MINUTE: (0, 59),
    }
)

_SIGNED = frozenset({_C.YEAR, _C.ISO_YEAR})

# Capture key for components that feed the recovered value; others are
# validated and dropped.
_CAPTURE_KEYS: Mapping[Component, str] = MappingProxyType(
    {
        _C.DAY: "day",
        _C.MONTH_NUMERIC: "month",
        _C.MONTH_SHORT: "month",
        _C.MONTH_LONG: "month",
        _C.ORDINAL: "ordinal",
        _C.YEAR: "year",
        _C.YEAR_LAST_TWO: "year-last-two",
        _C.HOUR_24: "hour",
        _C.HOUR_12: "hour-12",
        _C.PERIOD_UPPER: "pm",
        _C.PERIOD_LOWER: "pm",
        _C.MINUTE: "minute",
        _C.SECOND: "second",
        _C.SUBSECOND: "nanosecond",
        _C.OFFSET_HOUR: "offset-hour",
        _C.OFFSET_MINUTE: "offset-minute",
    }
)


# ============================================================================
# RENDER
# ============================================================================


def _numeric_value(component: Component, value: DateTime) -> int:
    date, time = value.date, value.time
    match component:
        case _C.DAY:
            return date.day
        case _C.MONTH_NUMERIC:
            return date.month
        case _C.ORDINAL:
            return date.ordinal
        case _C.YEAR:
            return date.year
        case _C.YEAR_LAST_TWO:
            return abs(date.year) % 100
        case _C.ISO_YEAR:
            return date.iso_week_date()[0]
        case _C.ISO_YEAR_LAST_TWO:
            return abs(date.iso_week_date()[0]) % 100
        case _C.HOUR_24:
            return time.hour
        case _C.HOUR_12:
            return time.hour % 12 or 12
        case _C.MINUTE:
            return time.minute
        case _C.SECOND:
            return time.second
        case _C.WEEK_ISO:
            return date.iso_week
        case _C.WEEK_SUNDAY:
            return date.sunday_based_week
        case _C.WEEK_MONDAY:
            return date.monday_based_week
        case _C.WEEKDAY_MONDAY:
            return date.weekday.number_from_monday
        case _C.WEEKDAY_SUNDAY:
            return date.weekday.number_days_from_sunday
        case _:
            msg = f"{component} is not numeric"
            raise ValueError(msg)


def _pad(number: int, width: int, padding: Padding) -> str:
    digits = str(abs(number))
    sign = "-" if number < 0 else ""
    match padding:
        case Padding.ZERO:
            return sign + digits.zfill(width)
        case Padding.SPACE:
            return (sign + digits).rjust(width)
        case Padding.NONE:
            return sign + digits


def _render_field(node: Field, value: DateTime, offset: UtcOffset | None) -> str:
    component = node.component
    match component:
        case _C.WEEKDAY_SHORT:
            return names.weekday_short(value.date.weekday)
        case _C.WEEKDAY_LONG:
            return names.weekday_long(value.date.weekday)
        case _C.MONTH_SHORT:
            return names.month_short(value.date.month_enum)
        case _C.MONTH_LONG:
            return names.month_long(value.date.month_enum)
        case _C.PERIOD_UPPER:
            return names.ampm_upper(value.time.hour)
        case _C.PERIOD_LOWER:
            return names.ampm_lower(value.time.hour)
        case _C.SUBSECOND:
            return format_subsecond(value.time.nanosecond)
        case _C.OFFSET_HOUR:
            if offset is None:
                return ""
            sign = "-" if offset.is_negative else "+"
            return sign + _pad(abs(offset.hours), _WIDTHS[component], node.padding)
        case _C.OFFSET_MINUTE:
            if offset is None:
                return ""
            return _pad(abs(offset.minutes), _WIDTHS[component], node.padding)
        case _:
            number = _numeric_value(component, value)
            return _pad(number, _WIDTHS[component], node.padding)


def _render_node(node: Node, value: DateTime, offset: UtcOffset | None) -> str:
    match node:
        case Literal(value=text):
            return text
        case Field():
            return _render_field(node, value, offset)
        case Optional(item=item):
            return _render_node(item, value, offset)
        case First(items=items):
            return _render_node(items[0], value, offset) if items else ""


def render_program(
    program: Program,
    value: RenderValue,
    *,
    offset: UtcOffset | None = None,
) -> tuple[str | None, tuple[TimeFormatError, ...]]:
    """Render value with a compiled program.

    Offset fields render nothing when no offset is known.

    Args:
        program: Program from compile_format() (or compile_parse())
        value: DateTime, CalendarDate, datetime or date
        offset: Offset for offset fields; an aware datetime supplies its own

    Returns:
        Tuple of (result, errors); rendering a valid program cannot fail,
        so errors is always empty.

    Raises:
        TypeError: If value is not a supported type (programming error)
    """
    moment, offset, _ = coerce_value(value, offset, None)
    return ("".join(_render_node(node, moment, offset) for node in program.items), ())


# ============================================================================
# PARSE
# ============================================================================


class _ProgramMatcher:
    """Backtracking matcher over one input text."""

    __slots__ = ("dead", "failure", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.failure: RecoverError | None = None
        self.dead: set[tuple[int, int]] = set()

    def fail(self, error: RecoverError) -> None:
        """Remember error if it is at least as far into the input as the last."""
        if self.failure is None or error.position >= self.failure.position:
            self.failure = error

    def _missing(self, field: str, pos: int) -> None:
        if pos >= len(self.text):
            self.fail(
                UnexpectedEndError(
                    ErrorTemplate.unexpected_end(field, pos), field=field, position=pos
                )
            )
            return
        char = self.text[pos]
        self.fail(
            UnexpectedCharacterError(
                ErrorTemplate.unexpected_character(field, char, pos),
                field=field,
                char=char,
                position=pos,
            )
        )

    def _digits(self, pos: int, count: int) -> int:
        """Number of consecutive ASCII digits at pos, at most count."""
        end = pos
        text = self.text
        while end - pos < count and end < len(text) and "0" <= text[end] <= "9":
            end += 1
        return end - pos

    def _match_number(self, node: Field, pos: int) -> tuple[int, int, bool] | None:
        """Match a numeric field; return (end, magnitude, negative) or None."""
        component = node.component
        field = component.value
        text = self.text
        start = pos
        negative = False
        if component is _C.OFFSET_HOUR:
            if pos >= len(text) or text[pos] not in "+-":
                self._missing(field, pos)
                return None
            negative = text[pos] == "-"
            pos += 1
        elif component in _SIGNED and pos < len(text) and text[pos] in "+-":
            negative = text[pos] == "-"
            pos += 1

        if component is _C.SUBSECOND:
            count = self._digits(pos, SUBSECOND_DIGITS)
            if count == 0:
                self._missing(field, pos)
                return None
            value = int(text[pos : pos + count]) * NANOSECONDS_PER_SECOND // 10**count
            return pos + count, value, False

        width = _WIDTHS[component]
        match node.padding:
            case Padding.ZERO:
                needed = width
            case Padding.SPACE:
                spaces = 0
                while spaces < width - 1 and pos < len(text) and text[pos] == " ":
                    spaces += 1
                    pos += 1
                needed = width - spaces
            case Padding.NONE:
                needed = 1
        count = self._digits(pos, width if node.padding is Padding.NONE else needed)
        if count < needed:
            self._missing(field, pos + count)
            return None
        value = int(text[pos : pos + count])

        bounds = _RANGES.get(component)
        if bounds is not None and not bounds[0] <= value <= bounds[1]:
            self.fail(
                ComponentOutOfRangeError(
                    ErrorTemplate.component_out_of_range(field, value, start),
                    field=field,
                    value=value,
                    position=start,
                )
            )
            return None
        return pos + count, value, negative

    def _name_candidates(self, component: Component) -> list[tuple[int, str]]:
        match component:
            case _C.WEEKDAY_SHORT:
                return [(int(wd), short) for wd, _, short in names.weekday_names()]
            case _C.WEEKDAY_LONG:
                return [(int(wd), long) for wd, long, _ in names.weekday_names()]
            case _C.MONTH_SHORT:
                return [(int(m), short) for m, _, short in names.month_names()]
            case _C.MONTH_LONG:
                return [(int(m), long) for m, long, _ in names.month_names()]
            case _C.PERIOD_UPPER:
                return [(0, names.ampm_upper(0)), (1, names.ampm_upper(12))]
            case _:
                return [(0, names.ampm_lower(0)), (1, names.ampm_lower(12))]

    def _match_name(self, node: Field, pos: int) -> tuple[int, int, bool] | None:
        text = self.text
        for value, name in self._name_candidates(node.component):
            candidate = text[pos : pos + len(name)]
            if node.case_sensitive:
                matched = candidate == name
            else:
                matched = candidate.lower() == name.lower()
            if matched:
                return pos + len(name), value, False
        field = node.component.value
        self.fail(NoMatchError(ErrorTemplate.no_match(field, pos), field=field, position=pos))
        return None

    def _match_field(
        self, node: Field, pos: int, captures: Captures
    ) -> Iterator[tuple[int, Captures]]:
        component = node.component
        if component in _WIDTHS or component is _C.SUBSECOND:
            result = self._match_number(node, pos)
        else:
            result = self._match_name(node, pos)
        if result is None:
            return
        end, value, negative = result
        key = _CAPTURE_KEYS.get(component)
        if key is None:
            yield end, captures
        elif component is _C.OFFSET_HOUR:
            # In -00:30 the hour is zero, so the sign is kept separately.
            yield end, {**captures, key: value, "offset-negative": int(negative)}
        else:
            yield end, {**captures, key: -value if negative else value}

    def match_node(
        self, node: Node, pos: int, captures: Captures
    ) -> Iterator[tuple[int, Captures]]:
        """Yield (end, captures) for every way node matches at pos."""
        match node:
            case Literal(value=text):
                if self.text.startswith(text, pos):
                    yield pos + len(text), captures
                else:
                    self.fail(
                        NoMatchError(
                            ErrorTemplate.no_match("literal", pos), field="literal", position=pos
                        )
                    )
            case Field():
                yield from self._match_field(node, pos, captures)
            case Optional(item=item):
                yield from self.match_node(item, pos, captures)
                yield pos, captures
            case First(items=alternatives):
                for alternative in alternatives:
                    yield from self.match_node(alternative, pos, captures)

    def match_sequence(
        self, items: tuple[Node, ...], index: int, pos: int, captures: Captures
    ) -> Iterator[Captures]:
        """Yield captures for every way items[index:] matches all of text[pos:].

        Whether the rest of a program can match depends only on (index, pos),
        not on what was captured before, so a state that produced no match
        is never explored again. This keeps failing input polynomial.
        """
        if (index, pos) in self.dead:
            return
        matched = False
        if index == len(items):
            if pos == len(self.text):
                matched = True
                yield captures
            else:
                leftover = self.text[pos:]
                self.fail(
                    UnconvertedDataError(
                        ErrorTemplate.unconverted_data(leftover, pos),
                        leftover=leftover,
                        position=pos,
                    )
                )
        else:
            for end, next_captures in self.match_node(items[index], pos, captures):
                for complete in self.match_sequence(items, index + 1, end, next_captures):
                    matched = True
                    yield complete
        if not matched:
            self.dead.add((index, pos))


def _assemble(captures: Captures) -> tuple[DateTime, UtcOffset | None]:
    """Build the parsed value from captured components.

    Raises:
        ComponentRangeError: If the components do not form a valid value
    """
    if "year" in captures:
        year = captures["year"]
    elif "year-last-two" in captures:
        year = resolve_suffix_year(captures["year-last-two"])
    else:
        year = DEFAULT_YEAR

    if "ordinal" in captures:
        date = CalendarDate.from_ordinal_date(year, captures["ordinal"])
    else:
        date = CalendarDate(year, captures.get("month", 1), captures.get("day", 1))

    if "hour" in captures:
        hour = captures["hour"]
    else:
        hour = captures.get("hour-12", 12) % 12 + 12 * captures.get("pm", 0)
    time = ClockTime(
        hour,
        captures.get("minute", 0),
        captures.get("second", 0),
        captures.get("nanosecond", 0),
    )

    offset = None
    if "offset-hour" in captures:
        sign = -1 if captures.get("offset-negative") else 1
        offset = UtcOffset(sign * captures["offset-hour"], sign * captures.get("offset-minute", 0))
    return DateTime(date, time), offset


def parse_program(
    program: Program,
    text: str,
) -> tuple[tuple[DateTime, UtcOffset | None] | None, tuple[TimeFormatError, ...]]:
    """Parse text with a compiled program.

    Args:
        program: Program from compile_parse()
        text: Input; all of it must be consumed

    Returns:
        Tuple of (result, errors):
        - result: (DateTime, offset or None), or None on failure
        - errors: Tuple of TimeFormatError (empty on success)

    Examples:
        >>> from timefmt.program.compiler import compile_parse
        >>> program, _ = compile_parse("%Y-%m-%d %H:%M:%S %z")
        >>> (value, offset), errors = parse_program(program, "2012-05-21 12:09:14 +09:00")
        >>> value.time.hour, offset
        (12, UtcOffset(hours=9, minutes=0, seconds=0))
    """
    matcher = _ProgramMatcher(text)
    for captures in matcher.match_sequence(program.items, 0, 0, {}):
        try:
            return (_assemble(captures), ())
        except TimeFormatError as e:
            return (None, (e,))
    if matcher.failure is None:
        matcher.failure = NoMatchError(
            ErrorTemplate.no_match("program", 0), field="program", position=0
        )
    return (None, (matcher.failure,))
