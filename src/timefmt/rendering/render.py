"""Render entry points.

- render() returns tuple[str | None, tuple[TimeFormatError, ...]]
- render_into() returns tuple[int | None, tuple[TimeFormatError, ...]]
- Functions NEVER raise TimeFormatError - errors are returned in tuple

Accepted values:
    DateTime, CalendarDate (midnight), and the standard library datetime and
    date. An aware datetime contributes its offset and tzname() unless the
    caller passes offset or zone_name explicitly.

Thread-safe. No shared state.

Python 3.13+.
"""

from datetime import date, datetime
from io import StringIO

from timefmt.core import CalendarDate, DateTime, UtcOffset
from timefmt.diagnostics import TimeFormatError
from timefmt.grammar import dispatch

from .collector import RenderCollector, TextSink

__all__ = ["RenderValue", "coerce_value", "render", "render_into"]

type RenderValue = DateTime | CalendarDate | datetime | date


def coerce_value(
    value: RenderValue,
    offset: UtcOffset | None,
    zone_name: str | None,
) -> tuple[DateTime, UtcOffset | None, str | None]:
    """Normalize value to (DateTime, offset, zone name).

    Raises:
        TypeError: If value is not a supported date or time type
    """
    match value:
        case DateTime():
            return value, offset, zone_name
        case CalendarDate():
            return DateTime(value), offset, zone_name
        case datetime():
            delta = value.utcoffset()
            if offset is None and delta is not None:
                offset = UtcOffset.from_timedelta(delta)
            if zone_name is None:
                zone_name = value.tzname()
            return DateTime.from_datetime(value), offset, zone_name
        case date():
            return DateTime.from_datetime(value), offset, zone_name
        case _:
            msg = f"Expected DateTime, CalendarDate, datetime or date, got {type(value).__name__}"
            raise TypeError(msg)


def render_into(
    format_string: str,
    value: RenderValue,
    sink: TextSink,
    *,
    offset: UtcOffset | None = None,
    zone_name: str | None = None,
) -> tuple[int | None, tuple[TimeFormatError, ...]]:
    """Render value into sink according to format_string.

    Text written before a failure stays in the sink.

    Args:
        format_string: Format such as "%Y-%m-%d"
        value: Value to render
        sink: Writable text stream
        offset: Offset for %z
        zone_name: Name for %Z

    Returns:
        Tuple of (result, errors):
        - result: Number of characters written, or None on failure
        - errors: UnknownSpecifierError or RenderError (empty on success)

    Raises:
        TypeError: If value is not a supported type (programming error)
    """
    moment, offset, zone_name = coerce_value(value, offset, zone_name)
    counting = _CountingSink(sink)
    collector = RenderCollector(counting, moment, offset=offset, zone_name=zone_name)
    try:
        dispatch(format_string, collector)
    except TimeFormatError as e:
        return (None, (e,))
    return (counting.count, ())


def render(
    format_string: str,
    value: RenderValue,
    *,
    offset: UtcOffset | None = None,
    zone_name: str | None = None,
) -> tuple[str | None, tuple[TimeFormatError, ...]]:
    """Render value as text according to format_string.

    Args:
        format_string: Format such as "%a %b %e %H:%M:%S %Y"
        value: Value to render
        offset: Offset for %z; nothing is rendered when absent
        zone_name: Name for %Z; nothing is rendered when absent

    Returns:
        Tuple of (result, errors):
        - result: Rendered text, or None on failure
        - errors: Tuple of TimeFormatError (empty on success)

    Examples:
        >>> render("%c", DateTime.of(2022, 3, 6, 12, 34, 56))
        ('Sun Mar  6 12:34:56 2022', ())

        >>> result, errors = render("%Q", DateTime.of(2022, 3, 6))
        >>> result is None, type(errors[0]).__name__
        (True, 'UnknownSpecifierError')
    """
    buffer = StringIO()
    _, errors = render_into(format_string, value, buffer, offset=offset, zone_name=zone_name)
    if errors:
        return (None, errors)
    return (buffer.getvalue(), ())


class _CountingSink:
    """Forwards writes to a text stream and counts characters written."""

    __slots__ = ("_sink", "count")

    def __init__(self, sink: TextSink) -> None:
        self._sink = sink
        self.count = 0

    def write(self, text: str, /) -> int:
        self._sink.write(text)
        self.count += len(text)
        return len(text)
