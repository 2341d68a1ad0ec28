"""Hypothesis strategies for timefmt property-based testing.

Strategies are organized by domain:

- values: Calendar dates, clock times, date-times and UTC offsets
- formats: Format strings that survive a render/recover round trip

Usage:
    from tests.strategies import date_times, reversible_formats
    from tests.strategies.values import date_by_boundary
"""

from .formats import (
    REVERSIBLE_FORMATS,
    SPECIFIER_CHARS,
    format_strings,
    reversible_formats,
)
from .values import (
    calendar_dates,
    clock_times,
    date_by_boundary,
    date_times,
    utc_offsets,
    wide_calendar_dates,
)

__all__ = [
    "REVERSIBLE_FORMATS",
    "SPECIFIER_CHARS",
    "calendar_dates",
    "clock_times",
    "date_by_boundary",
    "date_times",
    "format_strings",
    "reversible_formats",
    "utc_offsets",
    "wide_calendar_dates",
]
