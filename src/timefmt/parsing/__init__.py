"""Recover calendar values from text.

Public API:
    recover - Returns tuple[Recovered | None, tuple[TimeFormatError, ...]]
    recover_strict - Same, rejecting leftover input and short fields

Accumulator states:
    YearState, DayState and HourState record which specifiers described a
    field and decide precedence between them. ZoneName carries a %Z token.

Python 3.13+.
"""

from .accumulator import (
    CenturyYear,
    DayState,
    FullDayHour,
    FullYear,
    HalfDayHour,
    HourState,
    MonthDay,
    OrdinalDay,
    RecoverAccumulator,
    UnspecifiedDay,
    UnspecifiedHour,
    UnspecifiedYear,
    YearState,
    ZoneName,
    ZoneSpecifier,
)
from .collector import RecoverCollector
from .recover import Recovered, recover, recover_strict

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
    "RecoverCollector",
    "Recovered",
    "UnspecifiedDay",
    "UnspecifiedHour",
    "UnspecifiedYear",
    "YearState",
    "ZoneName",
    "ZoneSpecifier",
    "recover",
    "recover_strict",
]
