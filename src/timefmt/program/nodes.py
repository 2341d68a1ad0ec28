"""Compiled program nodes.

A Program is a flat tuple of nodes; Optional and First nest further nodes.
All nodes are frozen dataclasses: hashable, comparable and safe to share
between threads.

Node types:
    Literal: Fixed text
    Field: One date/time component with a padding policy
    Optional: A node that may be absent
    First: Alternatives, tried in order

Python 3.13+.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

__all__ = [
    "Component",
    "Field",
    "First",
    "Literal",
    "Node",
    "Optional",
    "Padding",
    "Program",
]


class Component(StrEnum):
    """Date/time component a Field reads or writes."""

    WEEKDAY_SHORT = "weekday-short"
    WEEKDAY_LONG = "weekday-long"
    WEEKDAY_MONDAY = "weekday-from-monday"
    WEEKDAY_SUNDAY = "weekday-from-sunday"
    MONTH_NUMERIC = "month"
    MONTH_SHORT = "month-short"
    MONTH_LONG = "month-long"
    DAY = "day"
    ORDINAL = "ordinal"
    YEAR = "year"
    YEAR_LAST_TWO = "year-last-two"
    ISO_YEAR = "iso-year"
    ISO_YEAR_LAST_TWO = "iso-year-last-two"
    HOUR_24 = "hour"
    HOUR_12 = "hour-12"
    MINUTE = "minute"
    SECOND = "second"
    SUBSECOND = "subsecond"
    PERIOD_UPPER = "period"
    PERIOD_LOWER = "period-lower"
    WEEK_ISO = "iso-week"
    WEEK_SUNDAY = "week-from-sunday"
    WEEK_MONDAY = "week-from-monday"
    OFFSET_HOUR = "offset-hour"
    OFFSET_MINUTE = "offset-minute"


class Padding(StrEnum):
    """How a numeric Field fills its width."""

    ZERO = "zero"
    SPACE = "space"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Literal:
    """Fixed text, matched exactly."""

    value: str


@dataclass(frozen=True, slots=True)
class Field:
    """One component.

    Attributes:
        component: What the field holds
        padding: Fill policy for numeric components (ignored by names)
        case_sensitive: Whether names match case-sensitively on parse
    """

    component: Component
    padding: Padding = Padding.ZERO
    case_sensitive: bool = True


@dataclass(frozen=True, slots=True)
class Optional:
    """A node that may be absent on parse; always rendered."""

    item: "Node"


@dataclass(frozen=True, slots=True)
class First:
    """Alternatives tried in order; render uses the first."""

    items: tuple["Node", ...]


type Node = Literal | Field | Optional | First


@dataclass(frozen=True, slots=True)
class Program:
    """Replayable compiled format.

    Two programs with the same items compare equal regardless of the format
    text they were compiled from.

    Attributes:
        format: Source format string
        items: Top-level nodes in order
    """

    format: str = field(compare=False)
    items: tuple[Node, ...]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)
