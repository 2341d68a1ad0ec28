"""Specifier grammar and format-string dispatcher.

The grammar is defined exactly once, here. Every realization (render,
recover, compile) subclasses Collector and supplies the semantics of the
primitive operations; the dispatcher walks a format string and drives the
collector through literal runs, primitive specifiers and composite
specifiers.

Grammar:
    Composite specifiers (%c %D %F %r %R %T %x %X) and the character
    specifiers (%n %t %%) are fixed sequences of primitives and separators
    in GRAMMAR. Render and parse directions share these sequences verbatim,
    which keeps the two directions symmetric.

Whitespace:
    Collectors that set ``splits_whitespace`` (the parse direction) receive
    every run of whitespace, in literal text and in separators alike, as a
    single ``spaces()`` call. Other collectors receive the text unchanged.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar

from timefmt.diagnostics import SourceSpan

__all__ = [
    "GRAMMAR",
    "Collector",
    "Primitive",
    "Separator",
    "dispatch",
]


class Primitive(StrEnum):
    """Primitive collector operations; the value is the method name."""

    WEEKDAY_NAME_SHORT = "weekday_name_short"  # %a
    WEEKDAY_NAME_LONG = "weekday_name_long"  # %A
    MONTH_NAME_SHORT = "month_name_short"  # %b %h
    MONTH_NAME_LONG = "month_name_long"  # %B
    CENTURY = "century"  # %C
    DAY_OF_MONTH = "day_of_month"  # %d
    DAY_OF_MONTH_BLANK = "day_of_month_blank"  # %e
    SUBSECOND = "subsecond"  # %f
    ISO_YEAR_SUFFIX = "iso_year_suffix"  # %g
    ISO_YEAR = "iso_year"  # %G
    HOUR_OF_DAY = "hour_of_day"  # %H
    HOUR_OF_DAY_12 = "hour_of_day_12"  # %I
    DAY_OF_YEAR = "day_of_year"  # %j
    HOUR_OF_DAY_BLANK = "hour_of_day_blank"  # %k
    HOUR_OF_DAY_12_BLANK = "hour_of_day_12_blank"  # %l
    MONTH_OF_YEAR = "month_of_year"  # %m
    MINUTE = "minute"  # %M
    AMPM = "ampm"  # %p
    AMPM_LOWER = "ampm_lower"  # %P
    SECOND = "second"  # %S
    WEEKDAY_FROM_MONDAY = "weekday_from_monday"  # %u
    WEEK_OF_YEAR_FROM_SUNDAY = "week_of_year_from_sunday"  # %U
    ISO_WEEK = "iso_week"  # %V
    WEEKDAY_FROM_SUNDAY = "weekday_from_sunday"  # %w
    WEEK_OF_YEAR_FROM_MONDAY = "week_of_year_from_monday"  # %W
    YEAR_SUFFIX = "year_suffix"  # %y
    YEAR = "year"  # %Y
    OFFSET = "offset"  # %z
    ZONE_NAME = "zone_name"  # %Z


@dataclass(frozen=True, slots=True)
class Separator:
    """Fixed text emitted between primitives of a composite specifier."""

    text: str


type GrammarStep = Primitive | Separator

_P = Primitive
_SPACE = Separator(" ")
_COLON = Separator(":")
_SLASH = Separator("/")
_HYPHEN = Separator("-")

_TIME_OF_DAY: tuple[GrammarStep, ...] = (
    _P.HOUR_OF_DAY, _COLON, _P.MINUTE, _COLON, _P.SECOND,
)  # fmt: skip
_DATE_MMDDYY: tuple[GrammarStep, ...] = (
    _P.MONTH_OF_YEAR, _SLASH, _P.DAY_OF_MONTH, _SLASH, _P.YEAR_SUFFIX,
)  # fmt: skip

# Specifier character -> sequence of grammar steps.
GRAMMAR: Mapping[str, tuple[GrammarStep, ...]] = MappingProxyType(
    {
        "a": (_P.WEEKDAY_NAME_SHORT,),
        "A": (_P.WEEKDAY_NAME_LONG,),
        "b": (_P.MONTH_NAME_SHORT,),
        "h": (_P.MONTH_NAME_SHORT,),
        "B": (_P.MONTH_NAME_LONG,),
        # POSIX locale: %a %b %e %H:%M:%S %Y
        "c": (
            _P.WEEKDAY_NAME_SHORT, _SPACE, _P.MONTH_NAME_SHORT, _SPACE,
            _P.DAY_OF_MONTH_BLANK, _SPACE, *_TIME_OF_DAY, _SPACE, _P.YEAR,
        ),  # fmt: skip
        "C": (_P.CENTURY,),
        "d": (_P.DAY_OF_MONTH,),
        "D": _DATE_MMDDYY,
        "e": (_P.DAY_OF_MONTH_BLANK,),
        "f": (_P.SUBSECOND,),
        "F": (_P.YEAR, _HYPHEN, _P.MONTH_OF_YEAR, _HYPHEN, _P.DAY_OF_MONTH),
        "g": (_P.ISO_YEAR_SUFFIX,),
        "G": (_P.ISO_YEAR,),
        "H": (_P.HOUR_OF_DAY,),
        "I": (_P.HOUR_OF_DAY_12,),
        "j": (_P.DAY_OF_YEAR,),
        "k": (_P.HOUR_OF_DAY_BLANK,),
        "l": (_P.HOUR_OF_DAY_12_BLANK,),
        "m": (_P.MONTH_OF_YEAR,),
        "M": (_P.MINUTE,),
        "n": (Separator("\n"),),
        "p": (_P.AMPM,),
        "P": (_P.AMPM_LOWER,),
        # POSIX locale: %I:%M:%S %p
        "r": (
            _P.HOUR_OF_DAY_12, _COLON, _P.MINUTE, _COLON, _P.SECOND, _SPACE, _P.AMPM,
        ),  # fmt: skip
        "R": (_P.HOUR_OF_DAY, _COLON, _P.MINUTE),
        "S": (_P.SECOND,),
        "t": (Separator("\t"),),
        "T": _TIME_OF_DAY,
        "u": (_P.WEEKDAY_FROM_MONDAY,),
        "U": (_P.WEEK_OF_YEAR_FROM_SUNDAY,),
        "V": (_P.ISO_WEEK,),
        "w": (_P.WEEKDAY_FROM_SUNDAY,),
        "W": (_P.WEEK_OF_YEAR_FROM_MONDAY,),
        # POSIX locale: %m/%d/%y and %H:%M:%S
        "x": _DATE_MMDDYY,
        "X": _TIME_OF_DAY,
        "y": (_P.YEAR_SUFFIX,),
        "Y": (_P.YEAR,),
        "z": (_P.OFFSET,),
        "Z": (_P.ZONE_NAME,),
        "%": (Separator("%"),),
    }
)


class Collector[T]:
    """Base class for dispatcher realizations.

    Subclasses implement every Primitive as a method of the same name, plus
    the text hooks below, and produce their result from output(). A
    primitive aborts the walk by raising a TimeFormatError subclass.

    Completeness is checked when a subclass is defined, so a collector
    missing an operation fails at import rather than halfway through a
    walk. Intermediate bases pass ``partial=True`` to defer the check to
    their subclasses.

    Example:
        >>> class Empty(Collector[None]):  # doctest: +ELLIPSIS
        ...     pass
        Traceback (most recent call last):
        ...
        TypeError: Empty does not implement: weekday_name_short, ...
    """

    # Deliver whitespace runs as spaces() calls instead of text.
    splits_whitespace: ClassVar[bool] = False

    def __init_subclass__(cls, *, partial: bool = False, **kwargs: object) -> None:
        """Reject a concrete subclass that leaves an operation unimplemented.

        Args:
            partial: The subclass is an intermediate base

        Raises:
            TypeError: If a primitive or a required text hook is missing
        """
        super().__init_subclass__(**kwargs)
        if partial:
            return
        required = [primitive.value for primitive in Primitive]
        required += ["static_str", "literal", "unknown", "output"]
        if cls.splits_whitespace:
            required.append("spaces")
        missing = [
            name for name in required if getattr(cls, name, None) is getattr(Collector, name, None)
        ]
        if missing:
            msg = f"{cls.__name__} does not implement: {', '.join(missing)}"
            raise TypeError(msg)

    def static_str(self, text: str) -> None:
        """Separator text from a composite or character specifier."""
        raise NotImplementedError

    def literal(self, text: str, span: SourceSpan) -> None:
        """Literal run copied from the format string.

        Args:
            text: The literal text
            span: Its offsets in the format string
        """
        raise NotImplementedError

    def spaces(self) -> None:
        """A whitespace run (only called when splits_whitespace is set)."""
        raise NotImplementedError

    def unknown(self, specifier: str, position: int) -> None:
        """Unrecognized character after '%' at position."""
        raise NotImplementedError

    def output(self) -> T:
        """Construct the final result from what was collected."""
        raise NotImplementedError


def _emit_text(collector: Collector[Any], text: str, start: int | None) -> None:
    """Hand text to the collector, splitting whitespace if it asks for that.

    start is the text's offset in the format string, or None for separator
    text that has no position of its own.
    """
    if not collector.splits_whitespace:
        if start is None:
            collector.static_str(text)
        else:
            collector.literal(text, SourceSpan(start, start + len(text)))
        return

    i = 0
    n = len(text)
    while i < n:
        if text[i].isspace():
            while i < n and text[i].isspace():
                i += 1
            collector.spaces()
            continue
        j = i
        while j < n and not text[j].isspace():
            j += 1
        if start is None:
            collector.static_str(text[i:j])
        else:
            collector.literal(text[i:j], SourceSpan(start + i, start + j))
        i = j


def dispatch[T](format_string: str, collector: Collector[T]) -> T:
    """Walk format_string once, driving collector, and return its output.

    Args:
        format_string: Format such as "%Y-%m-%d %H:%M:%S"
        collector: The realization to drive

    Returns:
        collector.output()

    Raises:
        TimeFormatError: Whatever the collector raises; the walk stops at
            the first error.

    Example:
        A trailing lone '%' is a literal percent sign; an unknown specifier
        character is reported through collector.unknown().
    """
    pos = 0
    n = len(format_string)
    while pos < n:
        i = format_string.find("%", pos)
        if i == -1:
            i = n
        if i > pos:
            _emit_text(collector, format_string[pos:i], pos)
            pos = i
            if pos == n:
                break

        if pos + 1 >= n:
            _emit_text(collector, "%", None)
            break

        specifier = format_string[pos + 1]
        steps = GRAMMAR.get(specifier)
        if steps is None:
            collector.unknown(specifier, pos)
        else:
            for step in steps:
                if isinstance(step, Separator):
                    _emit_text(collector, step.text, None)
                else:
                    getattr(collector, step.value)()
        pos += 2
    return collector.output()
