"""Compile format strings into replayable programs.

Two compiler realizations share the specifier grammar:

    FormatProgramCompiler: render direction; each Field carries exactly the
        padding of its specifier.
    ParseProgramCompiler: parse direction; numeric Fields become First over
        zero, space and no padding, names become case-insensitive First over
        long and short forms, and whitespace becomes an optional single
        whitespace character.

%C and %Z have no node equivalent and are rejected.

Compiled programs are cached per format string in a bounded LRU cache for
each direction.

Thread-safe. functools.lru_cache is internally locked.

Python 3.13+.
"""

import logging
from functools import lru_cache

from timefmt.constants import PROGRAM_CACHE_SIZE
from timefmt.diagnostics import (
    ErrorTemplate,
    NoCorrespondingRepresentationError,
    SourceSpan,
    TimeFormatError,
    UnknownSpecifierError,
)
from timefmt.grammar import Collector, dispatch

from .nodes import Component, Field, First, Literal, Node, Optional, Padding, Program

__all__ = [
    "FormatProgramCompiler",
    "ParseProgramCompiler",
    "clear_program_cache",
    "compile_format",
    "compile_parse",
]

logger = logging.getLogger(__name__)

_C = Component

_PARSE_WHITESPACE: Node = Optional(First((Literal(" "), Literal("\n"), Literal("\t"))))


class _ProgramCompiler(Collector[tuple[Node, ...]], partial=True):
    """Shared text hooks and rejections of both compilers."""

    def __init__(self) -> None:
        self._items: list[Node] = []

    def _push(self, node: Node) -> None:
        self._items.append(node)

    def _field(self, component: Component, padding: Padding = Padding.ZERO) -> None:
        """Push a numeric field with the specifier's own padding."""
        self._push(Field(component, padding))

    def static_str(self, text: str) -> None:
        self._push(Literal(text))

    def literal(self, text: str, span: SourceSpan) -> None:
        self._push(Literal(text))

    def unknown(self, specifier: str, position: int) -> None:
        raise UnknownSpecifierError(
            ErrorTemplate.unknown_specifier(specifier, position), specifier=specifier
        )

    def output(self) -> tuple[Node, ...]:
        return tuple(self._items)

    def century(self) -> None:
        raise NoCorrespondingRepresentationError(
            ErrorTemplate.no_corresponding_representation("C", "a century"), specifier="C"
        )

    def zone_name(self) -> None:
        raise NoCorrespondingRepresentationError(
            ErrorTemplate.no_corresponding_representation("Z", "a time zone name"),
            specifier="Z",
        )

    # Numeric primitives; padding is resolved by _field().

    def day_of_month(self) -> None:
        self._field(_C.DAY)

    def day_of_month_blank(self) -> None:
        self._field(_C.DAY, Padding.SPACE)

    def month_of_year(self) -> None:
        self._field(_C.MONTH_NUMERIC)

    def day_of_year(self) -> None:
        self._field(_C.ORDINAL)

    def year(self) -> None:
        self._field(_C.YEAR)

    def year_suffix(self) -> None:
        self._field(_C.YEAR_LAST_TWO)

    def iso_year(self) -> None:
        self._field(_C.ISO_YEAR)

    def iso_year_suffix(self) -> None:
        self._field(_C.ISO_YEAR_LAST_TWO)

    def hour_of_day(self) -> None:
        self._field(_C.HOUR_24)

    def hour_of_day_blank(self) -> None:
        self._field(_C.HOUR_24, Padding.SPACE)

    def hour_of_day_12(self) -> None:
        self._field(_C.HOUR_12)

    def hour_of_day_12_blank(self) -> None:
        self._field(_C.HOUR_12, Padding.SPACE)

    def minute(self) -> None:
        self._field(_C.MINUTE)

    def second(self) -> None:
        self._field(_C.SECOND)

    def week_of_year_from_sunday(self) -> None:
        self._field(_C.WEEK_SUNDAY)

    def week_of_year_from_monday(self) -> None:
        self._field(_C.WEEK_MONDAY)

    def iso_week(self) -> None:
        self._field(_C.WEEK_ISO)

    # Single-digit and variable-width fields have one representation.

    def weekday_from_monday(self) -> None:
        self._push(Field(_C.WEEKDAY_MONDAY, Padding.NONE))

    def weekday_from_sunday(self) -> None:
        self._push(Field(_C.WEEKDAY_SUNDAY, Padding.NONE))

    def subsecond(self) -> None:
        self._push(Field(_C.SUBSECOND, Padding.NONE))


class FormatProgramCompiler(_ProgramCompiler):
    """Render-direction compiler."""

    def weekday_name_short(self) -> None:
        self._push(Field(_C.WEEKDAY_SHORT))

    def weekday_name_long(self) -> None:
        self._push(Field(_C.WEEKDAY_LONG))

    def month_name_short(self) -> None:
        self._push(Field(_C.MONTH_SHORT))

    def month_name_long(self) -> None:
        self._push(Field(_C.MONTH_LONG))

    def ampm(self) -> None:
        self._push(Field(_C.PERIOD_UPPER))

    def ampm_lower(self) -> None:
        self._push(Field(_C.PERIOD_LOWER))

    def offset(self) -> None:
        self._push(Field(_C.OFFSET_HOUR))
        self._push(Field(_C.OFFSET_MINUTE))


class ParseProgramCompiler(_ProgramCompiler):
    """Parse-direction compiler."""

    splits_whitespace = True

    def _field(self, component: Component, padding: Padding = Padding.ZERO) -> None:
        # The specifier's own padding is irrelevant: input may use any.
        self._push(
            First(
                (
                    Field(component, Padding.ZERO),
                    Field(component, Padding.SPACE),
                    Field(component, Padding.NONE),
                )
            )
        )

    def _names(self, long: Component, short: Component) -> None:
        self._push(
            First((Field(long, case_sensitive=False), Field(short, case_sensitive=False)))
        )

    def spaces(self) -> None:
        self._push(_PARSE_WHITESPACE)

    def weekday_name_short(self) -> None:
        self._names(_C.WEEKDAY_LONG, _C.WEEKDAY_SHORT)

    def weekday_name_long(self) -> None:
        self._names(_C.WEEKDAY_LONG, _C.WEEKDAY_SHORT)

    def month_name_short(self) -> None:
        self._names(_C.MONTH_LONG, _C.MONTH_SHORT)

    def month_name_long(self) -> None:
        self._names(_C.MONTH_LONG, _C.MONTH_SHORT)

    def ampm(self) -> None:
        self._push(Field(_C.PERIOD_UPPER, case_sensitive=False))

    def ampm_lower(self) -> None:
        self._push(Field(_C.PERIOD_LOWER, case_sensitive=False))

    def offset(self) -> None:
        self._push(Field(_C.OFFSET_HOUR))
        self._push(Optional(Literal(":")))
        self._push(Field(_C.OFFSET_MINUTE))


@lru_cache(maxsize=PROGRAM_CACHE_SIZE)
def _compile_format_cached(format_string: str) -> Program:
    logger.debug("Compiling render program for %r", format_string)
    return Program(format_string, dispatch(format_string, FormatProgramCompiler()))


@lru_cache(maxsize=PROGRAM_CACHE_SIZE)
def _compile_parse_cached(format_string: str) -> Program:
    logger.debug("Compiling parse program for %r", format_string)
    return Program(format_string, dispatch(format_string, ParseProgramCompiler()))


def compile_format(format_string: str) -> tuple[Program | None, tuple[TimeFormatError, ...]]:
    """Compile a render-direction program.

    Args:
        format_string: Format such as "%Y-%m-%d %H:%M:%S %z"

    Returns:
        Tuple of (result, errors):
        - result: Program, or None if compilation failed
        - errors: UnknownSpecifierError or NoCorrespondingRepresentationError

    Examples:
        >>> program, errors = compile_format("%H:%M")
        >>> program.items
        (Field(component=<Component.HOUR_24: 'hour'>, padding=<Padding.ZERO: 'zero'>, case_sensitive=True), Literal(value=':'), Field(component=<Component.MINUTE: 'minute'>, padding=<Padding.ZERO: 'zero'>, case_sensitive=True))

        >>> compile_format("%C")[0] is None
        True
    """
    try:
        return (_compile_format_cached(format_string), ())
    except TimeFormatError as e:
        return (None, (e,))


def compile_parse(format_string: str) -> tuple[Program | None, tuple[TimeFormatError, ...]]:
    """Compile a parse-direction program.

    Composite specifiers expand to the same nodes as their spelled-out
    form, so compile_parse("%F") and compile_parse("%Y-%m-%d") yield equal
    programs.

    Returns:
        Tuple of (result, errors), as compile_format()
    """
    try:
        return (_compile_parse_cached(format_string), ())
    except TimeFormatError as e:
        return (None, (e,))


def clear_program_cache() -> None:
    """Drop every cached program in both directions."""
    _compile_format_cached.cache_clear()
    _compile_parse_cached.cache_clear()
