"""timefmt - strftime/strptime-style formatting with a shared grammar.

Renders calendar values as text and recovers them from text using POSIX
conversion specifiers (%Y, %m, %d, %H, ...). One grammar drives every
direction, so composite specifiers such as %F, %T and %c behave identically
when rendering, recovering and compiling.

Public API:
    render - Render a value; returns (text | None, errors)
    render_into - Render into a text stream; returns (chars written | None, errors)
    recover - Recover (DateTime, zone) from text; returns (result | None, errors)
    recover_strict - Recover, rejecting leftover input and short fields
    compile_format - Compile a render-direction Program
    compile_parse - Compile a parse-direction Program
    render_program - Render with a compiled Program
    parse_program - Parse with a compiled Program
    clear_program_cache - Drop cached programs

Values:
    DateTime, CalendarDate, ClockTime, UtcOffset, Month, Weekday
    ZoneName - Opaque zone name recovered by %Z

Exceptions:
    TimeFormatError - Base exception class; every error carries a Diagnostic

Functions never raise TimeFormatError; errors are returned in the tuple.

Submodules:
    timefmt.grammar - Dispatcher, grammar table, cursor and name tables
    timefmt.rendering - Render collector
    timefmt.parsing - Recover collector and accumulator states
    timefmt.program - Program nodes, compilers and engine
    timefmt.diagnostics - Codes, templates, formatter and exception types
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import (
    UTC_OFFSET,
    CalendarDate,
    ClockTime,
    DateTime,
    Month,
    UtcOffset,
    Weekday,
)
from .diagnostics import (
    ComponentOutOfRangeError,
    ComponentRangeError,
    Diagnostic,
    NoCorrespondingRepresentationError,
    NoMatchError,
    RecoverError,
    RenderError,
    TimeFormatError,
    UnconvertedDataError,
    UnexpectedCharacterError,
    UnexpectedEndError,
    UnknownSpecifierError,
)
from .parsing import ZoneName, ZoneSpecifier, recover, recover_strict
from .program import (
    Program,
    clear_program_cache,
    compile_format,
    compile_parse,
    parse_program,
    render_program,
)
from .rendering import render, render_into

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("timefmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "UTC_OFFSET",
    "CalendarDate",
    "ClockTime",
    "ComponentOutOfRangeError",
    "ComponentRangeError",
    "DateTime",
    "Diagnostic",
    "Month",
    "NoCorrespondingRepresentationError",
    "NoMatchError",
    "Program",
    "RecoverError",
    "RenderError",
    "TimeFormatError",
    "UnconvertedDataError",
    "UnexpectedCharacterError",
    "UnexpectedEndError",
    "UnknownSpecifierError",
    "UtcOffset",
    "Weekday",
    "ZoneName",
    "ZoneSpecifier",
    "__version__",
    "clear_program_cache",
    "compile_format",
    "compile_parse",
    "parse_program",
    "recover",
    "recover_strict",
    "render",
    "render_into",
    "render_program",
]
