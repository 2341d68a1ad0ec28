"""Compiled, replayable format programs.

Public API:
    compile_format - Returns tuple[Program | None, tuple[TimeFormatError, ...]]
    compile_parse - Returns tuple[Program | None, tuple[TimeFormatError, ...]]
    render_program - Returns tuple[str | None, tuple[TimeFormatError, ...]]
    parse_program - Returns tuple[(DateTime, UtcOffset | None) | None, tuple[TimeFormatError, ...]]
    clear_program_cache - Drop cached programs

Example:
    >>> from timefmt import DateTime
    >>> program, _ = compile_format("%F %T")
    >>> render_program(program, DateTime.of(2022, 3, 6, 12, 34, 56))
    ('2022-03-06 12:34:56', ())

Python 3.13+.
"""

from .compiler import (
    FormatProgramCompiler,
    ParseProgramCompiler,
    clear_program_cache,
    compile_format,
    compile_parse,
)
from .engine import parse_program, render_program
from .nodes import Component, Field, First, Literal, Node, Optional, Padding, Program

__all__ = [
    "Component",
    "Field",
    "First",
    "FormatProgramCompiler",
    "Literal",
    "Node",
    "Optional",
    "Padding",
    "ParseProgramCompiler",
    "Program",
    "clear_program_cache",
    "compile_format",
    "compile_parse",
    "parse_program",
    "render_program",
]
