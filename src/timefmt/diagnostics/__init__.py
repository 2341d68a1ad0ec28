"""Diagnostic system for timefmt errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import (
    ComponentOutOfRangeError,
    ComponentRangeError,
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
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ComponentOutOfRangeError",
    "ComponentRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "NoCorrespondingRepresentationError",
    "NoMatchError",
    "OutputFormat",
    "RecoverError",
    "RenderError",
    "SourceSpan",
    "TimeFormatError",
    "UnconvertedDataError",
    "UnexpectedCharacterError",
    "UnexpectedEndError",
    "UnknownSpecifierError",
]
