"""Format-string grammar: cursor, specifier dispatcher and name tables.

Exports:
    Collector: Base class for dispatcher realizations
    dispatch: Walk a format string and drive a collector
    GRAMMAR: Specifier character -> grammar steps
    Primitive, Separator: Grammar step types
    Cursor: Immutable position tracker over recovery input

Python 3.13+.
"""

from .cursor import Cursor
from .dispatcher import GRAMMAR, Collector, Primitive, Separator, dispatch

__all__ = [
    "GRAMMAR",
    "Collector",
    "Cursor",
    "Primitive",
    "Separator",
    "dispatch",
]
