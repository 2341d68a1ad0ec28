"""Render calendar values as text.

Public API:
    render - Returns tuple[str | None, tuple[TimeFormatError, ...]]
    render_into - Returns tuple[int | None, tuple[TimeFormatError, ...]]

Python 3.13+.
"""

from .collector import RenderCollector, TextSink
from .render import RenderValue, render, render_into

__all__ = [
    "RenderCollector",
    "RenderValue",
    "TextSink",
    "render",
    "render_into",
]
