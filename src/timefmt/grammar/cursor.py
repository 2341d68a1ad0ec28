"""Immutable cursor over recovery input.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Input is never copied; slices are taken only when a field needs text
"""

from dataclasses import dataclass

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable input position tracker.

    Example:
        >>> cursor = Cursor("12:34", 0)
        >>> cursor.current
        '1'
        >>> cursor.advance(3).rest
        '34'
        >>> cursor.pos  # Original unchanged
        0
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Remaining input from the current position."""
        return self.source[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Character at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Source substring from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Next n characters (fewer near EOF) without advancing."""
        return self.source[self.pos : self.pos + n]

    def skip_whitespace(self) -> "Cursor":
        """Skip any Unicode whitespace (str.isspace).

        Example:
            >>> Cursor(" \\t\\n5", 0).skip_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def skip_spaces(self) -> "Cursor":
        """Skip space characters (U+0020 only)."""
        c = self
        while not c.is_eof and c.current == " ":
            c = c.advance()
        return c

    def starts_with(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.pos)

    def starts_with_ignore_case(self, prefix: str) -> bool:
        """Case-insensitive prefix test.

        Example:
            >>> Cursor("wEDNESDAY").starts_with_ignore_case("Wednesday")
            True
        """
        return self.slice_ahead(len(prefix)).lower() == prefix.lower()

    def expect(self, char: str) -> "Cursor | None":
        """Consume char if it is current; None if no match or at EOF."""
        if not self.is_eof and self.current == char:
            return self.advance()
        return None
