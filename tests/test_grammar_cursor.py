"""Tests for grammar.cursor: the immutable recovery-input cursor."""

from __future__ import annotations

import pytest

from timefmt.grammar import Cursor

# ============================================================================
# CURSOR BASICS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Cursor starts at position 0 by default."""
        cursor = Cursor("12:34")

        assert cursor.source == "12:34"
        assert cursor.pos == 0
        assert cursor.current == "1"

    def test_cursor_immutability(self) -> None:
        """Cursor is a frozen dataclass."""
        cursor = Cursor("12:34")

        with pytest.raises(AttributeError):
            cursor.pos = 3  # type: ignore[misc]

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor untouched."""
        cursor = Cursor("12:34")
        moved = cursor.advance(3)

        assert moved.pos == 3
        assert moved.rest == "34"
        assert cursor.pos == 0

    def test_advance_clamps_to_eof(self) -> None:
        """advance() never moves past the end of input."""
        cursor = Cursor("ab").advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof


class TestCursorEOF:
    """Test EOF handling."""

    def test_empty_source_is_eof(self) -> None:
        """Empty input starts at EOF."""
        assert Cursor("").is_eof

    def test_current_at_eof_raises(self) -> None:
        """current raises EOFError at end of input."""
        with pytest.raises(EOFError, match="position 2"):
            _ = Cursor("ab", 2).current

    def test_peek_beyond_eof_is_none(self) -> None:
        """peek() returns None instead of raising."""
        cursor = Cursor("ab", 1)

        assert cursor.peek() == "b"
        assert cursor.peek(1) is None


# ============================================================================
# SCANNING HELPERS
# ============================================================================


class TestCursorScanning:
    """Test whitespace skipping and prefix matching."""

    def test_skip_whitespace_consumes_mixed_run(self) -> None:
        """skip_whitespace() consumes spaces, tabs and newlines."""
        assert Cursor(" \t\n5").skip_whitespace().pos == 3

    def test_skip_spaces_stops_at_tab(self) -> None:
        """skip_spaces() consumes U+0020 only."""
        assert Cursor("  \t5").skip_spaces().pos == 2

    def test_starts_with_ignore_case(self) -> None:
        """Prefix test ignores case."""
        cursor = Cursor("wEDNESDAY")

        assert cursor.starts_with_ignore_case("Wednesday")
        assert cursor.starts_with_ignore_case("Wed")
        assert not cursor.starts_with("Wed")

    def test_starts_with_ignore_case_short_input(self) -> None:
        """A prefix longer than the remaining input never matches."""
        assert not Cursor("Ma").starts_with_ignore_case("Mar")

    def test_expect_match_and_mismatch(self) -> None:
        """expect() advances on a match and returns None otherwise."""
        cursor = Cursor(":30")

        moved = cursor.expect(":")
        assert moved is not None
        assert moved.pos == 1
        assert cursor.expect("-") is None
        assert Cursor("").expect(":") is None

    def test_slice_helpers(self) -> None:
        """slice_to() and slice_ahead() read without moving."""
        cursor = Cursor("2022-03-06", 5)

        assert cursor.slice_to(7) == "03"
        assert cursor.slice_ahead(100) == "03-06"
        assert cursor.pos == 5
