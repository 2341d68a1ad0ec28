"""Fuzz tests for timefmt.

Marked with pytest.mark.fuzz and skipped unless requested with -m fuzz.

Python 3.13+.
"""
