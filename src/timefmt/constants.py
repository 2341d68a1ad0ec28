"""Shared constants for timefmt.

Centralized configuration constants used across the grammar, rendering,
parsing and program layers. Placing them here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Calendar limits: Supported year range and recovery defaults
- Digit limits: Maximum digit counts consumed per numeric field
- Cache limits: Memory bounds for the compiled program cache
- Locale: The fixed locale used for day/month/period names

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Calendar limits
    "MIN_YEAR",
    "MAX_YEAR",
    "DEFAULT_YEAR",
    "NANOSECONDS_PER_SECOND",
    "SUBSECOND_DIGITS",
    "YEAR_SUFFIX_PIVOT",
    # Digit limits
    "MAX_YEAR_DIGITS",
    "MAX_CENTURY_DIGITS",
    "MAX_ORDINAL_DIGITS",
    "MAX_TWO_DIGITS",
    "MAX_WEEKDAY_DIGITS",
    "OFFSET_DIGITS",
    "UTC_DESIGNATORS",
    # Cache limits
    "PROGRAM_CACHE_SIZE",
    # Locale
    "POSIX_LOCALE",
]

# ============================================================================
# CALENDAR LIMITS
# ============================================================================

# Supported proleptic Gregorian year range. Wide enough to render five and
# six digit years; recovery only ever produces years reachable through
# %Y (four digits, optional sign) or %C%y.
MIN_YEAR: int = -999_999
MAX_YEAR: int = 999_999

# Year used by recovery when the input specifies no year at all.
DEFAULT_YEAR: int = 1900

NANOSECONDS_PER_SECOND: int = 1_000_000_000

# %f renders and recovers up to nanosecond precision.
SUBSECOND_DIGITS: int = 9

# POSIX two-digit year rule: 69-99 -> 1969-1999, 00-68 -> 2000-2068.
YEAR_SUFFIX_PIVOT: int = 69

# ============================================================================
# DIGIT LIMITS
# ============================================================================

MAX_YEAR_DIGITS: int = 4
MAX_CENTURY_DIGITS: int = 2
MAX_ORDINAL_DIGITS: int = 3
MAX_TWO_DIGITS: int = 2
MAX_WEEKDAY_DIGITS: int = 1

# %z hour and minute are always exactly two digits each.
OFFSET_DIGITS: int = 2

# Letters %z accepts in place of a numeric offset for UTC.
UTC_DESIGNATORS: str = "Zz"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of compiled programs kept per direction (render/parse).
# Format strings are usually few and long-lived; 256 distinct formats covers
# any realistic application while bounding memory.
PROGRAM_CACHE_SIZE: int = 256

# ============================================================================
# LOCALE
# ============================================================================

# The only locale this package knows. Day, month and period names are loaded
# from its CLDR data once and never change.
POSIX_LOCALE: str = "en_US_POSIX"
