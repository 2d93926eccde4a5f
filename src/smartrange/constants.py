"""Shared constants for smartrange.

Centralized configuration constants used across the pattern, core and
runtime packages. Placing them here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern syntax
    "ESCAPE_CHARACTER",
    "MAX_PATTERN_LENGTH",
    # Output
    "DEFAULT_SEPARATOR",
    # Locale
    "DEFAULT_LOCALE",
    # Cache limits
    "MAX_MASK_CACHE_SIZE",
]

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# CLDR/ICU quote character. Text between two quotes is literal; two quotes
# in a row stand for one literal quote.
ESCAPE_CHARACTER: str = "'"

# Longest pattern accepted by parse_pattern(). CLDR patterns are well under
# 100 characters; anything near this limit is malformed input.
MAX_PATTERN_LENGTH: int = 1024

# ============================================================================
# OUTPUT
# ============================================================================

# Placed between the start and end halves of a range.
DEFAULT_SEPARATOR: str = " - "

# ============================================================================
# LOCALE
# ============================================================================

# Used when an unknown locale is requested via RangeFormatter.create().
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached (pattern, mask) pairs, keyed by (locale, date level, time level).
# 128 covers a handful of locales times the 24 usable level combinations.
MAX_MASK_CACHE_SIZE: int = 128
