"""smartrange - compact, locale-aware date/time ranges.

Renders two instants as one range that states the shared calendar fields
once: "Jan 5 - 10, 2024" instead of "Jan 5, 2024 - Jan 10, 2024". Patterns
and single-date renderings come from CLDR via Babel.

Public API:
    RangeFormatter - Immutable, thread-safe range formatter
    format_range - One-call convenience wrapper
    FormatLevel - Date/time format lengths (none, short, medium, long, full)
    Granularity - Calendar field levels, coarse to fine

Building blocks:
    parse_pattern - CLDR pattern -> PatternMask
    tokenize - Rendered string + mask -> tokens
    find_best_match - Finest calendar level two instants share
    splice - Compose the range string from two token sequences
    coerce_instant - Caller input -> datetime
    BabelEngine, DateFormattingEngine - Pattern source and renderer

Exceptions:
    SmartRangeError - Base exception class
    PatternSyntaxError - Malformed pattern
    InstantParseError - Unusable instant input
    LocaleError - Unknown locale (strict construction)
    FormattingError - Engine rendering failure
    RenderMismatchError - Rendering does not follow the mask

Python 3.13+.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import find_best_match, splice
from .diagnostics import (
    FormattingError,
    InstantParseError,
    LocaleError,
    PatternSyntaxError,
    RenderMismatchError,
    SmartRangeError,
)
from .enums import FormatLevel, Granularity
from .parsing import Instant, coerce_instant
from .pattern import PatternMask, PatternSegment, Token, parse_pattern, tokenize
from .runtime import BabelEngine, DateFormattingEngine, RangeFormatter, format_range

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("smartrange")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelEngine",
    "DateFormattingEngine",
    "FormatLevel",
    "FormattingError",
    "Granularity",
    "Instant",
    "InstantParseError",
    "LocaleError",
    "PatternMask",
    "PatternSegment",
    "PatternSyntaxError",
    "RangeFormatter",
    "RenderMismatchError",
    "SmartRangeError",
    "Token",
    "__version__",
    "coerce_instant",
    "find_best_match",
    "format_range",
    "parse_pattern",
    "splice",
    "tokenize",
]
