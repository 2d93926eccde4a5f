"""Enumerations for smartrange type-safe constants.

Granularity is an IntEnum because its numeric order drives the splice
decision. FormatLevel uses StrEnum so members compare equal to the plain
strings Babel expects ("short", "medium", ...).

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Granularity(IntEnum):
    """Calendar field granularity, ordered coarse to fine.

    Comparisons are numeric: ``Granularity.YEAR < Granularity.DAY``.
    A field segment is shared between both halves of a range when its
    level is coarser than or equal to the best-match level.
    """

    NEVER = -2
    """Below every level: nothing is shared, both instants render in full."""

    TIMEZONE = -1
    """Time zone fields (z, Z, O, v, V, X, x). Also means "no shared field"."""

    ERA = 0
    YEAR = 1
    QUARTER = 2
    MONTH = 3
    WEEK = 4

    DAY = 5
    """Day of month, day of year, weekday."""

    AMPM = 6
    """AM/PM marker and day periods."""

    HOUR = 7
    MINUTE = 8

    SECOND = 9
    """Seconds and fractional seconds."""


class FormatLevel(StrEnum):
    """CLDR format length, selectable separately for date and time.

    StrEnum provides automatic string conversion: str(FormatLevel.MEDIUM) == "medium"
    """

    NONE = "none"
    """Portion is not rendered."""

    SHORT = "short"
    """Numeric, e.g. 1/5/24 or 3:04 PM"""

    MEDIUM = "medium"
    """Abbreviated, e.g. Jan 5, 2024"""

    LONG = "long"
    """Full month name, e.g. January 5, 2024"""

    FULL = "full"
    """With weekday, e.g. Friday, January 5, 2024"""


__all__ = [
    "FormatLevel",
    "Granularity",
]
