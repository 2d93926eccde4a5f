"""Find the finest calendar level two instants still share.

The result drives the splice: pattern fields at or coarser than the
best-match level are shown once, finer fields are shown for both
instants. Comparison uses each instant's own wall-clock fields.

Python 3.13+.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from smartrange.enums import Granularity

__all__ = ["find_best_match"]

logger = logging.getLogger(__name__)

# (field accessor, level shared when this field is the first to differ),
# coarse to fine. A differing year shares nothing above the time zone.
_FIELD_CHECKS: tuple[tuple[Callable[[datetime], int | bool], Granularity], ...] = (
    (lambda dt: dt.year, Granularity.TIMEZONE),
    (lambda dt: dt.month, Granularity.YEAR),
    (lambda dt: dt.day, Granularity.MONTH),
    (lambda dt: dt.hour >= 12, Granularity.DAY),
    (lambda dt: dt.hour, Granularity.AMPM),
    (lambda dt: dt.minute, Granularity.HOUR),
    (lambda dt: dt.second, Granularity.MINUTE),
    # Sub-second differences fold to AMPM like minutes and seconds
    (lambda dt: dt.microsecond, Granularity.MINUTE),
)


def _base_scan(start: datetime, end: datetime) -> Granularity:
    for accessor, shared in _FIELD_CHECKS:
        if accessor(start) != accessor(end):
            return shared
    return Granularity.SECOND


def _fold_minutes(level: Granularity) -> Granularity:
    # "10:00:00 - 30:00" is unreadable; split at the hour instead
    if Granularity.HOUR <= level <= Granularity.MINUTE:
        return Granularity.AMPM
    return level


def _offsets_differ(start: datetime, end: datetime) -> bool:
    """True if the instants do not share one UTC offset and zone name.

    Catches both a daylight-saving transition between the instants and
    instants expressed in different zones.
    """
    if start.tzinfo is None and end.tzinfo is None:
        return False
    if start.tzinfo is None or end.tzinfo is None:
        return True
    # End's zone at start's absolute time
    end_zone_at_start = start.astimezone(end.tzinfo)
    return (
        start.tzname() != end_zone_at_start.tzname()
        or start.utcoffset() != end_zone_at_start.utcoffset()
        or start.utcoffset() != end.utcoffset()
        or start.tzname() != end.tzname()
    )


def find_best_match(start: datetime, end: datetime, *, time_enabled: bool) -> Granularity:
    """Compute the best-match level for a pair of instants.

    Steps, each able to override the previous one:
        1. Base scan of year, month, day, am/pm, hour, minute, second,
           microsecond.
        2. Minute, second and sub-second differences fold up to AMPM.
        3. Differing UTC offsets or zone names force NEVER.
        4. With time rendered, anything coarser than DAY forces NEVER.

    Args:
        start: First instant
        end: Second instant
        time_enabled: Whether the active pattern renders time of day

    Returns:
        Finest shared Granularity, SECOND when nothing differs, or
        Granularity.NEVER when nothing may be shared

    Examples:
        >>> find_best_match(datetime(2024, 1, 5), datetime(2024, 1, 10), time_enabled=False)
        <Granularity.MONTH: 3>

        >>> find_best_match(datetime(2024, 1, 5), datetime(2025, 1, 5), time_enabled=False)
        <Granularity.TIMEZONE: -1>
    """
    best_match = _fold_minutes(_base_scan(start, end))

    if _offsets_differ(start, end):
        logger.debug("UTC offsets differ between %s and %s; not merging", start, end)
        return Granularity.NEVER

    if time_enabled and best_match < Granularity.DAY:
        return Granularity.NEVER

    return best_match
