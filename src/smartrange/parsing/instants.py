"""Turn caller-supplied values into datetimes ready for comparison.

Accepted inputs:
    - datetime (naive or aware)
    - date (taken as midnight)
    - str in ISO 8601, e.g. "2024-01-05", "2024-01-05T14:30:00+01:00"
    - int / float POSIX timestamps (UTC)

When a target zone is given, naive values are assumed to be wall-clock
time in that zone and aware values are converted to it, so both ends of a
range are compared and rendered on the same clock.

Thread-safe. Uses Python 3.13 stdlib only.

Python 3.13+.
"""

from datetime import UTC, date, datetime, time, tzinfo
from typing import TypeAlias

from smartrange.diagnostics import ErrorTemplate, InstantParseError

__all__ = ["Instant", "coerce_instant"]

Instant: TypeAlias = datetime | date | str | int | float
"""Values accepted wherever a range endpoint is expected."""


def _from_string(value: str) -> datetime:
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        diagnostic = ErrorTemplate.instant_invalid(repr(value), str(e))
        raise InstantParseError(diagnostic, input_value=repr(value)) from e


def _from_timestamp(value: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        diagnostic = ErrorTemplate.instant_invalid(repr(value), str(e))
        raise InstantParseError(diagnostic, input_value=repr(value)) from e


def coerce_instant(value: Instant, *, tzinfo: tzinfo | None = None) -> datetime:
    """Convert ``value`` to a datetime, optionally on the clock of ``tzinfo``.

    Args:
        value: datetime, date, ISO 8601 string or POSIX timestamp
        tzinfo: Zone to express the result in (default: leave as given)

    Returns:
        datetime; aware if the input was aware, a timestamp, or tzinfo was given

    Raises:
        InstantParseError: If the value has an unsupported type or the
            string is not ISO 8601

    Examples:
        >>> coerce_instant("2024-01-05")
        datetime.datetime(2024, 1, 5, 0, 0)

        >>> coerce_instant(date(2024, 1, 5))
        datetime.datetime(2024, 1, 5, 0, 0)
    """
    result: datetime
    match value:
        case bool():
            # bool is an int subclass; True is not a timestamp
            diagnostic = ErrorTemplate.instant_type_invalid(type(value).__name__)
            raise InstantParseError(diagnostic, input_value=repr(value))
        case datetime():
            result = value
        case date():
            result = datetime.combine(value, time())
        case str():
            result = _from_string(value)
        case int() | float():
            result = _from_timestamp(value)
        case _:
            diagnostic = ErrorTemplate.instant_type_invalid(type(value).__name__)
            raise InstantParseError(diagnostic, input_value=repr(value))

    if tzinfo is None:
        return result
    if result.tzinfo is None:
        return result.replace(tzinfo=tzinfo)
    return result.astimezone(tzinfo)
