"""Input parsing: caller values -> datetimes.

Public API:
    coerce_instant - datetime | date | ISO 8601 str | POSIX timestamp -> datetime
    Instant - Type alias for the accepted input values

Python 3.13+.
"""

from .instants import Instant, coerce_instant

__all__ = ["Instant", "coerce_instant"]
