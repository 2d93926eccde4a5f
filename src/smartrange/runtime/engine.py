"""Date formatting engines: pattern lookup and single-instant rendering.

The range algorithm needs two things from a formatting engine: the
pattern for the active locale and format levels, and the rendering of one
instant with that very pattern. DateFormattingEngine names that contract;
BabelEngine fulfils it with CLDR data.

Rendering always goes through the pattern returned by render_pattern(),
so the rendered text is guaranteed to follow the mask built from it.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, runtime_checkable

from babel import Locale
from babel import dates as babel_dates

from smartrange.diagnostics import ErrorTemplate, FormattingError
from smartrange.enums import FormatLevel
from smartrange.locale_utils import locale_cache_key

__all__ = ["BabelEngine", "DateFormattingEngine"]

logger = logging.getLogger(__name__)

# Western LTR order; used only if the locale lacks every dateTimeFormat
_DATETIME_GLUE_FALLBACK = "{1} {0}"


@runtime_checkable
class DateFormattingEngine(Protocol):
    """Source of the active pattern and of single-instant renderings."""

    def render_pattern(self) -> str:
        """Return the CLDR pattern in effect."""
        ...

    def render_instant(self, instant: datetime) -> str:
        """Render one instant with the pattern from render_pattern()."""
        ...


@dataclass(frozen=True, slots=True)
class BabelEngine:
    """Babel-backed engine for one (locale, date level, time level) triple.

    Immutable and thread-safe. The pattern is resolved once at construction.

    Attributes:
        locale: Babel Locale
        date_level: Date portion length; NONE omits the date
        time_level: Time portion length; NONE omits the time

    Examples:
        >>> engine = BabelEngine(Locale.parse("en_US"), FormatLevel.MEDIUM, FormatLevel.NONE)
        >>> engine.render_pattern()
        'MMM d, y'
        >>> engine.render_instant(datetime(2024, 1, 5))
        'Jan 5, 2024'
    """

    locale: Locale
    date_level: FormatLevel = FormatLevel.MEDIUM
    time_level: FormatLevel = FormatLevel.NONE
    _pattern: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate levels and resolve the pattern.

        Raises:
            ValueError: If a level is unknown or both levels are NONE
        """
        date_level = FormatLevel(self.date_level)
        time_level = FormatLevel(self.time_level)
        if date_level is FormatLevel.NONE and time_level is FormatLevel.NONE:
            msg = "At least one of date_level and time_level must not be 'none'"
            raise ValueError(msg)
        object.__setattr__(self, "date_level", date_level)
        object.__setattr__(self, "time_level", time_level)
        object.__setattr__(self, "_pattern", self._resolve_pattern())

    @property
    def time_enabled(self) -> bool:
        """True if the time of day is rendered."""
        return self.time_level is not FormatLevel.NONE

    def _resolve_pattern(self) -> str:
        if self.time_level is FormatLevel.NONE:
            return str(self.locale.date_formats[self.date_level.value].pattern)
        time_pattern = str(self.locale.time_formats[self.time_level.value].pattern)
        if self.date_level is FormatLevel.NONE:
            return time_pattern
        date_pattern = str(self.locale.date_formats[self.date_level.value].pattern)

        # CLDR dateTimeFormat uses {0} for time and {1} for date
        # Multi-level fallback: requested level -> medium -> short -> hardcoded
        glue = (
            self.locale.datetime_formats.get(self.date_level.value)
            or self.locale.datetime_formats.get("medium")
            or self.locale.datetime_formats.get("short")
        )
        if glue is None:
            logger.debug(
                "Locale %s has no dateTimeFormat; using '%s'",
                locale_cache_key(self.locale),
                _DATETIME_GLUE_FALLBACK,
            )
            glue = _DATETIME_GLUE_FALLBACK
        return str(glue).replace("{1}", date_pattern).replace("{0}", time_pattern)

    def render_pattern(self) -> str:
        return self._pattern

    def render_instant(self, instant: datetime) -> str:
        """Render ``instant`` with the resolved pattern.

        Naive datetimes are rendered as given (Babel treats them as UTC,
        which leaves the wall-clock fields untouched).

        Raises:
            FormattingError: If Babel fails; fallback_value is the ISO string
        """
        try:
            return str(
                babel_dates.format_datetime(instant, format=self._pattern, locale=self.locale)
            )
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            diagnostic = ErrorTemplate.render_failed(
                self._pattern, locale_cache_key(self.locale), str(e)
            )
            raise FormattingError(diagnostic, fallback_value=instant.isoformat()) from e
