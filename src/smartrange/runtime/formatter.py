"""RangeFormatter: immutable, thread-safe smart range formatting.

Architecture:
    - RangeFormatter: frozen configuration (locale, format levels,
      separator, time zone) plus the compiled pattern mask
    - Masks are cached per (locale, date level, time level) in a bounded,
      lock-protected LRU shared by all formatters
    - Changing configuration builds a new formatter; nothing is mutated

Per format() call:
    coerce both inputs -> compare (best match) -> render both ->
    tokenize both against the mask -> splice

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, replace
from datetime import tzinfo as TzInfo
from threading import RLock
from typing import ClassVar, TypeAlias

from babel import Locale, UnknownLocaleError

from smartrange.constants import DEFAULT_LOCALE, DEFAULT_SEPARATOR, MAX_MASK_CACHE_SIZE
from smartrange.core import find_best_match, splice
from smartrange.diagnostics import ErrorTemplate, LocaleError, RenderMismatchError
from smartrange.enums import FormatLevel
from smartrange.locale_utils import get_babel_locale, locale_cache_key
from smartrange.parsing import Instant, coerce_instant
from smartrange.pattern import PatternMask, parse_pattern, tokenize

from .engine import BabelEngine, DateFormattingEngine

__all__ = ["RangeFormatter", "format_range"]

logger = logging.getLogger(__name__)

_MaskKey: TypeAlias = tuple[str, FormatLevel, FormatLevel]


@dataclass(frozen=True, slots=True)
class RangeFormatter:
    """Formats two instants as one compact, locale-aware range.

    Use RangeFormatter.create() (lenient locale handling),
    RangeFormatter.create_or_raise() (strict) or RangeFormatter.from_engine()
    (custom engine) to construct instances.

    Examples:
        >>> fmt = RangeFormatter.create("en_US")
        >>> fmt.format("2024-01-05", "2024-01-10")
        'Jan 5 - 10, 2024'
        >>> fmt.format("2024-01-05", "2024-02-10")
        'Jan 5 - Feb 10, 2024'
        >>> fmt.format("2024-01-05", "2025-01-05")
        'Jan 5, 2024 - Jan 5, 2025'

        >>> # Configuration changes return a new formatter
        >>> long_fmt = fmt.with_date_format("long")
        >>> long_fmt.format("2024-01-05", "2024-01-10")
        'January 5 - 10, 2024'

    Thread Safety:
        Instances are immutable and can be shared between threads.
        The mask cache is protected by an RLock.

    Attributes:
        engine: Pattern source and renderer
        mask: Parsed pattern of ``engine``
        time_enabled: Whether the time of day is rendered
        separator: Text between the two halves of a range
        tzinfo: Zone both instants are expressed in (None: as given)
        locale_code: Locale identifier as requested by the caller
        is_fallback: True if an unknown locale was replaced by en_US
    """

    _cache: ClassVar[OrderedDict[_MaskKey, PatternMask]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    engine: DateFormattingEngine
    mask: PatternMask
    time_enabled: bool
    separator: str = DEFAULT_SEPARATOR
    tzinfo: TzInfo | None = None
    locale_code: str = ""
    is_fallback: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If separator is not a string or engine lacks the
                DateFormattingEngine methods
        """
        if not isinstance(self.separator, str):
            msg = f"separator must be str, got {type(self.separator).__name__}"
            raise TypeError(msg)
        if not isinstance(self.engine, DateFormattingEngine):
            msg = f"engine must implement DateFormattingEngine, got {type(self.engine).__name__}"
            raise TypeError(msg)

    # ------------------------------------------------------------------
    # Mask cache
    # ------------------------------------------------------------------

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the mask cache. Thread-safe via RLock."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached masks."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[_MaskKey, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached masks
            - max_size: Maximum cache size
            - keys: Cached (locale, date level, time level) keys in LRU order
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_MASK_CACHE_SIZE,
                "keys": tuple(cls._cache.keys()),
            }

    @classmethod
    def _mask_for(cls, engine: BabelEngine) -> PatternMask:
        # Keyed by Babel configuration; from_engine() patterns are never cached
        key: _MaskKey = (locale_cache_key(engine.locale), engine.date_level, engine.time_level)

        with cls._cache_lock:
            if key in cls._cache:
                cls._cache.move_to_end(key)
                return cls._cache[key]

        # Parse outside the lock; parse_pattern is pure
        mask = parse_pattern(engine.render_pattern())
        logger.debug("Compiled pattern mask for %s: %r", key, mask.pattern)

        # Double-check: another thread may have inserted meanwhile
        with cls._cache_lock:
            if key in cls._cache:
                return cls._cache[key]
            if len(cls._cache) >= MAX_MASK_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[key] = mask
            return mask

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def _from_locale(
        cls,
        locale_code: str,
        babel_locale: Locale,
        *,
        date_format: FormatLevel | str,
        time_format: FormatLevel | str,
        separator: str,
        tzinfo: TzInfo | None,
        is_fallback: bool,
    ) -> "RangeFormatter":
        engine = BabelEngine(
            babel_locale, FormatLevel(date_format), FormatLevel(time_format)
        )
        return cls(
            engine=engine,
            mask=cls._mask_for(engine),
            time_enabled=engine.time_enabled,
            separator=separator,
            tzinfo=tzinfo,
            locale_code=locale_code,
            is_fallback=is_fallback,
        )

    @classmethod
    def create(
        cls,
        locale_code: str = DEFAULT_LOCALE,
        *,
        date_format: FormatLevel | str = FormatLevel.MEDIUM,
        time_format: FormatLevel | str = FormatLevel.NONE,
        separator: str = DEFAULT_SEPARATOR,
        tzinfo: TzInfo | None = None,
    ) -> "RangeFormatter":
        """Create a formatter, falling back to en_US for unknown locales.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., 'en-US', 'de_DE')
            date_format: Date portion length ('none', 'short', 'medium', 'long', 'full')
            time_format: Time portion length (same values; default 'none')
            separator: Text between the two halves (default ' - ')
            tzinfo: Zone to express both instants in (default: as given)

        Returns:
            RangeFormatter. For unknown/invalid locales, uses en_US while
            preserving the original locale_code and setting is_fallback.

        Raises:
            ValueError: If a format level is unknown or both are 'none'
            PatternSyntaxError: If the locale's pattern is malformed
        """
        is_fallback = False
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE)
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            is_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)
            is_fallback = True

        return cls._from_locale(
            locale_code,
            babel_locale,
            date_format=date_format,
            time_format=time_format,
            separator=separator,
            tzinfo=tzinfo,
            is_fallback=is_fallback,
        )

    @classmethod
    def create_or_raise(
        cls,
        locale_code: str,
        *,
        date_format: FormatLevel | str = FormatLevel.MEDIUM,
        time_format: FormatLevel | str = FormatLevel.NONE,
        separator: str = DEFAULT_SEPARATOR,
        tzinfo: TzInfo | None = None,
    ) -> "RangeFormatter":
        """Create a formatter or raise on an unknown locale.

        Same arguments as create().

        Raises:
            LocaleError: If the locale code is unknown or malformed
            ValueError: If a format level is unknown or both are 'none'
            PatternSyntaxError: If the locale's pattern is malformed
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
            raise LocaleError(diagnostic, locale_code=locale_code) from None
        except (ValueError, TypeError) as e:
            diagnostic = ErrorTemplate.locale_invalid(locale_code, str(e))
            raise LocaleError(diagnostic, locale_code=locale_code) from None

        return cls._from_locale(
            locale_code,
            babel_locale,
            date_format=date_format,
            time_format=time_format,
            separator=separator,
            tzinfo=tzinfo,
            is_fallback=False,
        )

    @classmethod
    def from_engine(
        cls,
        engine: DateFormattingEngine,
        *,
        time_enabled: bool | None = None,
        separator: str = DEFAULT_SEPARATOR,
        tzinfo: TzInfo | None = None,
    ) -> "RangeFormatter":
        """Create a formatter around any DateFormattingEngine.

        The engine's pattern is parsed immediately and not cached.

        Args:
            engine: Pattern source and renderer
            time_enabled: Whether time of day is rendered (default: inferred
                from the pattern's fields)
            separator: Text between the two halves
            tzinfo: Zone to express both instants in

        Raises:
            PatternSyntaxError: If the engine's pattern is malformed
        """
        mask = parse_pattern(engine.render_pattern())
        return cls(
            engine=engine,
            mask=mask,
            time_enabled=mask.has_time_fields if time_enabled is None else time_enabled,
            separator=separator,
            tzinfo=tzinfo,
        )

    # ------------------------------------------------------------------
    # Derived formatters
    # ------------------------------------------------------------------

    def _babel_engine(self, operation: str) -> BabelEngine:
        if not isinstance(self.engine, BabelEngine):
            msg = f"{operation}() requires a Babel-backed formatter, got {type(self.engine).__name__}"
            raise TypeError(msg)
        return self.engine

    def with_date_format(self, date_format: FormatLevel | str) -> "RangeFormatter":
        """Return a formatter rendering the date portion at ``date_format``.

        Returns self if the level is unchanged.

        Raises:
            TypeError: If this formatter was built with from_engine()
            ValueError: If the level is unknown or both levels would be 'none'
        """
        engine = self._babel_engine("with_date_format")
        level = FormatLevel(date_format)
        if level is engine.date_level:
            return self
        return self._from_locale(
            self.locale_code,
            engine.locale,
            date_format=level,
            time_format=engine.time_level,
            separator=self.separator,
            tzinfo=self.tzinfo,
            is_fallback=self.is_fallback,
        )

    def with_time_format(self, time_format: FormatLevel | str) -> "RangeFormatter":
        """Return a formatter rendering the time portion at ``time_format``.

        Returns self if the level is unchanged.

        Raises:
            TypeError: If this formatter was built with from_engine()
            ValueError: If the level is unknown or both levels would be 'none'
        """
        engine = self._babel_engine("with_time_format")
        level = FormatLevel(time_format)
        if level is engine.time_level:
            return self
        return self._from_locale(
            self.locale_code,
            engine.locale,
            date_format=engine.date_level,
            time_format=level,
            separator=self.separator,
            tzinfo=self.tzinfo,
            is_fallback=self.is_fallback,
        )

    def with_separator(self, separator: str) -> "RangeFormatter":
        """Return a formatter joining the two halves with ``separator``."""
        if separator == self.separator:
            return self
        return replace(self, separator=separator)

    def with_timezone(self, tz: TzInfo | None) -> "RangeFormatter":
        """Return a formatter expressing both instants in ``tz``."""
        if tz is self.tzinfo:
            return self
        return replace(self, tzinfo=tz)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @property
    def pattern(self) -> str:
        """CLDR pattern in effect."""
        return self.mask.pattern

    def format(self, start: Instant, end: Instant) -> str:
        """Format two instants as one range string.

        Args:
            start: First instant (datetime, date, ISO 8601 string or timestamp)
            end: Second instant

        Returns:
            Range string, e.g. 'Jan 5 - 10, 2024'. Identical instants
            produce the plain rendering without a separator.

        Raises:
            InstantParseError: If an input cannot be turned into a datetime
            FormattingError: If the engine fails to render an instant
        """
        start_dt = coerce_instant(start, tzinfo=self.tzinfo)
        end_dt = coerce_instant(end, tzinfo=self.tzinfo)

        best_match = find_best_match(start_dt, end_dt, time_enabled=self.time_enabled)

        start_text = self.engine.render_instant(start_dt)
        end_text = self.engine.render_instant(end_dt)
        # Differences below the rendered precision are invisible
        if start_text == end_text:
            return start_text

        try:
            start_tokens = tokenize(start_text, self.mask)
            end_tokens = tokenize(end_text, self.mask)
        except RenderMismatchError as e:
            # Renderings are still correct on their own; show both in full
            logger.warning("Cannot merge range for pattern %r: %s", self.pattern, e.diagnostic)
            return f"{start_text}{self.separator}{end_text}"

        return splice(self.mask, start_tokens, end_tokens, best_match, separator=self.separator)


def format_range(
    start: Instant,
    end: Instant,
    locale_code: str = DEFAULT_LOCALE,
    *,
    date_format: FormatLevel | str = FormatLevel.MEDIUM,
    time_format: FormatLevel | str = FormatLevel.NONE,
    separator: str = DEFAULT_SEPARATOR,
    tzinfo: TzInfo | None = None,
) -> str:
    """Format a range in one call.

    Convenience wrapper around RangeFormatter.create(...).format(start, end).
    Masks are cached, so repeated calls do not re-parse patterns.

    Example:
        >>> format_range("2024-01-05", "2024-01-10", "de_DE")
        '05 - 10.01.2024'
    """
    formatter = RangeFormatter.create(
        locale_code,
        date_format=date_format,
        time_format=time_format,
        separator=separator,
        tzinfo=tzinfo,
    )
    return formatter.format(start, end)
