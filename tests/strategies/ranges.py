"""Hypothesis strategies for range formatting tests.

Provides locale/format-level configurations known to produce well-formed
CLDR patterns, bounded datetimes, and synthetic patterns that follow the
"literal between different fields" rule.
"""

from __future__ import annotations

from datetime import datetime, time
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from smartrange import FormatLevel

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# Locales whose standard date and short/medium time patterns separate every
# field with a literal. Some locales (e.g. zh_Hant) glue day periods to the
# hour ("Bh:mm") and are rejected by the parser by design.
LOCALES: tuple[str, ...] = (
    "en_US",
    "en_GB",
    "de_DE",
    "fr_FR",
    "es_ES",
    "it_IT",
    "pt_BR",
    "nl_NL",
    "pl_PL",
    "lv_LV",
    "ru_RU",
    "ja_JP",
)

_DATE_LEVELS = tuple(FormatLevel)
# Full time formats end in long zone names that may contain the separator
# literal of the preceding field in some locales.
_TIME_LEVELS = (FormatLevel.NONE, FormatLevel.SHORT, FormatLevel.MEDIUM)

plain_datetimes: SearchStrategy[datetime] = st.datetimes(
    min_value=datetime(1900, 1, 1),
    max_value=datetime(2100, 12, 31, 23, 59, 59),
)


@composite
def babel_configs(draw: DrawFn) -> tuple[str, FormatLevel, FormatLevel]:
    """(locale, date level, time level) with at least one level rendered."""
    locale = draw(st.sampled_from(LOCALES))
    date_level = draw(st.sampled_from(_DATE_LEVELS))
    time_choices = _TIME_LEVELS[1:] if date_level is FormatLevel.NONE else _TIME_LEVELS
    time_level = draw(st.sampled_from(time_choices))
    event(f"locale={locale}")
    event(f"levels={date_level.value}/{time_level.value}")
    return locale, date_level, time_level


@composite
def same_day_pairs(draw: DrawFn) -> tuple[datetime, datetime]:
    """Two datetimes on the same calendar day with arbitrary times."""
    day = draw(plain_datetimes).date()
    first = draw(st.times(min_value=time(0, 0), max_value=time(23, 59, 59)))
    second = draw(st.times(min_value=time(0, 0), max_value=time(23, 59, 59)))
    return datetime.combine(day, first), datetime.combine(day, second)


# One representative letter per granularity, plus same-level alternates
_FIELD_LETTERS = ("G", "y", "Q", "M", "L", "w", "d", "E", "a", "h", "H", "m", "s", "z")
_LITERAL_TEXT = st.text(alphabet=" ,./-:", min_size=1, max_size=3)
_QUOTED_TEXT = st.text(alphabet="abcxyz ", min_size=1, max_size=5).map(lambda s: f"'{s}'")


@composite
def synthetic_patterns(draw: DrawFn) -> str:
    """Patterns alternating field runs and literals, always well-formed."""
    parts: list[str] = []
    for _ in range(draw(st.integers(min_value=1, max_value=6))):
        letter = draw(st.sampled_from(_FIELD_LETTERS))
        parts.append(letter * draw(st.integers(min_value=1, max_value=4)))
        parts.append(draw(st.one_of(_LITERAL_TEXT, _QUOTED_TEXT)))
    if draw(st.booleans()):
        parts.pop()
    return "".join(parts)
