"""Hypothesis strategies for smartrange tests.

Usage:
    from hypothesis import given
    from tests.strategies import babel_configs, plain_datetimes

    @given(config=babel_configs(), dt=plain_datetimes)
    def test_something(config, dt):
        ...
"""

from .ranges import (
    LOCALES,
    babel_configs,
    plain_datetimes,
    same_day_pairs,
    synthetic_patterns,
)

__all__ = [
    "LOCALES",
    "babel_configs",
    "plain_datetimes",
    "same_day_pairs",
    "synthetic_patterns",
]
