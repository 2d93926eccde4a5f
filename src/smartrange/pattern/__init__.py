"""Pattern package: CLDR pattern masks and rendered-string tokens.

Exports:
    parse_pattern: Parse a CLDR pattern into a PatternMask
    tokenize: Split a rendered string into tokens aligned with a mask
    PatternMask, PatternSegment, Token: immutable value types
    PATTERN_CHARACTERS: Field letter -> Granularity lookup table

Python 3.13+.
"""

from .mask import PATTERN_CHARACTERS, PatternMask, PatternSegment, parse_pattern
from .tokens import Token, tokenize

__all__ = [
    "PATTERN_CHARACTERS",
    "PatternMask",
    "PatternSegment",
    "Token",
    "parse_pattern",
    "tokenize",
]
