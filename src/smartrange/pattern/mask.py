"""CLDR date pattern parser producing a pattern mask.

A pattern mask is the pattern cut into alternating literal and field
segments, each field tagged with the calendar granularity it renders:

    "MMM d, y"  ->  [MONTH] [" "] [DAY] [", "] [YEAR]

The mask is what lets two independently rendered dates be split into
aligned tokens. It carries no field widths: "MMM" and "M" both become a
single MONTH segment, because only the position of each field matters.

Quote escaping (CLDR):
    - Single quotes delimit literal text: 'at' -> "at"
    - Two consecutive single quotes produce one literal quote, inside or
      outside quoted text: "h 'o''clock' a" -> "2 o'clock PM"

Thread-safe. Pure functions over an immutable lookup table.

Python 3.13+.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from smartrange.constants import ESCAPE_CHARACTER, MAX_PATTERN_LENGTH
from smartrange.diagnostics import ErrorTemplate, PatternSyntaxError
from smartrange.enums import Granularity

__all__ = [
    "PATTERN_CHARACTERS",
    "PatternMask",
    "PatternSegment",
    "parse_pattern",
]

# Field letter -> granularity. Letters not listed here are literal text.
PATTERN_CHARACTERS: Mapping[str, Granularity] = MappingProxyType(
    {
        # Era
        "G": Granularity.ERA,
        # Year (calendar, week-based, extended, cyclic, related Gregorian)
        "y": Granularity.YEAR,
        "Y": Granularity.YEAR,
        "u": Granularity.YEAR,
        "U": Granularity.YEAR,
        "r": Granularity.YEAR,
        # Quarter
        "Q": Granularity.QUARTER,
        "q": Granularity.QUARTER,
        # Month (format and stand-alone)
        "M": Granularity.MONTH,
        "L": Granularity.MONTH,
        # Week of year / week of month
        "w": Granularity.WEEK,
        "W": Granularity.WEEK,
        # Day, day of year, day of week in month, julian day, weekdays
        "d": Granularity.DAY,
        "D": Granularity.DAY,
        "F": Granularity.DAY,
        "g": Granularity.DAY,
        "E": Granularity.DAY,
        "e": Granularity.DAY,
        "c": Granularity.DAY,
        # AM/PM and day periods
        "a": Granularity.AMPM,
        "b": Granularity.AMPM,
        "B": Granularity.AMPM,
        # Hour (1-12, 0-23, 1-24, 0-11)
        "h": Granularity.HOUR,
        "H": Granularity.HOUR,
        "k": Granularity.HOUR,
        "K": Granularity.HOUR,
        # Minute
        "m": Granularity.MINUTE,
        # Second, fractional second, milliseconds in day
        "s": Granularity.SECOND,
        "S": Granularity.SECOND,
        "A": Granularity.SECOND,
        # Time zone
        "z": Granularity.TIMEZONE,
        "Z": Granularity.TIMEZONE,
        "O": Granularity.TIMEZONE,
        "v": Granularity.TIMEZONE,
        "V": Granularity.TIMEZONE,
        "X": Granularity.TIMEZONE,
        "x": Granularity.TIMEZONE,
    }
)


@dataclass(frozen=True, slots=True)
class PatternSegment:
    """One literal run or one field of a pattern.

    Attributes:
        is_delimiter: True for literal text, False for a date/time field
        content: Literal text when is_delimiter, otherwise the field's Granularity
    """

    is_delimiter: bool
    content: str | Granularity

    @classmethod
    def literal(cls, text: str) -> "PatternSegment":
        """Create a delimiter segment."""
        return cls(is_delimiter=True, content=text)

    @classmethod
    def field(cls, level: Granularity) -> "PatternSegment":
        """Create a field segment."""
        return cls(is_delimiter=False, content=level)

    @property
    def text(self) -> str:
        """Literal text of a delimiter segment.

        Raises:
            TypeError: If called on a field segment
        """
        if not self.is_delimiter:
            msg = f"Field segment {self.content!r} has no literal text"
            raise TypeError(msg)
        return str(self.content)

    @property
    def level(self) -> Granularity:
        """Granularity of a field segment.

        Raises:
            TypeError: If called on a delimiter segment
        """
        if self.is_delimiter:
            msg = f"Delimiter segment {self.content!r} has no granularity"
            raise TypeError(msg)
        return Granularity(self.content)


@dataclass(frozen=True, slots=True)
class PatternMask:
    """Parsed pattern: ordered literal and field segments.

    Immutable; safe to share between formatters and threads.

    Attributes:
        pattern: Source pattern the mask was parsed from
        segments: Segments in pattern order (never empty strings)
    """

    pattern: str
    segments: tuple[PatternSegment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[PatternSegment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> PatternSegment:
        return self.segments[index]

    @property
    def levels(self) -> tuple[Granularity, ...]:
        """Granularity of every field segment, in pattern order."""
        return tuple(s.level for s in self.segments if not s.is_delimiter)

    @property
    def has_time_fields(self) -> bool:
        """True if any field is time-of-day (am/pm or finer)."""
        return any(level >= Granularity.AMPM for level in self.levels)


class _SegmentBuilder:
    """Accumulates the segment under construction and the finished ones."""

    __slots__ = ("_field_char", "_is_delimiter", "_pattern", "_text", "segments")

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._is_delimiter = False
        self._text = ""
        self._field_char = ""
        self.segments: list[PatternSegment] = []

    def flush(self) -> None:
        if self._is_delimiter:
            if self._text:
                self.segments.append(PatternSegment.literal(self._text))
        elif self._field_char:
            self.segments.append(PatternSegment.field(PATTERN_CHARACTERS[self._field_char]))
        self._is_delimiter = False
        self._text = ""
        self._field_char = ""

    def add_literal(self, text: str) -> None:
        if not self._is_delimiter:
            self.flush()
            self._is_delimiter = True
        self._text += text

    def add_quoted(self, text: str) -> None:
        # Quoted text always stands as its own segment
        self.flush()
        self._is_delimiter = True
        self._text = text
        self.flush()

    def add_field(self, char: str, offset: int) -> None:
        if self._is_delimiter:
            self.flush()
        elif self._field_char and PATTERN_CHARACTERS[self._field_char] != PATTERN_CHARACTERS[char]:
            diagnostic = ErrorTemplate.pattern_missing_separator(
                self._pattern, offset, self._field_char, char
            )
            raise PatternSyntaxError(diagnostic, pattern=self._pattern)
        if not self._field_char:
            self._field_char = char


def _read_quoted(pattern: str, start: int) -> tuple[str, int]:
    """Collect quoted literal text beginning after an opening quote.

    Returns:
        (literal text, index just past the closing quote). An unterminated
        quote runs to the end of the pattern.
    """
    chars: list[str] = []
    i = start
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == ESCAPE_CHARACTER:
            if i + 1 < n and pattern[i + 1] == ESCAPE_CHARACTER:
                chars.append(ESCAPE_CHARACTER)
                i += 2
                continue
            return "".join(chars), i + 1
        chars.append(char)
        i += 1
    return "".join(chars), n


def parse_pattern(pattern: str) -> PatternMask:
    """Parse a CLDR date/time pattern into a pattern mask.

    Scans left to right. Characters in PATTERN_CHARACTERS build field
    segments; repeated letters of the same granularity merge into one
    segment. Everything else, including quoted text, builds delimiter
    segments.

    Args:
        pattern: CLDR pattern, e.g. "MMM d, y" or "d. MMMM y 'um' HH:mm"

    Returns:
        PatternMask for the pattern

    Raises:
        PatternSyntaxError: If the pattern is empty, too long, or two
            fields of different granularity touch without a literal
            between them

    Examples:
        >>> [s.content for s in parse_pattern("MMM d, y")]
        [<Granularity.MONTH: 3>, ' ', <Granularity.DAY: 5>, ', ', <Granularity.YEAR: 1>]

        >>> parse_pattern("yMMdd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        PatternSyntaxError: Missing separator between date parts
    """
    if not pattern:
        raise PatternSyntaxError(ErrorTemplate.pattern_empty(), pattern=pattern)
    if len(pattern) > MAX_PATTERN_LENGTH:
        diagnostic = ErrorTemplate.pattern_too_long(len(pattern), MAX_PATTERN_LENGTH)
        raise PatternSyntaxError(diagnostic, pattern=pattern[:MAX_PATTERN_LENGTH])

    builder = _SegmentBuilder(pattern)
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == ESCAPE_CHARACTER:
            if i + 1 < n and pattern[i + 1] == ESCAPE_CHARACTER:
                # '' outside quoted text -> literal single quote
                builder.add_literal(ESCAPE_CHARACTER)
                i += 2
                continue
            text, i = _read_quoted(pattern, i + 1)
            builder.add_quoted(text)
            continue

        if char in PATTERN_CHARACTERS:
            builder.add_field(char, i)
        else:
            builder.add_literal(char)
        i += 1

    builder.flush()
    return PatternMask(pattern=pattern, segments=tuple(builder.segments))
