"""Diagnostic codes and data structures.

Defines error codes, pattern spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern errors (malformed CLDR patterns)
        2000-2999: Input errors (instants that cannot be coerced)
        3000-3999: Locale and configuration errors
        4000-4999: Rendering errors (engine failures, mask mismatches)
    """

    # Pattern errors (1000-1999)
    PATTERN_MISSING_SEPARATOR = 1001
    PATTERN_EMPTY = 1002
    PATTERN_TOO_LONG = 1003

    # Input errors (2000-2999)
    INSTANT_INVALID = 2001
    INSTANT_TYPE_INVALID = 2002

    # Locale and configuration errors (3000-3999)
    LOCALE_UNKNOWN = 3001
    LOCALE_INVALID = 3002

    # Rendering errors (4000-4999)
    RENDER_FAILED = 4001
    RENDER_MISMATCH = 4002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a pattern string.

    Patterns are single-line, so ``line`` is almost always 1. Kept for
    parity with the formatter output, which prints line and column.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line
                or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, offset: int) -> "SourceSpan":
        """Span covering the single character at ``offset`` of a one-line pattern."""
        return cls(start=offset, end=offset + 1, line=1, column=offset + 1)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the pattern (pattern errors only)
        hint: Suggestion for fixing the error
        pattern: The pattern being parsed or rendered, if any
        locale_code: Locale in effect, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    pattern: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[PATTERN_MISSING_SEPARATOR]: Missing separator between date parts
              --> column 2
              = pattern: yM
              = help: Put a literal between the two fields

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
