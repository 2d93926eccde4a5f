"""Diagnostic system for smartrange errors.

Provides structured error diagnostics with codes, pattern spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    FormattingError,
    InstantParseError,
    LocaleError,
    PatternSyntaxError,
    RenderMismatchError,
    SmartRangeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "InstantParseError",
    "LocaleError",
    "OutputFormat",
    "PatternSyntaxError",
    "RenderMismatchError",
    "SmartRangeError",
    "SourceSpan",
]
