"""Tests for diagnostics: codes, spans, templates, formatter and errors.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from smartrange import (
    FormattingError,
    InstantParseError,
    LocaleError,
    PatternSyntaxError,
    RenderMismatchError,
    SmartRangeError,
)
from smartrange.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    SourceSpan,
)


class TestDiagnosticCode:
    """Code values are unique and grouped by category."""

    def test_values_unique(self) -> None:
        """No two codes share a number."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_categories(self) -> None:
        """Pattern 1xxx, input 2xxx, locale 3xxx, rendering 4xxx."""
        assert 1000 <= DiagnosticCode.PATTERN_EMPTY.value < 2000
        assert 2000 <= DiagnosticCode.INSTANT_INVALID.value < 3000
        assert 3000 <= DiagnosticCode.LOCALE_UNKNOWN.value < 4000
        assert 4000 <= DiagnosticCode.RENDER_MISMATCH.value < 5000


class TestSourceSpan:
    """SourceSpan validation."""

    def test_at(self) -> None:
        """at() covers one character, 1-indexed column."""
        span = SourceSpan.at(3)
        assert (span.start, span.end, span.line, span.column) == (3, 4, 1, 4)

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"start": -1, "end": 0}, "start"),
            ({"start": 5, "end": 4}, "end"),
            ({"start": 0, "end": 1, "line": 0}, "line"),
            ({"start": 0, "end": 1, "column": 0}, "column"),
        ],
    )
    def test_invalid_spans(self, kwargs: dict[str, int], match: str) -> None:
        """Invalid bounds are rejected."""
        with pytest.raises(ValueError, match=match):
            SourceSpan(**kwargs)


class TestDiagnosticFormatter:
    """Rust, simple and JSON output."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.pattern_missing_separator("yM", 1, "y", "M")

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        """Header, column, pattern and help lines."""
        output = DiagnosticFormatter().format(diagnostic)
        lines = output.splitlines()
        assert lines[0].startswith("error[PATTERN_MISSING_SEPARATOR]: Missing separator")
        assert "  --> column 2" in lines
        assert "  = pattern: yM" in lines
        assert any(line.startswith("  = help: ") for line in lines)

    def test_rust_format_with_locale(self) -> None:
        """Locale diagnostics print the locale line."""
        output = DiagnosticFormatter().format(ErrorTemplate.locale_unknown("xx", "unknown"))
        assert "  = locale: xx" in output.splitlines()

    def test_rust_format_color(self, diagnostic: Diagnostic) -> None:
        """ANSI codes wrap the severity."""
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;31merror\033[0m[")

    def test_warning_severity(self) -> None:
        """Warnings are labelled as such."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.RENDER_MISMATCH, message="m", severity="warning"
        )
        assert DiagnosticFormatter().format(diagnostic).startswith("warning[RENDER_MISMATCH]")

    def test_simple_format(self) -> None:
        """One line, code name and message."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.pattern_empty()) == (
            "PATTERN_EMPTY: Date pattern is empty"
        )

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        """All populated fields appear."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(diagnostic))
        assert data["code"] == "PATTERN_MISSING_SEPARATOR"
        assert data["code_value"] == 1001
        assert data["severity"] == "error"
        assert (data["start"], data["end"], data["column"]) == (1, 2, 2)
        assert data["pattern"] == "yM"
        assert "hint" in data

    def test_sanitize_truncates(self) -> None:
        """Long messages are cut when sanitizing."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.RENDER_FAILED, message="x" * 50)
        assert formatter.format(diagnostic) == "RENDER_FAILED: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Diagnostics separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.pattern_empty(), ErrorTemplate.instant_type_invalid("list")]
        )
        assert output.split("\n\n") == [
            "PATTERN_EMPTY: Date pattern is empty",
            "INSTANT_TYPE_INVALID: Unsupported date/time value of type 'list'",
        ]


class TestErrorHierarchy:
    """All errors derive from SmartRangeError and keep their diagnostic."""

    @pytest.mark.parametrize(
        "error_type",
        [PatternSyntaxError, InstantParseError, LocaleError, FormattingError, RenderMismatchError],
    )
    def test_subclasses(self, error_type: type[Exception]) -> None:
        """Catchable as SmartRangeError."""
        assert issubclass(error_type, SmartRangeError)

    def test_render_mismatch_is_formatting_error(self) -> None:
        """Mismatches can be handled like rendering failures."""
        assert issubclass(RenderMismatchError, FormattingError)

    def test_plain_message(self) -> None:
        """String messages carry no diagnostic."""
        error = SmartRangeError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages are formatted compiler-style."""
        diagnostic = ErrorTemplate.pattern_empty()
        error = PatternSyntaxError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[PATTERN_EMPTY]: Date pattern is empty")

    def test_formatting_error_fallback(self) -> None:
        """fallback_value is kept."""
        error = FormattingError("failed", fallback_value="2024-01-05")
        assert error.fallback_value == "2024-01-05"

    def test_diagnostic_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        assert str(ErrorTemplate.pattern_empty()) == "Date pattern is empty"
