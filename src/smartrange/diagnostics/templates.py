"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # Base documentation URL for CLDR date field symbols
    _CLDR_FIELDS = "https://unicode.org/reports/tr35/tr35-dates.html#Date_Field_Symbol_Table"

    @staticmethod
    def pattern_missing_separator(pattern: str, offset: int, previous: str, char: str) -> Diagnostic:
        """Two different date fields touch without a literal between them.

        Args:
            pattern: The pattern being parsed
            offset: Index of the offending character
            previous: Field character that was being collected
            char: Field character of a different level found next to it

        Returns:
            Diagnostic for PATTERN_MISSING_SEPARATOR
        """
        msg = (
            f"Missing separator between date parts: '{previous}' is followed by "
            f"'{char}' at column {offset + 1}"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MISSING_SEPARATOR,
            message=msg,
            span=SourceSpan.at(offset),
            hint="Put a literal (space, punctuation or quoted text) between the two fields",
            pattern=pattern,
        )

    @staticmethod
    def pattern_empty() -> Diagnostic:
        """Pattern has no content.

        Returns:
            Diagnostic for PATTERN_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EMPTY,
            message="Date pattern is empty",
            hint="Check that the locale defines a pattern for the selected format levels",
            pattern="",
        )

    @staticmethod
    def pattern_too_long(length: int, limit: int) -> Diagnostic:
        """Pattern exceeds MAX_PATTERN_LENGTH.

        Args:
            length: Actual pattern length
            limit: Maximum accepted length

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=f"Date pattern is {length} characters long (limit {limit})",
            hint=f"See {ErrorTemplate._CLDR_FIELDS} for the pattern syntax",
        )

    @staticmethod
    def instant_invalid(value: str, reason: str) -> Diagnostic:
        """String input is not a date or datetime.

        Args:
            value: repr() of the rejected input
            reason: Why parsing failed

        Returns:
            Diagnostic for INSTANT_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.INSTANT_INVALID,
            message=f"Cannot parse {value} as a date/time: {reason}",
            hint="Use ISO 8601, e.g. 2024-01-05 or 2024-01-05T14:30:00+01:00",
        )

    @staticmethod
    def instant_type_invalid(type_name: str) -> Diagnostic:
        """Input is of an unsupported type.

        Args:
            type_name: Name of the rejected type

        Returns:
            Diagnostic for INSTANT_TYPE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.INSTANT_TYPE_INVALID,
            message=f"Unsupported date/time value of type '{type_name}'",
            hint="Pass a datetime, date, ISO 8601 string or POSIX timestamp",
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale is not known to Babel.

        Args:
            locale_code: The requested locale
            reason: Babel's error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=f"Unknown locale identifier '{locale_code}': {reason}",
            hint="Use a CLDR locale such as 'en_US', 'de-DE' or 'ja'",
            locale_code=locale_code,
        )

    @staticmethod
    def locale_invalid(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier is syntactically invalid.

        Args:
            locale_code: The requested locale
            reason: Babel's error text

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=f"Invalid locale format '{locale_code}': {reason}",
            hint="Use a BCP 47 or POSIX identifier such as 'en-US' or 'en_US'",
            locale_code=locale_code,
        )

    @staticmethod
    def render_failed(pattern: str, locale_code: str, reason: str) -> Diagnostic:
        """The date formatting engine raised.

        Args:
            pattern: Pattern passed to the engine
            locale_code: Locale in effect
            reason: The engine's error text

        Returns:
            Diagnostic for RENDER_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.RENDER_FAILED,
            message=f"Rendering with pattern '{pattern}' failed: {reason}",
            pattern=pattern,
            locale_code=locale_code,
        )

    @staticmethod
    def render_mismatch(pattern: str, rendered: str, literal: str) -> Diagnostic:
        """Rendered text does not contain a literal the mask expects.

        Args:
            pattern: Pattern the mask was built from
            rendered: The rendered text
            literal: The literal that could not be located

        Returns:
            Diagnostic for RENDER_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.RENDER_MISMATCH,
            message=f"Literal {literal!r} not found where expected in {rendered!r}",
            hint="The engine's rendering does not follow its own pattern",
            pattern=pattern,
        )
