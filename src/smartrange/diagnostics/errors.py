"""smartrange exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class SmartRangeError(Exception):
    """Base exception for all smartrange errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SmartRangeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternSyntaxError(SmartRangeError):
    """Malformed date/time pattern.

    Raised when two different field codes touch without a literal between
    them, or the pattern is empty. Fatal: a formatter cannot be built
    without a valid pattern mask.

    Attributes:
        pattern: The offending pattern string
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str = "") -> None:
        """Initialize PatternSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The pattern that failed to parse
        """
        super().__init__(message)
        self.pattern = pattern


class InstantParseError(SmartRangeError):
    """Caller input could not be turned into a datetime.

    Attributes:
        input_value: repr() of the rejected value
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize InstantParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: repr() of the rejected value
        """
        super().__init__(message)
        self.input_value = input_value


class LocaleError(SmartRangeError):
    """Unknown or malformed locale identifier (strict construction only).

    Attributes:
        locale_code: The rejected locale identifier
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The rejected locale identifier
        """
        super().__init__(message)
        self.locale_code = locale_code


class FormattingError(SmartRangeError):
    """Raised when rendering an instant fails.

    The error carries a fallback_value that callers can show instead of
    the localized rendering.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class RenderMismatchError(FormattingError):
    """Rendered text does not line up with the pattern mask.

    The fallback value is the full rendering, which is still correct on its
    own; only the splitting into tokens failed.
    """
