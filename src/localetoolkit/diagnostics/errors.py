"""Locale exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "InvalidLocaleError",
    "LocaleError",
]


class LocaleError(ValueError):
    """Base exception for all localetoolkit errors.

    Subclasses ValueError so callers already guarding locale input with
    ``except ValueError`` keep working.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLocaleError(LocaleError):
    """Locale identifier cannot be interpreted as a language tag.

    Raised by parse_locale() and propagated unchanged by the fallback
    resolver, which cannot build a fallback chain without a parsed tag.

    Attributes:
        locale_code: The locale identifier that failed to parse

    Example:
        >>> try:
        ...     parse_locale("123")
        ... except InvalidLocaleError as e:
        ...     print(e.locale_code)
        123
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize InvalidLocaleError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The locale identifier that failed to parse
        """
        super().__init__(message)
        self.locale_code = locale_code
