"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps raise sites short and makes every message testable in one place.
    """

    _LOCALE_HINT = "Use BCP 47 locale codes (e.g., 'en', 'en-US', 'zh-Hant')"
    _LOCALE_HELP_URL = "https://en.wikipedia.org/wiki/IETF_language_tag"

    @staticmethod
    def invalid_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier cannot be interpreted.

        Args:
            locale_code: The offending locale identifier (repr for non-strings)
            reason: Why parsing failed

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Invalid locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint=ErrorTemplate._LOCALE_HINT,
            help_url=ErrorTemplate._LOCALE_HELP_URL,
            locale_code=locale_code,
        )

    @staticmethod
    def empty_locale() -> Diagnostic:
        """Locale identifier is the empty string.

        Returns:
            Diagnostic for EMPTY_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LOCALE,
            message="Locale identifier is empty",
            hint=ErrorTemplate._LOCALE_HINT,
            help_url=ErrorTemplate._LOCALE_HELP_URL,
            locale_code="",
        )
