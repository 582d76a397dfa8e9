"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for locale handling.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale identifier errors
    """

    # Locale identifier errors (1000-1999)
    INVALID_LOCALE = 1001
    EMPTY_LOCALE = 1002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for
    both log output and programmatic inspection.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        locale_code: Locale identifier that triggered the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    locale_code: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Control characters in the message are escaped so that user-supplied
        locale strings cannot forge extra log lines.

        Example output:
            error[INVALID_LOCALE]: Invalid locale '123': expected only letters, got '123'
              = locale: 123
              = help: Use BCP 47 locale codes (e.g., 'en', 'en-US', 'zh-Hant')

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.locale_code is not None:
            lines.append(f"  = locale: {_escape(self.locale_code)}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        if self.help_url:
            lines.append(f"  = note: see {self.help_url}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
