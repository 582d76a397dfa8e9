"""Locale-aware personal name formatting.

Orders a given name and a family name according to the naming convention
of a locale. The set of family-name-first locales is a fixed table in
localetoolkit.constants, matched exactly: no parsing, no case folding,
no fallback to the language tag.

Python 3.13+. Zero external dependencies.
"""

from localetoolkit.constants import FAMILY_NAME_FIRST_LOCALES

__all__ = [
    "format_full_name",
    "is_family_name_first",
]


def is_family_name_first(locale: str) -> bool:
    """Check whether names are written family name first in a locale.

    Example:
        >>> is_family_name_first("ja-JP")
        True
        >>> is_family_name_first("ja")
        False
    """
    return locale in FAMILY_NAME_FIRST_LOCALES


def format_full_name(given_name: str, family_name: str, locale: str) -> str:
    """Format a full name following the locale's name order.

    Names are joined with a single space, verbatim: no trimming or
    validation, so empty parts produce a leading or trailing space.

    Args:
        given_name: Given (first) name
        family_name: Family (last) name
        locale: Locale identifier (e.g., 'en-US', 'ja-JP')

    Returns:
        "family given" for family-name-first locales, else "given family"

    Example:
        >>> format_full_name("John", "Doe", "en-US")
        'John Doe'
        >>> format_full_name("John", "Doe", "ja-JP")
        'Doe John'
    """
    if is_family_name_first(locale):
        return f"{family_name} {given_name}"
    return f"{given_name} {family_name}"
