"""Shared constants for localetoolkit.

Centralized configuration constants used across the locale parser, the
fallback resolver, and the name formatter. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale separators: BCP-47 and POSIX subtag delimiters
- Cache limits: Memory bounds for the locale parse cache
- Name ordering: Locales whose names are written family name first

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale separators
    "LOCALE_SEPARATOR",
    "POSIX_LOCALE_SEPARATOR",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Name ordering
    "FAMILY_NAME_FIRST_LOCALES",
]

# ============================================================================
# LOCALE SEPARATORS
# ============================================================================

# BCP-47 separates subtags with hyphens (en-US); Babel and POSIX use
# underscores (en_US). The parser accepts both and normalizes to POSIX.
LOCALE_SEPARATOR: str = "-"
POSIX_LOCALE_SEPARATOR: str = "_"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of parsed locale tags kept by parse_locale's LRU cache.
# Keyed by normalized locale code, so "en-US", "en_US" and "EN-us" share
# a single entry.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# NAME ORDERING
# ============================================================================

# Exact locale identifiers (case-sensitive) where the family name precedes
# the given name. Matched literally: "ja" or "ja-jp" do NOT qualify.
FAMILY_NAME_FIRST_LOCALES: frozenset[str] = frozenset({
    "ja-JP",  # Japan
    "zh-CN",  # Mainland China
    "zh-TW",  # Taiwan
    "ko-KR",  # Korea
    "vi-VN",  # Vietnam
    "hu-HU",  # Hungary
    "mn-MN",  # Mongolia
})
