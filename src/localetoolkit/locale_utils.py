"""Locale utilities for language tag parsing.

Centralizes locale identifier normalization and parsing used by the
fallback resolver. Parsing is syntactic and delegates to Babel's
``babel.core.parse_locale``: the locale does not need CLDR data, only
a well-formed ``language[-script][-region][-variant]`` shape. Extension and
private-use sequences (``-u-ca-gregory``, ``-x-private``) and variants after
the first are dropped before Babel sees the identifier.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from babel.core import parse_locale as babel_parse_locale

from localetoolkit.constants import (
    LOCALE_SEPARATOR,
    MAX_LOCALE_CACHE_SIZE,
    POSIX_LOCALE_SEPARATOR,
)
from localetoolkit.diagnostics import ErrorTemplate, InvalidLocaleError

__all__ = [
    "LocaleTag",
    "clear_locale_cache",
    "normalize_locale",
    "parse_locale",
]


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Primary language tag and first qualifying subtag of a locale.

    Attributes:
        language_tag: Lower-cased primary language code (e.g., 'en', 'zh')
        sub_tag: Region code if present, else script code, else None
            (e.g., 'US', '419', 'Hant')
    """

    language_tag: str
    sub_tag: str | None = None


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to lowercase POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Locale identifiers are case-insensitive, so the result is lowercased to
    give equivalent spellings a single cache key.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR")

    Returns:
        Lowercase POSIX locale code (e.g., "en_us", "pt_br")

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("zh-Hant-HK")
        'zh_hant_hk'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace(LOCALE_SEPARATOR, POSIX_LOCALE_SEPARATOR).lower()


def _is_variant(part: str) -> bool:
    return (len(part) == 4 and part[0].isdigit()) or (len(part) >= 5 and part[0].isalpha())


def _strip_ignored_subtags(cache_key: str) -> str:
    """Cut extensions, private use and repeated variants from a normalized key.

    Babel only understands language, script, region and a single variant.
    A singleton subtag (one character) starts an extension or private-use
    sequence; everything from it on is dropped when at least one non-empty
    subtag follows. A dangling singleton (``en_us_x``) is left in place so
    Babel rejects it. POSIX encoding and modifier suffixes are kept.
    """
    cut = len(cache_key)
    for marker in (".", "@"):
        position = cache_key.find(marker)
        if position >= 0:
            cut = min(cut, position)
    head, tail = cache_key[:cut], cache_key[cut:]
    parts = head.split(POSIX_LOCALE_SEPARATOR)

    for index in range(1, len(parts) - 1):
        if len(parts[index]) == 1 and all(parts[index + 1 :]):
            parts = parts[:index]
            break

    variants = [index for index in range(1, len(parts)) if _is_variant(parts[index])]
    if len(variants) > 1 and all(_is_variant(part) for part in parts[variants[0] :]):
        parts = parts[: variants[0] + 1]

    return POSIX_LOCALE_SEPARATOR.join(parts) + tail


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _parse_normalized(cache_key: str) -> LocaleTag:
    """Parse a normalized locale code (cached).

    Raises:
        ValueError: If Babel rejects the identifier
    """
    # Babel returns (language, territory, script, variant[, modifier])
    language, territory, script = babel_parse_locale(
        _strip_ignored_subtags(cache_key), sep=POSIX_LOCALE_SEPARATOR
    )[:3]
    return LocaleTag(language_tag=language, sub_tag=territory or script or None)


def parse_locale(locale: str) -> LocaleTag:
    """Parse a locale identifier into its language tag and first subtag.

    The subtag is the region when one is present, otherwise the script.
    Variants, extensions and private-use subtags are ignored. Hyphen
    (BCP-47) and underscore (POSIX) separators are both accepted.

    The parser is deliberately permissive compared to a full BCP-47
    implementation:

    - Anything after a ``.`` or ``@`` is treated as a POSIX encoding or
      modifier and discarded, so ``"en.US"`` parses as ``en`` with no subtag.
    - Deprecated language aliases are not canonicalized: ``"iw-IL"`` keeps
      ``iw`` rather than becoming ``he``.

    Thread-safe via lru_cache internal locking.

    Args:
        locale: Locale identifier (e.g., "en", "en-US", "zh-Hant-HK")

    Returns:
        LocaleTag with language_tag and optional sub_tag

    Raises:
        InvalidLocaleError: If the input cannot be interpreted as a locale
            identifier (empty, non-alphabetic language, trailing garbage)

    Example:
        >>> parse_locale("en-US")
        LocaleTag(language_tag='en', sub_tag='US')
        >>> parse_locale("en")
        LocaleTag(language_tag='en', sub_tag=None)
        >>> parse_locale("zh-Hant")
        LocaleTag(language_tag='zh', sub_tag='Hant')
    """
    if not isinstance(locale, str):
        diagnostic = ErrorTemplate.invalid_locale(repr(locale), "expected a string")
        raise InvalidLocaleError(diagnostic, locale_code=repr(locale))
    if not locale:
        raise InvalidLocaleError(ErrorTemplate.empty_locale(), locale_code=locale)

    try:
        return _parse_normalized(normalize_locale(locale))
    except ValueError as e:
        diagnostic = ErrorTemplate.invalid_locale(locale, str(e))
        raise InvalidLocaleError(diagnostic, locale_code=locale) from e


def clear_locale_cache() -> None:
    """Clear the parse_locale cache.

    Useful in tests and long-running processes that parse many one-off
    locale identifiers.
    """
    _parse_normalized.cache_clear()
