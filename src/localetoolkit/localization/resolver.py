"""Locale fallback resolution over localized value maps.

Resolution order for a requested locale:

1. Exact, case-sensitive key lookup (no parsing).
2. The requested locale again, case-insensitively.
3. Its primary language tag, when the locale carries a region or script.
4. Each caller-supplied fallback locale, in order.

Steps 2-4 compare lower-cased keys in mapping iteration order; the first
matching key wins, so insertion order breaks ties between keys that differ
only in case. A miss returns None: missing translations are expected.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from localetoolkit.diagnostics import ErrorTemplate, InvalidLocaleError
from localetoolkit.locale_utils import parse_locale
from localetoolkit.localization.types import FallbackChain, LocaleCode, ValueMap

__all__ = [
    "LocalizedValues",
    "build_fallback_chain",
    "get_localized_value",
]

logger = logging.getLogger(__name__)


def _coerce_fallbacks(fallback_locales: Iterable[LocaleCode] | LocaleCode) -> FallbackChain:
    """Materialize fallback locales as a tuple of strings.

    A bare string is one locale, not an iterable of single characters.

    Raises:
        InvalidLocaleError: If any fallback entry is not a string
    """
    if isinstance(fallback_locales, str):
        return (fallback_locales,)
    fallbacks = tuple(fallback_locales)
    for candidate in fallbacks:
        if not isinstance(candidate, str):
            diagnostic = ErrorTemplate.invalid_locale(
                repr(candidate), "fallback locales must be strings"
            )
            raise InvalidLocaleError(diagnostic, locale_code=repr(candidate))
    return fallbacks


def build_fallback_chain(
    locale: LocaleCode,
    fallback_locales: Iterable[LocaleCode] | LocaleCode = (),
) -> FallbackChain:
    """Build the ordered candidate chain for one lookup.

    The language tag is only inserted when the locale has a subtag; for a
    bare language code it would duplicate the locale itself.

    Args:
        locale: Requested locale (e.g., 'en-GB')
        fallback_locales: Extra locales tried after the locale and its language

    Returns:
        Candidate locales in priority order

    Raises:
        InvalidLocaleError: If locale cannot be parsed

    Example:
        >>> build_fallback_chain("en-GB", ["fr"])
        ('en-GB', 'en', 'fr')
        >>> build_fallback_chain("es", ["en", "fr"])
        ('es', 'en', 'fr')
    """
    tag = parse_locale(locale)
    fallbacks = _coerce_fallbacks(fallback_locales)
    if tag.sub_tag:
        return (locale, tag.language_tag, *fallbacks)
    return (locale, *fallbacks)


def get_localized_value[T](
    values: ValueMap[T],
    locale: LocaleCode,
    fallback_locales: Iterable[LocaleCode] | LocaleCode = (),
) -> T | None:
    """Find the value for a locale, falling back to more general locales.

    Tries an exact case-sensitive match first, then walks the fallback
    chain (locale, language tag, fallback locales) matching keys
    case-insensitively.

    Args:
        values: Localized values keyed by locale code
        locale: Requested locale (e.g., 'en-GB')
        fallback_locales: Extra locales tried in order after the locale
            and its language tag

    Returns:
        The first matching value, or None when nothing matches

    Raises:
        InvalidLocaleError: If locale is not an exact key and cannot be parsed

    Example:
        >>> greetings = {"en": "Hello", "en-US": "Howdy", "fr": "Bonjour"}
        >>> get_localized_value(greetings, "en-GB")
        'Hello'
        >>> get_localized_value(greetings, "en-US")
        'Howdy'
        >>> get_localized_value(greetings, "es", ["fr"])
        'Bonjour'
    """
    if isinstance(values, LocalizedValues):
        return values.resolve(locale, fallback_locales)

    # Fast case-sensitive lookup
    if locale in values:
        return values[locale]

    chain = build_fallback_chain(locale, fallback_locales)
    for candidate in chain:
        lowered = candidate.lower()
        for key in values:
            if key.lower() == lowered:
                logger.debug("Resolved locale '%s' via '%s'", locale, key)
                return values[key]

    logger.debug("No value for locale '%s' (tried %s)", locale, chain)
    return None


class LocalizedValues[T](Mapping[LocaleCode, T]):
    """Read-only value map with a precomputed case-insensitive key index.

    Gives the same results as get_localized_value() but replaces the
    per-candidate key scan with a dict lookup. Build once, resolve many
    times. When several keys differ only in case, the first key in
    iteration order owns the index entry, matching the scan semantics.

    The source mapping is copied at construction; later changes to it
    are not reflected.

    Example:
        >>> greetings = LocalizedValues({"EN": "Hello", "fr": "Bonjour"})
        >>> greetings.resolve("en-AU")
        'Hello'
        >>> greetings["fr"]
        'Bonjour'
    """

    __slots__ = ("_index", "_values")

    def __init__(self, values: ValueMap[T]) -> None:
        """Copy values and index their keys by lower-cased form.

        Args:
            values: Localized values keyed by locale code
        """
        self._values: dict[LocaleCode, T] = dict(values)
        index: dict[str, LocaleCode] = {}
        for key in self._values:
            index.setdefault(key.lower(), key)
        self._index = index

    def __getitem__(self, key: LocaleCode) -> T:
        return self._values[key]

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"LocalizedValues({self._values!r})"

    def resolve(
        self,
        locale: LocaleCode,
        fallback_locales: Iterable[LocaleCode] | LocaleCode = (),
    ) -> T | None:
        """Find the value for a locale using the fallback chain.

        Args:
            locale: Requested locale (e.g., 'en-GB')
            fallback_locales: Extra locales tried in order

        Returns:
            The first matching value, or None when nothing matches

        Raises:
            InvalidLocaleError: If locale is not an exact key and cannot be parsed
        """
        if locale in self._values:
            return self._values[locale]

        chain = build_fallback_chain(locale, fallback_locales)
        for candidate in chain:
            key = self._index.get(candidate.lower())
            if key is not None:
                logger.debug("Resolved locale '%s' via '%s'", locale, key)
                return self._values[key]

        logger.debug("No value for locale '%s' (tried %s)", locale, chain)
        return None
