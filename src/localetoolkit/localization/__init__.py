"""Locale fallback resolution for localized value maps.

Exports:
    get_localized_value: Look up a value with locale fallback
    build_fallback_chain: Candidate locales for one lookup
    LocalizedValues: Indexed value map for repeated lookups
    LocaleCode, FallbackChain, ValueMap: Type aliases

Python 3.13+.
"""

from .resolver import LocalizedValues, build_fallback_chain, get_localized_value
from .types import FallbackChain, LocaleCode, ValueMap

__all__ = [
    "FallbackChain",
    "LocaleCode",
    "LocalizedValues",
    "ValueMap",
    "build_fallback_chain",
    "get_localized_value",
]
