"""Hypothesis strategies for localetoolkit property-based testing.

Usage:
    from tests.strategies import locale_codes, value_maps
"""

from .locales import (
    case_variants,
    fallback_lists,
    languages,
    locale_codes,
    regions,
    scripts,
    value_maps,
)

__all__ = [
    "case_variants",
    "fallback_lists",
    "languages",
    "locale_codes",
    "regions",
    "scripts",
    "value_maps",
]
