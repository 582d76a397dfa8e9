"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating lookup call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "FallbackChain",
    "LocaleCode",
    "ValueMap",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'en-GB', 'zh-Hant')."""

type FallbackChain = tuple[LocaleCode, ...]
"""Ordered candidate locale codes tried during one resolution."""

type ValueMap[T] = Mapping[LocaleCode, T]
"""Localized values keyed by locale code (e.g., {'en': 'Hello', 'fr': 'Bonjour'})."""
