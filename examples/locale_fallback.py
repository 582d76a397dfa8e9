"""Locale Fallback Example - Looking up localized values.

Demonstrates locale fallback over plain value maps:
1. Regional locale falling back to its language
2. Caller-supplied fallback chains
3. Indexed lookups with LocalizedValues
4. Name ordering by locale

Python 3.13+.
"""

from __future__ import annotations

import logging

from localetoolkit import (
    InvalidLocaleError,
    LocalizedValues,
    build_fallback_chain,
    format_full_name,
    get_localized_value,
)

GREETINGS = {
    "en": "Hello",
    "en-US": "Howdy",
    "fr": "Bonjour",
    "lv": "Sveiki",
}


def example_1_language_fallback() -> None:
    """Example 1: en-GB has no entry and falls back to en."""
    print("=" * 60)
    print("Example 1: Language Fallback (en-GB -> en)")
    print("=" * 60)

    for locale in ("en-US", "en-GB", "EN-au", "fr-CA"):
        print(f"  {locale}: {get_localized_value(GREETINGS, locale)}")


def example_2_fallback_chain() -> None:
    """Example 2: Baltic locales falling back through a chain."""
    print("=" * 60)
    print("Example 2: Fallback Chain (lt -> lv -> en)")
    print("=" * 60)

    chain = build_fallback_chain("lt-LT", ["lv", "en"])
    print(f"  chain: {chain}")
    print(f"  lt-LT: {get_localized_value(GREETINGS, 'lt-LT', ['lv', 'en'])}")
    print(f"  et (no fallbacks): {get_localized_value(GREETINGS, 'et')}")


def example_3_indexed_lookup() -> None:
    """Example 3: Build the case-insensitive index once, resolve many times."""
    print("=" * 60)
    print("Example 3: LocalizedValues")
    print("=" * 60)

    greetings = LocalizedValues(GREETINGS)
    for locale in ("en-NZ", "FR", "lv-LV", "ja-JP"):
        print(f"  {locale}: {greetings.resolve(locale, ['en'])}")

    try:
        greetings.resolve("123")
    except InvalidLocaleError as e:
        print(f"  invalid locale rejected:\n{e}")


def example_4_name_order() -> None:
    """Example 4: Given and family name order by locale."""
    print("=" * 60)
    print("Example 4: Full Names")
    print("=" * 60)

    for locale in ("en-US", "ja-JP", "hu-HU", "ja"):
        print(f"  {locale}: {format_full_name('Taro', 'Yamada', locale)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    example_1_language_fallback()
    example_2_fallback_chain()
    example_3_indexed_lookup()
    example_4_name_order()
