"""Tests for locale-aware full name formatting.

Python 3.13+.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localetoolkit.constants import FAMILY_NAME_FIRST_LOCALES
from localetoolkit.names import format_full_name, is_family_name_first
from tests.strategies import locale_codes


class TestFormatFullName:
    """Test format_full_name name ordering."""

    def test_given_name_first_by_default(self) -> None:
        """Western locales put the given name first."""
        assert format_full_name("John", "Doe", "en-US") == "John Doe"

    def test_family_name_first(self) -> None:
        """Japanese puts the family name first."""
        assert format_full_name("John", "Doe", "ja-JP") == "Doe John"

    @pytest.mark.parametrize(
        "locale", ["ja-JP", "zh-CN", "zh-TW", "ko-KR", "vi-VN", "hu-HU", "mn-MN"]
    )
    def test_all_family_first_locales(self, locale: str) -> None:
        """Every listed locale orders family name first."""
        assert format_full_name("Taro", "Yamada", locale) == "Yamada Taro"

    @pytest.mark.parametrize("locale", ["ja", "ja-jp", "JA-JP", "ja_JP", "zh-HK", "zh-Hant"])
    def test_exact_match_only(self, locale: str) -> None:
        """No parsing, case folding, or language fallback."""
        assert format_full_name("John", "Doe", locale) == "John Doe"

    def test_names_not_trimmed(self) -> None:
        """Names are joined verbatim with one space."""
        assert format_full_name(" John ", "Doe", "en-US") == " John  Doe"

    def test_empty_names(self) -> None:
        """Empty names still produce a defined result."""
        assert format_full_name("", "Doe", "en-US") == " Doe"
        assert format_full_name("John", "", "ja-JP") == " John"
        assert format_full_name("", "", "") == " "

    def test_non_ascii_names(self) -> None:
        """Names in any script are concatenated unchanged."""
        assert format_full_name("太郎", "山田", "ja-JP") == "山田 太郎"
        assert format_full_name("Ádám", "Kovács", "hu-HU") == "Kovács Ádám"

    @given(given_name=st.text(), family_name=st.text(), locale=locale_codes())
    def test_contains_both_names(self, given_name: str, family_name: str, locale: str) -> None:
        """PROPERTY: Output is the two names joined by a single space, in some order."""
        result = format_full_name(given_name, family_name, locale)
        assert result in (f"{given_name} {family_name}", f"{family_name} {given_name}")
        assert len(result) == len(given_name) + len(family_name) + 1


class TestIsFamilyNameFirst:
    """Test is_family_name_first lookup."""

    def test_table_size(self) -> None:
        """The family-name-first table has exactly seven locales."""
        assert len(FAMILY_NAME_FIRST_LOCALES) == 7

    def test_table_immutable(self) -> None:
        """The table is a frozenset."""
        assert isinstance(FAMILY_NAME_FIRST_LOCALES, frozenset)

    def test_lookup(self) -> None:
        """Lookup is exact."""
        assert is_family_name_first("ko-KR")
        assert not is_family_name_first("ko")
        assert not is_family_name_first("en-US")
