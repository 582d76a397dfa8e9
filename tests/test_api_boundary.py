"""Tests for the public package surface.

Python 3.13+.
"""

import localetoolkit
from localetoolkit import (
    LocaleTag,
    format_full_name,
    get_localized_value,
    parse_locale,
)


class TestPublicApi:
    """Test top-level exports."""

    def test_all_exports_resolve(self) -> None:
        """Every name in __all__ is importable from the package."""
        for name in localetoolkit.__all__:
            assert hasattr(localetoolkit, name), name

    def test_version_is_string(self) -> None:
        """__version__ is populated from metadata or the dev fallback."""
        assert isinstance(localetoolkit.__version__, str)
        assert localetoolkit.__version__

    def test_documented_examples(self) -> None:
        """The examples from the package documentation hold."""
        greetings = {"en": "Hello", "en-US": "Howdy", "fr": "Bonjour"}
        assert get_localized_value(greetings, "en-GB") == "Hello"
        assert get_localized_value(greetings, "en-US") == "Howdy"
        assert get_localized_value(greetings, "es", "en") == "Hello"
        assert parse_locale("zh-Hant") == LocaleTag("zh", "Hant")
        assert format_full_name("John", "Doe", "ja-JP") == "Doe John"
