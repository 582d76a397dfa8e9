"""localetoolkit - Locale-aware string utilities.

Locale fallback lookup over localized value maps, IETF language tag
parsing, and culturally ordered full-name formatting.

Public API:
    get_localized_value - Look up a value with locale fallback
    LocalizedValues - Indexed value map for repeated lookups
    build_fallback_chain - Candidate locales tried for one lookup
    parse_locale - Split a locale into language tag and subtag
    LocaleTag - Result of parse_locale
    format_full_name - Order given and family names for a locale

Exceptions:
    LocaleError - Base exception class
    InvalidLocaleError - Locale identifier cannot be parsed

Submodules:
    localetoolkit.constants - Fixed tables and cache limits
    localetoolkit.diagnostics - Diagnostic codes and error templates
    localetoolkit.localization - Fallback resolution and type aliases
"""

from .constants import FAMILY_NAME_FIRST_LOCALES
from .diagnostics import InvalidLocaleError, LocaleError
from .locale_utils import LocaleTag, clear_locale_cache, normalize_locale, parse_locale
from .localization import LocalizedValues, build_fallback_chain, get_localized_value
from .names import format_full_name, is_family_name_first

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localetoolkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FAMILY_NAME_FIRST_LOCALES",
    "InvalidLocaleError",
    "LocaleError",
    "LocaleTag",
    "LocalizedValues",
    "__version__",
    "build_fallback_chain",
    "clear_locale_cache",
    "format_full_name",
    "get_localized_value",
    "is_family_name_first",
    "normalize_locale",
    "parse_locale",
]
