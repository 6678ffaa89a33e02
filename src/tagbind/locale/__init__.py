"""Culture short date/time patterns.

Example:
    from tagbind.locale import get_locale_pattern, load_locale_from_dict

    get_locale_pattern("de-DE").short_date_pattern  # "dd.MM.yyyy"
    get_locale_pattern("de").name                   # "de-DE"

    load_locale_from_dict("fi-FI", "d.M.yyyy", "H.mm")
"""

from tagbind.locale.patterns import (
    DEFAULT_LOCALE,
    INVARIANT,
    INVARIANT_NAME,
    get_locale_pattern,
    get_supported_locales,
    normalize_locale_name,
    register_locale_pattern,
)
from tagbind.locale.loader import (
    LocalePatternLoader,
    load_locale_from_dict,
    load_locale_from_file,
    load_locales_from_directory,
)

__all__ = [
    # Registry
    "DEFAULT_LOCALE",
    "INVARIANT",
    "INVARIANT_NAME",
    "get_locale_pattern",
    "get_supported_locales",
    "normalize_locale_name",
    "register_locale_pattern",
    # Loader
    "LocalePatternLoader",
    "load_locale_from_dict",
    "load_locale_from_file",
    "load_locales_from_directory",
]
