"""Registry of culture short date/time patterns.

Patterns follow the culture conventions of the server platform (single
letter tokens, ``tt`` for AM/PM). Lookups fall back from the exact culture
name to its language and finally to the default culture, so rendering
never fails for an unregistered locale.
"""

from __future__ import annotations

import logging
import threading

from tagbind.errors import UnknownLocaleError
from tagbind.types import LocalePattern

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"

INVARIANT_NAME = "invariant"

# Culture-neutral patterns, selectable as "invariant" and used as the last resort
INVARIANT = LocalePattern(name="", short_date_pattern="MM/dd/yyyy", short_time_pattern="HH:mm")

# Locale pattern registry
_BUILTIN_PATTERNS: tuple[LocalePattern, ...] = (
    LocalePattern("en-US", "M/d/yyyy", "h:mm tt"),
    LocalePattern("en-GB", "dd/MM/yyyy", "HH:mm"),
    LocalePattern("en-AU", "d/MM/yyyy", "h:mm tt"),
    LocalePattern("en-CA", "yyyy-MM-dd", "h:mm tt"),
    LocalePattern("de-DE", "dd.MM.yyyy", "HH:mm"),
    LocalePattern("fr-FR", "dd/MM/yyyy", "HH:mm"),
    LocalePattern("es-ES", "dd/MM/yyyy", "H:mm"),
    LocalePattern("it-IT", "dd/MM/yyyy", "HH:mm"),
    LocalePattern("pt-BR", "dd/MM/yyyy", "HH:mm"),
    LocalePattern("nl-NL", "d-M-yyyy", "HH:mm"),
    LocalePattern("ru-RU", "dd.MM.yyyy", "H:mm"),
    LocalePattern("sv-SE", "yyyy-MM-dd", "HH:mm"),
    LocalePattern("ja-JP", "yyyy/MM/dd", "H:mm"),
    LocalePattern("zh-CN", "yyyy/M/d", "H:mm"),
    LocalePattern("ko-KR", "yyyy-MM-dd", "tt h:mm"),
)

# Preferred culture when only a language is given
_LANGUAGE_DEFAULTS: dict[str, str] = {
    "en": "en-us",
    "pt": "pt-br",
    "zh": "zh-cn",
}

_PATTERNS: dict[str, LocalePattern] = {p.name.lower(): p for p in _BUILTIN_PATTERNS}
_LOCK = threading.Lock()


def normalize_locale_name(name: str) -> str:
    """Normalize "en_us" / "EN-us" style names to the registry key form."""
    return name.strip().replace("_", "-").lower()


def register_locale_pattern(pattern: LocalePattern) -> None:
    """Register or replace a culture's patterns."""
    with _LOCK:
        _PATTERNS[normalize_locale_name(pattern.name)] = pattern
    logger.debug("Registered locale pattern %r", pattern.name)


def get_supported_locales() -> list[str]:
    """Names of all registered cultures, sorted."""
    return sorted(p.name for p in _PATTERNS.values() if p.name)


def get_locale_pattern(
    locale: str | None,
    strict: bool = False,
    default: str = DEFAULT_LOCALE,
) -> LocalePattern:
    """Get the patterns of a culture.

    "invariant" selects the culture-neutral patterns. Otherwise the
    lookup order is: exact (case-insensitive) name, the first registered
    culture of the same language, then ``default``.

    Args:
        locale: Culture name such as "de-DE", "de_DE" or "de". None or
            empty selects ``default``.
        strict: Raise instead of falling back when no culture matches.
        default: Culture used when falling back.

    Returns:
        LocalePattern.

    Raises:
        UnknownLocaleError: If ``strict`` and no culture matches.
    """
    if not locale:
        return _PATTERNS.get(normalize_locale_name(default), INVARIANT)

    key = normalize_locale_name(locale)
    if key == INVARIANT_NAME:
        return INVARIANT
    if key in _PATTERNS:
        return _PATTERNS[key]

    lang = key.split("-")[0]
    preferred = _LANGUAGE_DEFAULTS.get(lang)
    candidates = [preferred] if preferred in _PATTERNS else []
    candidates += [name for name in sorted(_PATTERNS) if name.split("-")[0] == lang]
    if candidates:
        logger.debug("Locale %r resolved by language to %r", locale, candidates[0])
        return _PATTERNS[candidates[0]]

    if strict:
        raise UnknownLocaleError(locale)

    logger.debug("Unknown locale %r, falling back to %r", locale, default)
    return _PATTERNS.get(normalize_locale_name(default), INVARIANT)
