"""Locale pattern to moment format conversion.

Culture short patterns use lowercase/uppercase single letter tokens and
``tt`` for AM/PM. Moment-style formatters expect uppercase tokens with
explicit leading-zero widths and ``A`` for AM/PM. The conversion is a fixed
sequence of textual replacements:

1. uppercase the pattern
2. replace the meridiem token ``TT`` with ``A``
3. drop the seconds token and its separator (``:SS``, ``.SS``)
4. widen single-letter tokens to two letters (``D`` -> ``DD``)

The order matters: widening only happens when the doubled token is not
already present in the output of the earlier steps.

Example:
    resolver = FormatResolver()
    en_us = get_locale_pattern("en-US")

    resolver.resolve(DataTypeCategory.DATE, en_us)      # "MM/DD/YYYY"
    resolver.resolve(DataTypeCategory.TIME, en_us)      # "H:MM A"
    resolver.resolve(DataTypeCategory.DATETIME, en_us)  # "MM/DD/YYYY H:MM A"
"""

from __future__ import annotations

import logging
import re

from tagbind.types import DataTypeCategory, LocalePattern

logger = logging.getLogger(__name__)

MERIDIEM_TOKEN = "TT"
TARGET_MERIDIEM_TOKEN = "A"
# Seconds token together with the separator before it (":SS", ".SS")
SECONDS_SEGMENT = re.compile(r"[^A-Z]?S+")
DAY_TOKEN = "D"
MONTH_TOKEN = "M"
MINUTE_TOKEN = "M"


def widen_token(pattern: str, token: str) -> str:
    """Widen a single-letter token to two letters.

    Patterns already containing the doubled token are returned unchanged,
    which makes the operation idempotent.
    """
    doubled = token * 2
    if doubled in pattern:
        return pattern
    return pattern.replace(token, doubled)


def _normalize(pattern: str) -> str:
    converted = pattern.upper().replace(MERIDIEM_TOKEN, TARGET_MERIDIEM_TOKEN)
    return SECONDS_SEGMENT.sub("", converted)


def convert_date_pattern(short_date_pattern: str) -> str:
    """Convert a culture short date pattern ("M/d/yyyy" -> "MM/DD/YYYY")."""
    converted = widen_token(_normalize(short_date_pattern), DAY_TOKEN)
    return widen_token(converted, MONTH_TOKEN)


def convert_time_pattern(short_time_pattern: str) -> str:
    """Convert a culture short time pattern ("h:mm:ss tt" -> "H:MM A")."""
    return widen_token(_normalize(short_time_pattern), MINUTE_TOKEN)


class FormatResolver:
    """Resolves the moment format for a data type category.

    The resolver holds no state; the locale is passed on every call so one
    instance can serve concurrent renders in different cultures.
    """

    def date_format(self, locale: LocalePattern) -> str:
        return convert_date_pattern(locale.short_date_pattern)

    def time_format(self, locale: LocalePattern) -> str:
        return convert_time_pattern(locale.short_time_pattern)

    def resolve(
        self,
        category: DataTypeCategory | str,
        locale: LocalePattern,
    ) -> str | None:
        """Resolve the format for a category.

        Args:
            category: Data type category (or its name).
            locale: Culture patterns to convert.

        Returns:
            The moment format, or None for non-temporal categories.
        """
        category = DataTypeCategory.parse(category)

        if category is DataTypeCategory.DATE:
            resolved = self.date_format(locale)
        elif category is DataTypeCategory.TIME:
            resolved = self.time_format(locale)
        elif category is DataTypeCategory.DATETIME:
            resolved = f"{self.date_format(locale)} {self.time_format(locale)}"
        else:
            return None

        logger.debug(
            "Resolved %s format for locale %r: %r",
            category.value,
            locale.name,
            resolved,
        )
        return resolved


_default_resolver = FormatResolver()


def resolve_format(category: DataTypeCategory | str, locale: LocalePattern) -> str | None:
    """Resolve a format with the shared resolver."""
    return _default_resolver.resolve(category, locale)
