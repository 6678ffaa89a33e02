"""Translation of template element attributes into render options.

Supported attributes:

- ``par``: parent object alias
- ``var``: alternate variable name
- ``pipe``: client value pipe, e.g. ``currency`` or ``percent:'1.3-5'``
- ``locale``: culture name overriding the active locale
- ``moment``: ``local`` (declared type), ``date``, ``time``, ``datetime``
  or ``custom:<format>``, e.g. ``custom:YYYY-MM-DDTHH:mm``
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from tagbind.types import DataTypeCategory, RenderOptions

logger = logging.getLogger(__name__)

CUSTOM_PREFIX = "custom:"

_MOMENT_CATEGORIES: dict[str, DataTypeCategory] = {
    "date": DataTypeCategory.DATE,
    "time": DataTypeCategory.TIME,
    "datetime": DataTypeCategory.DATETIME,
}


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_moment_option(value: str | None) -> tuple[DataTypeCategory | None, str | None]:
    """Parse a ``moment`` attribute.

    Returns:
        ``(data_type_override, custom_format)``; either may be None.
    """
    text = _text(value)
    if text is None:
        return None, None

    if text.lower().startswith(CUSTOM_PREFIX):
        return None, _text(text[len(CUSTOM_PREFIX):])

    key = text.lower()
    if key in _MOMENT_CATEGORIES:
        return _MOMENT_CATEGORIES[key], None

    if key != "local":
        logger.debug("Ignoring unrecognized moment option %r", value)
    return None, None


def options_from_attributes(attributes: Mapping[str, Any]) -> RenderOptions:
    """Build render options from an element's attribute mapping.

    Empty values are treated as absent and a leading ``|`` on the pipe is
    dropped, so ``pipe="|currency"`` and ``pipe="currency"`` are the same.
    """
    data_type_override, custom_format = parse_moment_option(attributes.get("moment"))

    pipe = _text(attributes.get("pipe"))
    if pipe is not None:
        pipe = _text(pipe.lstrip("|"))

    return RenderOptions(
        parent_alias=_text(attributes.get("par")),
        var_alias=_text(attributes.get("var")),
        pipe_spec=pipe,
        locale_override=_text(attributes.get("locale")),
        custom_format=custom_format,
        data_type_override=data_type_override,
    )
