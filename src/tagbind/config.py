"""Configuration for expression rendering.

Core functions only see a config passed to them explicitly. ``from_env``
exists for hosts (the CLI, template integrations) that want to pick up
process-level settings once at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from tagbind.locale.patterns import DEFAULT_LOCALE


@dataclass(frozen=True)
class BindingConfig:
    """Settings for rendering template expressions.

    Attributes:
        default_locale: Culture used when neither the caller nor the
            render options name one.
        formatter: Client date formatter function name.
        open_delimiter: Interpolation opening delimiter.
        close_delimiter: Interpolation closing delimiter.
    """

    default_locale: str = DEFAULT_LOCALE
    formatter: str = "moment"
    open_delimiter: str = "{{ "
    close_delimiter: str = " }}"

    @classmethod
    def from_env(cls) -> "BindingConfig":
        """Create config from environment variables.

        Environment variables:
            TAGBIND_DEFAULT_LOCALE: Default culture (default: en-US)
            TAGBIND_FORMATTER: Date formatter function (default: moment)
            TAGBIND_OPEN_DELIMITER: Interpolation start (default: "{{ ")
            TAGBIND_CLOSE_DELIMITER: Interpolation end (default: " }}")
        """
        defaults = cls()
        return cls(
            default_locale=os.environ.get("TAGBIND_DEFAULT_LOCALE", defaults.default_locale),
            formatter=os.environ.get("TAGBIND_FORMATTER", defaults.formatter),
            open_delimiter=os.environ.get("TAGBIND_OPEN_DELIMITER", defaults.open_delimiter),
            close_delimiter=os.environ.get("TAGBIND_CLOSE_DELIMITER", defaults.close_delimiter),
        )


DEFAULT_CONFIG = BindingConfig()
