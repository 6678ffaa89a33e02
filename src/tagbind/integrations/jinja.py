"""Jinja2 integration.

Server-side Jinja2 templates that emit client templates can render
bindings directly::

    <td>{{ bind_property("OrderDate", "DateTime", par="order") }}</td>
    <td>{{ bind_property("Total", pipe="currency") }}</td>

The locale is taken from the ``locale`` attribute, then a ``locale``
variable in the template context, then the default given at registration.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from tagbind.attributes import options_from_attributes
from tagbind.config import BindingConfig
from tagbind.expressions import render_expression
from tagbind.formats import FormatResolver
from tagbind.locale.patterns import get_locale_pattern
from tagbind.types import LocalePattern, PropertyDescriptor


def register_binding_helpers(
    env: Environment,
    locale: LocalePattern | str | None = None,
    config: BindingConfig | None = None,
) -> None:
    """Register the ``bind_property`` global and ``bind_format`` filter.

    Existing globals or filters with the same names are kept.

    Args:
        env: Jinja2 Environment.
        locale: Default culture for templates without a ``locale`` variable.
        config: Rendering configuration.
    """
    config = config or BindingConfig()
    resolver = FormatResolver()

    def _context_locale(context: Context) -> LocalePattern | str | None:
        value = context.get("locale")
        if isinstance(value, (LocalePattern, str)) and value:
            return value
        return locale

    @pass_context
    def bind_property(
        context: Context,
        name: str,
        data_type: Any = None,
        binding_path: str | None = None,
        **attributes: Any,
    ) -> Markup:
        """Render a binding expression for a server field."""
        descriptor = PropertyDescriptor.from_field(name, data_type)
        if binding_path:
            descriptor = PropertyDescriptor(descriptor.name, descriptor.data_type, binding_path)

        expression = render_expression(
            descriptor,
            options_from_attributes(attributes),
            _context_locale(context),
            config=config,
            resolver=resolver,
        )
        return Markup(expression)

    @pass_context
    def bind_format(context: Context, data_type: Any, culture: str | None = None) -> str:
        """Resolved moment format for a data type name ("" for Plain)."""
        selected = culture or _context_locale(context)
        if not isinstance(selected, LocalePattern):
            selected = get_locale_pattern(selected, default=config.default_locale)
        return resolver.resolve(data_type, selected) or ""

    env.globals.setdefault("bind_property", bind_property)
    env.filters.setdefault("bind_format", bind_format)
