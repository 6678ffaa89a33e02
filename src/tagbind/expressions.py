"""Template expression building.

A property renders either as a date formatter call::

    {{ moment(order.orderDate).format('MM/DD/YYYY H:MM A') }}

or, for every non-temporal type, as its binding path with an optional
value pipe::

    total|currency

Example:
    from tagbind import PropertyDescriptor, RenderOptions, render_expression

    render_expression(PropertyDescriptor("orderDate", "DateTime"), locale="en-US")
    # "{{ moment(orderDate).format('MM/DD/YYYY H:MM A') }}"

    render_expression(PropertyDescriptor("total"), RenderOptions(pipe_spec="currency"))
    # "total|currency"
"""

from __future__ import annotations

import logging

from tagbind.config import DEFAULT_CONFIG, BindingConfig
from tagbind.formats import FormatResolver
from tagbind.locale.patterns import get_locale_pattern
from tagbind.naming import resolve_binding_path
from tagbind.types import DataTypeCategory, LocalePattern, PropertyDescriptor, RenderOptions

logger = logging.getLogger(__name__)


def effective_category(descriptor: PropertyDescriptor, options: RenderOptions) -> DataTypeCategory:
    """Category to render with; an override in the options wins."""
    if options.data_type_override is not None:
        return DataTypeCategory.parse(options.data_type_override)
    return DataTypeCategory.parse(descriptor.data_type)


class ExpressionBuilder:
    """Assembles client template expressions.

    Output is returned unescaped; the host's HTML emission owns escaping.
    """

    def __init__(
        self,
        formatter: str = DEFAULT_CONFIG.formatter,
        open_delimiter: str = DEFAULT_CONFIG.open_delimiter,
        close_delimiter: str = DEFAULT_CONFIG.close_delimiter,
    ) -> None:
        """Initialize the builder.

        Args:
            formatter: Client date formatter function name.
            open_delimiter: Interpolation opening delimiter.
            close_delimiter: Interpolation closing delimiter.
        """
        self._formatter = formatter
        self._open = open_delimiter
        self._close = close_delimiter

    @classmethod
    def from_config(cls, config: BindingConfig) -> "ExpressionBuilder":
        return cls(
            formatter=config.formatter,
            open_delimiter=config.open_delimiter,
            close_delimiter=config.close_delimiter,
        )

    def build(
        self,
        descriptor: PropertyDescriptor,
        options: RenderOptions | None = None,
        resolved_format: str | None = None,
    ) -> str:
        """Build the expression for one property.

        Args:
            descriptor: Property to render.
            options: Render options.
            resolved_format: Format from the resolver. Ignored when the
                options carry a custom format.

        Returns:
            Template expression.
        """
        options = options or RenderOptions()
        path = resolve_binding_path(descriptor, options)

        if effective_category(descriptor, options).is_temporal:
            return self.format_call(path, options.custom_format or resolved_format)
        return self.pipe_expression(path, options.pipe_spec)

    def format_call(self, path: str, date_format: str | None) -> str:
        """Formatter invocation; without a format moment's default applies."""
        argument = f"'{date_format}'" if date_format else ""
        return f"{self._open}{self._formatter}({path}).format({argument}){self._close}"

    def pipe_expression(self, path: str, pipe_spec: str | None) -> str:
        if pipe_spec:
            return f"{path}|{pipe_spec}"
        return path


def render_expression(
    descriptor: PropertyDescriptor,
    options: RenderOptions | None = None,
    locale: LocalePattern | str | None = None,
    *,
    config: BindingConfig | None = None,
    resolver: FormatResolver | None = None,
) -> str:
    """Render the template expression for a property.

    The locale is taken from ``options.locale_override``, then ``locale``,
    then ``config.default_locale``. Unknown culture names fall back as in
    :func:`tagbind.locale.get_locale_pattern`, so this never raises.

    Args:
        descriptor: Property to render.
        options: Render options.
        locale: Culture patterns or a culture name.
        config: Rendering configuration.
        resolver: Format resolver to use.

    Returns:
        Template expression.
    """
    options = options or RenderOptions()
    config = config or DEFAULT_CONFIG
    builder = ExpressionBuilder.from_config(config)
    category = effective_category(descriptor, options)

    resolved_format = None
    if category.is_temporal and not options.custom_format:
        pattern = _select_locale(options, locale, config)
        resolved_format = (resolver or FormatResolver()).resolve(category, pattern)

    expression = builder.build(descriptor, options, resolved_format)
    logger.debug("Rendered %s (%s): %s", descriptor.name, category.value, expression)
    return expression


def _select_locale(
    options: RenderOptions,
    locale: LocalePattern | str | None,
    config: BindingConfig,
) -> LocalePattern:
    if options.locale_override:
        return get_locale_pattern(options.locale_override, default=config.default_locale)
    if isinstance(locale, LocalePattern):
        return locale
    return get_locale_pattern(locale, default=config.default_locale)
