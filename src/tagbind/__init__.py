"""tagbind - client template bindings for server-side properties.

Turns a property's name, semantic data type and the active culture into
a client template expression: a moment formatter call with a culture
correct format for dates and times, or the binding path with an optional
value pipe for everything else.

Example:
    from tagbind import PropertyDescriptor, RenderOptions, render_expression

    render_expression(
        PropertyDescriptor.from_field("OrderDate", "DateTime"),
        RenderOptions(parent_alias="order"),
        locale="de-DE",
    )
    # "{{ moment(order.orderDate).format('DD.MM.YYYY HH:MM') }}"
"""

from tagbind.attributes import options_from_attributes, parse_moment_option
from tagbind.config import BindingConfig
from tagbind.errors import ErrorCode, LocaleFileError, TagBindError, UnknownLocaleError
from tagbind.expressions import ExpressionBuilder, render_expression
from tagbind.formats import FormatResolver, resolve_format, widen_token
from tagbind.locale import get_locale_pattern, register_locale_pattern
from tagbind.naming import camelize, compose_binding_path
from tagbind.types import DataTypeCategory, LocalePattern, PropertyDescriptor, RenderOptions

__version__ = "0.1.0"

__all__ = [
    # Types
    "DataTypeCategory",
    "LocalePattern",
    "PropertyDescriptor",
    "RenderOptions",
    # Core
    "FormatResolver",
    "ExpressionBuilder",
    "render_expression",
    "resolve_format",
    "widen_token",
    # Naming and attributes
    "camelize",
    "compose_binding_path",
    "options_from_attributes",
    "parse_moment_option",
    # Locale
    "get_locale_pattern",
    "register_locale_pattern",
    # Config and errors
    "BindingConfig",
    "ErrorCode",
    "TagBindError",
    "UnknownLocaleError",
    "LocaleFileError",
]
