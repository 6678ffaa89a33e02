"""Client naming helpers.

Server property names are converted to the client's camel-case convention
and combined with the optional parent and variable aliases into a binding
path.

Example:
    camelize("OrderDate")                     # "orderDate"
    camelize("order_date")                    # "orderDate"
    compose_binding_path("total", "invoice")  # "invoice.total"
"""

from __future__ import annotations

import re

from tagbind.types import PropertyDescriptor, RenderOptions

_WORD_BOUNDARY = re.compile(r"(?:^|[_\-\s]+)(.)")


def _pascalize(segment: str) -> str:
    return _WORD_BOUNDARY.sub(lambda m: m.group(1).upper(), segment)


def camelize(name: str) -> str:
    """Convert a server property name to camel case.

    Dotted names are converted segment by segment, so a nested
    "Customer.FirstName" becomes "customer.firstName".
    """
    segments = []
    for segment in name.split("."):
        pascal = _pascalize(segment.strip())
        segments.append(pascal[:1].lower() + pascal[1:])
    return ".".join(segments)


def compose_binding_path(
    name: str,
    parent_alias: str | None = None,
    var_alias: str | None = None,
) -> str:
    """Compose a client binding path.

    Args:
        name: Client property name.
        parent_alias: Optional parent object; prefixed with a dot.
        var_alias: Optional alternate name that replaces ``name``.

    Returns:
        Binding path such as "order.orderDate".
    """
    leaf = var_alias or name
    if parent_alias:
        return f"{parent_alias}.{leaf}"
    return leaf


def resolve_binding_path(descriptor: PropertyDescriptor, options: RenderOptions) -> str:
    """Binding path for a descriptor, honoring an explicit path if set."""
    if descriptor.binding_path:
        return descriptor.binding_path
    return compose_binding_path(
        descriptor.name,
        parent_alias=options.parent_alias,
        var_alias=options.var_alias,
    )
