"""Host template engine integrations."""

from tagbind.integrations.jinja import register_binding_helpers

__all__ = ["register_binding_helpers"]
