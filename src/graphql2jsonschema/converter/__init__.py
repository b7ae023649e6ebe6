"""GraphQL introspection to JSON Schema conversion."""

from .jsonschema import from_introspection, transform

__all__ = ["from_introspection", "transform"]
