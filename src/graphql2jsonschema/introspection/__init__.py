"""Reading GraphQL introspection results."""

from .loader import introspect_schema, introspect_sdl, load_introspection
from .reader import read_introspection

__all__ = ["introspect_schema", "introspect_sdl", "load_introspection", "read_introspection"]
