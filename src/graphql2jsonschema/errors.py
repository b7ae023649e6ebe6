"""Errors raised while converting an introspection result to JSON Schema."""


class ConversionError(ValueError):
    """Base class for failures of a GraphQL to JSON Schema conversion."""


class IntrospectionFormatError(ConversionError):
    """Raised when the input does not have the introspection response shape.

    Only the parts needed to walk the type graph are checked: a ``__schema``
    mapping (optionally under ``data``) holding a ``types`` list.
    """


class MalformedDefaultValueError(ConversionError):
    """Raised when a non-enum default value is not valid JSON text."""

    def __init__(self, name: str, raw_value: str) -> None:
        self.name = name
        self.raw_value = raw_value
        super().__init__(f"Default value of '{name}' is not valid JSON: {raw_value!r}")


class DuplicateTypeNameError(ConversionError):
    """Raised when two type definitions would be stored under the same key."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Type '{name}' is defined more than once")
