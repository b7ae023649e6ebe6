import json
from typing import Any

from graphql import TypeKind

from graphql2jsonschema.errors import MalformedDefaultValueError
from graphql2jsonschema.introspection.models import InputValue, NamedTypeRef

from .type_mapping import unwrap_non_null


def has_default_value(input_value: InputValue) -> bool:
    return bool(input_value.default_value)


def resolve_default_value(input_value: InputValue) -> Any:
    """
    Materialize the declared default of an input value as a JSON value.

    Enum defaults are stored as bare value names (``RED``), which are already
    the literal JSON Schema expects, so they are returned unchanged. Any other
    default is parsed as JSON text.

    Args:
        input_value: Argument or input field with a declared default

    Returns:
        Any: The default value

    Raises:
        MalformedDefaultValueError: If a non-enum default is not valid JSON
    """
    raw_value = input_value.default_value
    assert raw_value is not None

    core_type = unwrap_non_null(input_value.type)
    if isinstance(core_type, NamedTypeRef) and core_type.kind is TypeKind.ENUM:
        return raw_value

    try:
        return json.loads(raw_value)
    except json.JSONDecodeError as e:
        raise MalformedDefaultValueError(input_value.name, raw_value) from e
