from collections.abc import Iterable
from typing import Any

from graphql2jsonschema.introspection.models import Field, InputValue, NamedTypeRef, NonNullTypeRef

from .default_value import has_default_value, resolve_default_value
from .type_mapping import GRAPHQL_SCALAR_TO_JSON_SCHEMA, is_default_scalar_ref, resolve_type_ref, unwrap_non_null


def required_field_names(items: Iterable[Field | InputValue]) -> list[str]:
    """Names of the fields or input values whose type is NON_NULL, in declaration order."""
    return [item.name for item in items if isinstance(item.type, NonNullTypeRef)]


def _with_description(definition: dict[str, Any], description: str | None) -> dict[str, Any]:
    if description:
        definition["description"] = description
    return definition


def translate_input_value(input_value: InputValue) -> tuple[str, dict[str, Any]]:
    """
    Translate an input object field or a field argument to a JSON Schema property.

    Args:
        input_value: The GraphQL input value

    Returns:
        tuple[str, dict[str, Any]]: Property name and its JSON Schema definition

    Raises:
        MalformedDefaultValueError: If a declared non-enum default is not valid JSON
    """
    definition = resolve_type_ref(unwrap_non_null(input_value.type))

    if has_default_value(input_value):
        definition["default"] = resolve_default_value(input_value)

    return input_value.name, _with_description(definition, input_value.description)


def translate_arguments(args: Iterable[InputValue]) -> dict[str, Any]:
    args = list(args)
    definition: dict[str, Any] = {
        "type": "object",
        "properties": dict(translate_input_value(arg) for arg in args),
    }

    required = required_field_names(args)
    if required:
        definition["required"] = required

    return definition


def translate_field(field: Field) -> tuple[str, dict[str, Any]]:
    """
    Translate an object field to a JSON Schema property.

    Fields returning one of the built-in scalars map straight to the primitive
    type. Any other field becomes an object holding the resolved ``return``
    type and the ``arguments`` the field accepts.

    Args:
        field: The GraphQL field

    Returns:
        tuple[str, dict[str, Any]]: Property name and its JSON Schema definition
    """
    core_type = unwrap_non_null(field.type)

    if is_default_scalar_ref(core_type):
        assert isinstance(core_type, NamedTypeRef)
        definition: dict[str, Any] = {"type": GRAPHQL_SCALAR_TO_JSON_SCHEMA[core_type.name]}
    else:
        definition = {
            "type": "object",
            "properties": {
                "return": resolve_type_ref(field.type),
                "arguments": translate_arguments(field.args),
            },
        }

    return field.name, _with_description(definition, field.description)
