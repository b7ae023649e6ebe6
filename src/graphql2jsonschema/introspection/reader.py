"""Read a raw introspection result into the immutable introspection model."""

from collections.abc import Mapping
from typing import Any

from graphql import TypeKind

from graphql2jsonschema import log
from graphql2jsonschema.errors import IntrospectionFormatError

from .models import (
    AbstractTypeDefinition,
    EnumTypeDefinition,
    EnumValue,
    Field,
    InputObjectTypeDefinition,
    InputValue,
    IntrospectionSchema,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeDefinition,
    TypeRef,
)


def _parse_kind(raw_kind: Any) -> TypeKind | None:
    if isinstance(raw_kind, str) and raw_kind in TypeKind.__members__:
        return TypeKind[raw_kind]
    return None


def _root_name(raw_root: Any) -> str | None:
    if isinstance(raw_root, Mapping):
        name = raw_root.get("name")
        return name if isinstance(name, str) else None
    return None


def read_type_ref(raw: Mapping[str, Any]) -> TypeRef:
    """Read a (possibly wrapped) type reference.

    Args:
        raw: Type reference as found under ``type`` / ``ofType`` keys

    Returns:
        TypeRef: The wrapper chain down to the named type

    Raises:
        IntrospectionFormatError: If a wrapper has no ``ofType``
    """
    kind = _parse_kind(raw.get("kind"))
    if kind is TypeKind.LIST or kind is TypeKind.NON_NULL:
        of_type = raw.get("ofType")
        if not isinstance(of_type, Mapping):
            raise IntrospectionFormatError(f"{kind.name} type reference without 'ofType'")
        inner = read_type_ref(of_type)
        return ListTypeRef(inner) if kind is TypeKind.LIST else NonNullTypeRef(inner)
    return NamedTypeRef(name=str(raw.get("name")), kind=kind)


def read_input_value(raw: Mapping[str, Any]) -> InputValue:
    return InputValue(
        name=raw["name"],
        type=read_type_ref(raw["type"]),
        description=raw.get("description"),
        default_value=raw.get("defaultValue"),
    )


def read_field(raw: Mapping[str, Any]) -> Field:
    return Field(
        name=raw["name"],
        type=read_type_ref(raw["type"]),
        description=raw.get("description"),
        args=tuple(read_input_value(arg) for arg in raw.get("args") or ()),
    )


def read_type_definition(raw: Mapping[str, Any]) -> TypeDefinition:
    """Read one entry of ``__schema.types`` into its kind-specific variant."""
    name = raw["name"]
    description = raw.get("description")
    kind = _parse_kind(raw.get("kind"))

    if kind is TypeKind.OBJECT:
        return ObjectTypeDefinition(
            name=name,
            description=description,
            fields=tuple(read_field(f) for f in raw.get("fields") or ()),
        )
    if kind is TypeKind.INPUT_OBJECT:
        return InputObjectTypeDefinition(
            name=name,
            description=description,
            input_fields=tuple(read_input_value(f) for f in raw.get("inputFields") or ()),
        )
    if kind is TypeKind.ENUM:
        return EnumTypeDefinition(
            name=name,
            description=description,
            enum_values=tuple(
                EnumValue(name=v["name"], description=v.get("description")) for v in raw.get("enumValues") or ()
            ),
        )
    if kind is TypeKind.SCALAR:
        return ScalarTypeDefinition(name=name, description=description)

    log.debug(f"Type '{name}' of kind {raw.get('kind')} has no dedicated JSON Schema mapping")
    return AbstractTypeDefinition(name=name, kind=kind, description=description)


def read_introspection(introspection: Mapping[str, Any]) -> IntrospectionSchema:
    """
    Build an IntrospectionSchema from a raw introspection result.

    The input is only read, never modified. Both the bare ``{"__schema": ...}``
    shape and the full response envelope ``{"data": {"__schema": ...}}`` are accepted.

    Args:
        introspection: Parsed JSON of an introspection query result

    Returns:
        IntrospectionSchema: Immutable copy of the schema description

    Raises:
        IntrospectionFormatError: If there is no ``__schema`` mapping with a ``types`` list
    """
    if "__schema" not in introspection and isinstance(introspection.get("data"), Mapping):
        introspection = introspection["data"]

    raw_schema = introspection.get("__schema")
    if not isinstance(raw_schema, Mapping):
        raise IntrospectionFormatError("Introspection result has no '__schema' object")

    raw_types = raw_schema.get("types")
    if not isinstance(raw_types, list):
        raise IntrospectionFormatError("Introspection '__schema.types' must be a list")

    try:
        types = tuple(read_type_definition(raw_type) for raw_type in raw_types)
    except (KeyError, TypeError, AttributeError) as e:
        raise IntrospectionFormatError(f"Malformed type in introspection result: {e!r}") from e

    return IntrospectionSchema(
        types=types,
        query_type=_root_name(raw_schema.get("queryType")),
        mutation_type=_root_name(raw_schema.get("mutationType")),
        subscription_type=_root_name(raw_schema.get("subscriptionType")),
    )
