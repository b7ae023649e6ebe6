from typing import Any, assert_never

from graphql import TypeKind

from graphql2jsonschema import log
from graphql2jsonschema.introspection.models import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef
from graphql2jsonschema.utils.graphql_type import is_builtin_scalar_type

GRAPHQL_SCALAR_TO_JSON_SCHEMA = {
    "Boolean": "boolean",
    "String": "string",
    "Int": "number",
    "Float": "number",
}

DEFINITIONS_REF_PREFIX = "#/definitions/"

REFERENCED_KINDS = frozenset({TypeKind.OBJECT, TypeKind.INPUT_OBJECT, TypeKind.ENUM})


def definition_ref(type_name: str) -> dict[str, Any]:
    return {"$ref": f"{DEFINITIONS_REF_PREFIX}{type_name}"}


def generic_object(type_name: str) -> dict[str, Any]:
    """Fallback for types with no primitive JSON Schema counterpart.

    Custom scalars, interfaces and unions end up here: the value is accepted
    as an untyped object, titled with the GraphQL type name.
    """
    return {"type": "object", "title": type_name}


def unwrap_non_null(type_ref: TypeRef) -> TypeRef:
    """Strip one outer NON_NULL wrapper, if present."""
    if isinstance(type_ref, NonNullTypeRef):
        return type_ref.of_type
    return type_ref


def is_default_scalar_ref(type_ref: TypeRef) -> bool:
    """Check whether a reference names one of the built-in String/Int/Float/Boolean scalars."""
    return (
        isinstance(type_ref, NamedTypeRef)
        and type_ref.kind is TypeKind.SCALAR
        and is_builtin_scalar_type(type_ref.name)
    )


def resolve_named_type_ref(type_ref: NamedTypeRef) -> dict[str, Any]:
    if type_ref.kind in REFERENCED_KINDS:
        return definition_ref(type_ref.name)

    if is_default_scalar_ref(type_ref):
        return {"type": GRAPHQL_SCALAR_TO_JSON_SCHEMA[type_ref.name]}

    log.debug(f"No JSON Schema primitive for '{type_ref.name}' ({type_ref.kind}), using generic object")
    return generic_object(type_ref.name)


def resolve_type_ref(type_ref: TypeRef) -> dict[str, Any]:
    """
    Resolve a GraphQL type reference to a JSON Schema fragment.

    Lists become arrays, NON_NULL wrappers are transparent and named object,
    input object and enum types are referenced through ``#/definitions``, so
    the recursion never follows the type graph itself.

    Args:
        type_ref: The (possibly wrapped) type reference

    Returns:
        dict[str, Any]: JSON Schema fragment
    """
    if isinstance(type_ref, ListTypeRef):
        return {"type": "array", "items": resolve_type_ref(type_ref.of_type)}
    elif isinstance(type_ref, NonNullTypeRef):
        return resolve_type_ref(type_ref.of_type)
    elif isinstance(type_ref, NamedTypeRef):
        return resolve_named_type_ref(type_ref)
    else:
        assert_never(type_ref)
