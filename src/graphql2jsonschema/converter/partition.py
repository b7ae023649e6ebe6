from typing import NamedTuple

from graphql2jsonschema import log
from graphql2jsonschema.config import ConversionOptions
from graphql2jsonschema.introspection.models import (
    IntrospectionSchema,
    ObjectTypeDefinition,
    TypeDefinition,
    rename_type,
)
from graphql2jsonschema.utils.graphql_type import (
    MUTATION_TYPE_NAME,
    QUERY_TYPE_NAME,
    is_introspection_type,
    is_root_type,
)


class TypePartition(NamedTuple):
    root_types: list[TypeDefinition]
    named_types: list[TypeDefinition]


def root_type_names(schema: IntrospectionSchema) -> dict[str, str]:
    """Map the server's query/mutation root type names to ``Query`` / ``Mutation``."""
    renames: dict[str, str] = {}
    if schema.query_type:
        renames[schema.query_type] = QUERY_TYPE_NAME
    else:
        log.debug("Schema declares no query type")
    if schema.mutation_type:
        renames[schema.mutation_type] = MUTATION_TYPE_NAME
    else:
        log.debug("Schema declares no mutation type")
    return renames


def canonicalize_root_types(schema: IntrospectionSchema) -> list[TypeDefinition]:
    """Return the schema types with the query/mutation roots renamed to their canonical names."""
    renames = root_type_names(schema)
    types: list[TypeDefinition] = []
    for type_def in schema.types:
        canonical_name = renames.pop(type_def.name, None)
        if canonical_name and canonical_name != type_def.name:
            log.debug(f"Renaming root type '{type_def.name}' to '{canonical_name}'")
            type_def = rename_type(type_def, canonical_name)
        types.append(type_def)

    for missing_name, canonical_name in renames.items():
        log.debug(f"{canonical_name} root type '{missing_name}' not found among the introspected types")

    return types


def is_root_operation_type(type_def: TypeDefinition) -> bool:
    return isinstance(type_def, ObjectTypeDefinition) and is_root_type(type_def.name)


def partition_types(schema: IntrospectionSchema, options: ConversionOptions) -> TypePartition:
    """
    Split the introspected types into root operation types and named types.

    Query and Mutation become top level properties of the JSON Schema, every
    other type becomes a reusable definition.

    Args:
        schema: The introspection schema
        options: Conversion options

    Returns:
        TypePartition: Root operation types and named types, in introspection order
    """
    root_types: list[TypeDefinition] = []
    named_types: list[TypeDefinition] = []

    for type_def in canonicalize_root_types(schema):
        if is_root_operation_type(type_def):
            root_types.append(type_def)
        elif options.ignore_internals and is_introspection_type(type_def.name):
            continue
        else:
            named_types.append(type_def)

    return TypePartition(root_types, named_types)
