import json
from collections.abc import Mapping
from typing import Any

from graphql2jsonschema import log
from graphql2jsonschema.config import ConversionOptions, coerce_options
from graphql2jsonschema.introspection.reader import read_introspection

from .transformer import JsonSchemaTransformer


def from_introspection(
    introspection: Mapping[str, Any],
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Convert a GraphQL introspection result to a JSON Schema document.

    The input is never modified, so converting the same introspection result
    twice gives equal documents.

    Args:
        introspection: Introspection query result (``{"__schema": ...}`` or ``{"data": {"__schema": ...}}``)
        options: Conversion options, as a model or a mapping such as ``{"ignoreInternals": False}``

    Returns:
        dict[str, Any]: JSON Schema draft-04 document

    Raises:
        IntrospectionFormatError: If the input lacks the introspection shape
        MalformedDefaultValueError: If a non-enum default value is not valid JSON
        DuplicateTypeNameError: If two types share a name after root renaming
    """
    conversion_options = coerce_options(options)
    introspection_schema = read_introspection(introspection)
    log.info(f"Transforming GraphQL introspection to JSON Schema with {len(introspection_schema.types)} types")

    transformer = JsonSchemaTransformer(introspection_schema, conversion_options)
    return transformer.transform()


def transform(
    introspection: Mapping[str, Any],
    options: ConversionOptions | Mapping[str, Any] | None = None,
    indent: int | None = 2,
) -> str:
    """
    Transform a GraphQL introspection result to JSON Schema format.

    Args:
        introspection: Introspection query result
        options: Conversion options
        indent: JSON indentation, None for a compact document

    Returns:
        str: JSON Schema representation as a string
    """
    json_schema = from_introspection(introspection, options)
    json_schema_str = json.dumps(json_schema, indent=indent)

    log.info("Successfully converted GraphQL introspection to JSON Schema")

    return json_schema_str
