import json
from pathlib import Path
from typing import Any

from ariadne import load_schema_from_path
from graphql import GraphQLSchema, build_schema, get_introspection_query, graphql_sync

from graphql2jsonschema import log

GRAPHQL_FILE_SUFFIXES = (".graphql", ".graphqls", ".gql")


def resolve_graphql_files(paths: list[Path]) -> list[Path]:
    """Resolve a list of paths (files and directories) into a flat list of unique GraphQL files.

    Args:
        paths: List of file or directory paths

    Returns:
        Flat list of unique GraphQL file paths (deduplicated and sorted)
    """
    resolved_files: set[Path] = set()

    for path in paths:
        if path.is_file():
            resolved_files.add(path)
        elif path.is_dir():
            for file in path.rglob("*"):
                if file.is_file() and file.suffix in GRAPHQL_FILE_SUFFIXES:
                    resolved_files.add(file)

    return sorted(resolved_files)


def build_schema_str(graphql_schema_paths: list[Path]) -> str:
    """Concatenate the SDL of all given GraphQL files."""
    schema_str = ""
    for graphql_file in resolve_graphql_files(graphql_schema_paths):
        schema_str += load_schema_from_path(graphql_file) + "\n"
    return schema_str


def introspect_schema(schema: GraphQLSchema) -> dict[str, Any]:
    """
    Run the standard introspection query against a built schema.

    Args:
        schema: The GraphQL schema to introspect

    Returns:
        dict[str, Any]: The ``data`` part of the introspection response

    Raises:
        ValueError: If the introspection query reports errors
    """
    result = graphql_sync(schema, get_introspection_query(descriptions=True))
    if result.errors:
        raise ValueError(f"Introspection of the schema failed: {result.errors}")
    assert result.data is not None
    return result.data


def introspect_sdl(graphql_schema_paths: list[Path]) -> dict[str, Any]:
    """Build a schema from SDL files or folders and return its introspection result."""
    schema_str = build_schema_str(graphql_schema_paths)
    schema = build_schema(schema_str)
    log.info(f"Built GraphQL schema with {len(schema.type_map)} types from SDL")
    return introspect_schema(schema)


def load_introspection(introspection_path: Path) -> dict[str, Any]:
    """
    Load an introspection result from a JSON file.

    Args:
        introspection_path: Path to a JSON file holding an introspection query result

    Returns:
        dict[str, Any]: The parsed JSON document

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        TypeError: If the JSON root is not an object.
    """
    with introspection_path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, dict):
        raise TypeError(f"Introspection file root must be a JSON object, got {type(raw).__name__}")

    log.debug("Loaded introspection result from %s", introspection_path)
    return raw
