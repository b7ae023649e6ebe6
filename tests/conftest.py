from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from graphql import TypeKind, build_schema
from hypothesis import strategies as st
from hypothesis.strategies import composite

from graphql2jsonschema.introspection import introspect_schema
from graphql2jsonschema.introspection.models import ListTypeRef, NamedTypeRef, NonNullTypeRef, TypeRef

SCALAR_TYPES = ["String", "Int", "Float", "Boolean"]
REFERENCED_KINDS = [TypeKind.OBJECT, TypeKind.INPUT_OBJECT, TypeKind.ENUM]


class TestSchemaData:
    TESTS_DATA_DIR: Path = Path(__file__).parent / "data"
    TODO_SCHEMA: Path = TESTS_DATA_DIR / "todo.graphql"


TODO_SDL = """
    type Query { todos: [Todo!]! }
    type Todo { id: ID!, text: String!, done: Boolean }
"""


def introspect(schema_str: str) -> dict[str, Any]:
    """Introspection result of an SDL string, as a server would return it."""
    return {"data": introspect_schema(build_schema(schema_str))}


def find_type(introspection: dict[str, Any], name: str) -> dict[str, Any]:
    """Raw introspection entry of the named type."""
    types: list[dict[str, Any]] = introspection["data"]["__schema"]["types"]
    return next(t for t in types if t["name"] == name)


@pytest.fixture
def todo_introspection() -> dict[str, Any]:
    return introspect(TODO_SDL)


@pytest.fixture
def todo_schema_introspection() -> dict[str, Any]:
    assert TestSchemaData.TODO_SCHEMA.exists(), f"Missing test file: {TestSchemaData.TODO_SCHEMA}"
    return introspect(TestSchemaData.TODO_SCHEMA.read_text())


@composite
def named_type_ref_strategy(draw: Callable[[st.SearchStrategy[Any]], Any]) -> NamedTypeRef:
    if draw(st.booleans()):
        return NamedTypeRef(draw(st.sampled_from(SCALAR_TYPES)), TypeKind.SCALAR)
    name = draw(st.from_regex(r"[A-Z][A-Za-z0-9]{0,10}", fullmatch=True))
    return NamedTypeRef(name, draw(st.sampled_from(REFERENCED_KINDS)))


@composite
def type_ref_strategy(draw: Callable[[st.SearchStrategy[Any]], Any], max_depth: int = 5) -> TypeRef:
    """Random wrapper chain where NON_NULL never directly wraps NON_NULL."""
    type_ref: TypeRef = draw(named_type_ref_strategy())
    for _ in range(draw(st.integers(min_value=0, max_value=max_depth))):
        if isinstance(type_ref, NonNullTypeRef) or draw(st.booleans()):
            type_ref = ListTypeRef(type_ref)
        else:
            type_ref = NonNullTypeRef(type_ref)
    return type_ref
