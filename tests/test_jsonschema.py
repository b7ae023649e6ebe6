"""Tests for the introspection to JSON Schema conversion."""

import copy
import json
from typing import Any

import pytest
from jsonschema import Draft4Validator

from graphql2jsonschema.config import ConversionOptions
from graphql2jsonschema.converter import from_introspection, transform
from graphql2jsonschema.errors import DuplicateTypeNameError, IntrospectionFormatError, MalformedDefaultValueError
from tests.conftest import find_type, introspect

BROKEN_OBJECT = {"kind": "OBJECT", "name": "A", "fields": [{"name": "f", "type": {"kind": "LIST", "ofType": None}}]}


class TestBasicTransformation:
    def test_basic_schema_structure(self, todo_introspection: dict[str, Any]) -> None:
        """Test that the document has the draft-04 header, properties and definitions."""
        schema = json.loads(transform(todo_introspection))

        assert schema["$schema"] == "http://json-schema.org/draft-04/schema#"
        assert set(schema["properties"]) == {"Query"}
        assert "Todo" in schema["definitions"]
        assert "Query" not in schema["definitions"]

    def test_todo_schema(self, todo_introspection: dict[str, Any]) -> None:
        """Test the list-of-objects query field and the required set of the object."""
        schema = from_introspection(todo_introspection)

        todos = schema["properties"]["Query"]["properties"]["todos"]
        assert todos["type"] == "object"
        assert todos["properties"]["return"] == {"type": "array", "items": {"$ref": "#/definitions/Todo"}}
        assert todos["properties"]["arguments"] == {"type": "object", "properties": {}}

        todo_def = schema["definitions"]["Todo"]
        assert todo_def["type"] == "object"
        assert set(todo_def["required"]) == {"id", "text"}
        assert todo_def["properties"]["text"] == {"type": "string"}
        assert todo_def["properties"]["done"] == {"type": "boolean"}

    def test_output_is_a_valid_draft04_schema(self, todo_schema_introspection: dict[str, Any]) -> None:
        schema = from_introspection(todo_schema_introspection)

        Draft4Validator.check_schema(schema)

    def test_output_with_internals_is_a_valid_draft04_schema(self, todo_schema_introspection: dict[str, Any]) -> None:
        schema = from_introspection(todo_schema_introspection, {"ignoreInternals": False})

        Draft4Validator.check_schema(schema)

    def test_generated_schema_validates_payload(self, todo_schema_introspection: dict[str, Any]) -> None:
        """Test that an input object definition can validate a GraphQL variables payload."""
        schema = from_introspection(todo_schema_introspection)
        validator = Draft4Validator({**schema, "$ref": "#/definitions/TodoInput"})

        assert validator.is_valid({"text": "write tests", "priority": "HIGH", "tags": ["a", "b"]})
        assert not validator.is_valid({"priority": "HIGH"})
        assert not validator.is_valid({"text": "write tests", "priority": "URGENT"})
        assert not validator.is_valid({"text": 1})

    def test_compact_output(self, todo_introspection: dict[str, Any]) -> None:
        assert "\n" not in transform(todo_introspection, indent=None)


class TestDefinitions:
    def test_one_definition_per_named_type(self, todo_schema_introspection: dict[str, Any]) -> None:
        """Test that every non-root object, input object and enum gets exactly one definition."""
        schema = from_introspection(todo_schema_introspection)

        for raw_type in todo_schema_introspection["data"]["__schema"]["types"]:
            name = raw_type["name"]
            if raw_type["kind"] in ("OBJECT", "INPUT_OBJECT", "ENUM") and not name.startswith("__"):
                if name in ("Query", "Mutation"):
                    assert name not in schema["definitions"]
                else:
                    assert name in schema["definitions"]

    def test_enum_values(self) -> None:
        """Test that enum values become titled single-value alternatives."""
        introspection = introspect(
            """
            type Query { letter: Letter }
            "Letters"
            enum Letter {
                A
                "desc"
                B
            }
            """
        )

        letter = from_introspection(introspection)["definitions"]["Letter"]

        assert letter == {
            "type": "string",
            "anyOf": [
                {"enum": ["A"], "title": "A"},
                {"enum": ["B"], "title": "desc", "description": "desc"},
            ],
            "description": "Letters",
        }

    def test_input_object(self) -> None:
        introspection = introspect(
            """
            type Query { search(where: Where): [Result] }
            type Result { score: Float }
            enum Order { ASC DESC }
            input Where {
                text: String!
                limit: Int = 10
                order: Order = DESC
                "Tags to match"
                tags: [String!]
            }
            """
        )

        where = from_introspection(introspection)["definitions"]["Where"]

        assert where == {
            "type": "object",
            "properties": {
                "text": {"type": "string"},
                "limit": {"type": "number", "default": 10},
                "order": {"$ref": "#/definitions/Order", "default": "DESC"},
                "tags": {"type": "array", "items": {"type": "string"}, "description": "Tags to match"},
            },
            "required": ["text"],
        }

    def test_scalars(self) -> None:
        """Test that built-in scalars map to primitives and custom scalars to a generic object."""
        introspection = introspect(
            """
            "An ISO-8601 timestamp"
            scalar DateTime
            type Query { now: DateTime, count: Int }
            """
        )

        definitions = from_introspection(introspection)["definitions"]

        assert definitions["Int"]["type"] == "number"
        assert definitions["Int"]["title"] == "Int"
        assert definitions["String"]["type"] == "string"
        assert definitions["String"]["title"] == "String"
        assert definitions["DateTime"] == {
            "type": "object",
            "title": "DateTime",
            "description": "An ISO-8601 timestamp",
        }

    def test_interfaces_and_unions_fall_back_to_generic_object(self) -> None:
        introspection = introspect(
            """
            type Query { node: Node, search: SearchResult }
            interface Node { id: ID! }
            type Car implements Node { id: ID! }
            type Boat implements Node { id: ID! }
            union SearchResult = Car | Boat
            """
        )

        schema = from_introspection(introspection)

        assert schema["definitions"]["Node"] == {"type": "object", "title": "Node"}
        assert schema["definitions"]["SearchResult"] == {"type": "object", "title": "SearchResult"}
        node_field = schema["properties"]["Query"]["properties"]["node"]
        assert node_field["properties"]["return"] == {"type": "object", "title": "Node"}

    def test_self_reference(self) -> None:
        """Test that a self-referencing type produces a $ref to its own definition."""
        introspection = introspect(
            """
            type Query { root: TreeNode }
            type TreeNode { parent: TreeNode, children: [TreeNode!]! }
            """
        )

        tree = from_introspection(introspection)["definitions"]["TreeNode"]

        assert tree["properties"]["parent"]["properties"]["return"] == {"$ref": "#/definitions/TreeNode"}
        assert tree["properties"]["children"]["properties"]["return"] == {
            "type": "array",
            "items": {"$ref": "#/definitions/TreeNode"},
        }
        assert tree["required"] == ["children"]


class TestRootTypes:
    def test_root_fields_are_never_required(self, todo_schema_introspection: dict[str, Any]) -> None:
        schema = from_introspection(todo_schema_introspection)

        for root in schema["properties"].values():
            assert "required" not in root
        mutation = schema["properties"]["Mutation"]
        assert mutation["properties"]["addTodo"]["properties"]["arguments"]["required"] == ["text"]

    def test_mutation_arguments(self, todo_schema_introspection: dict[str, Any]) -> None:
        mutation = from_introspection(todo_schema_introspection)["properties"]["Mutation"]

        add_todo = mutation["properties"]["addTodo"]
        assert add_todo["properties"]["return"] == {"$ref": "#/definitions/Todo"}
        assert add_todo["properties"]["arguments"]["properties"]["priority"] == {
            "$ref": "#/definitions/Priority",
            "default": "MEDIUM",
        }
        # Scalar-returning fields keep only their primitive type
        assert mutation["properties"]["completeTodo"] == {"type": "boolean"}

    def test_custom_root_names(self) -> None:
        introspection = introspect(
            """
            schema { query: RootQuery, mutation: RootMutation }
            type RootQuery { todo: Todo }
            type RootMutation { touch: Todo }
            type Todo { id: Int! }
            """
        )

        schema = from_introspection(introspection)

        assert set(schema["properties"]) == {"Query", "Mutation"}
        assert "RootQuery" not in schema["definitions"]
        assert "RootMutation" not in schema["definitions"]

    def test_schema_without_roots(self) -> None:
        introspection = {"__schema": {"types": [{"kind": "ENUM", "name": "Color", "enumValues": [{"name": "RED"}]}]}}

        schema = from_introspection(introspection)

        assert schema["properties"] == {}
        assert schema["definitions"] == {"Color": {"type": "string", "anyOf": [{"enum": ["RED"], "title": "RED"}]}}


class TestOptions:
    def test_internals_ignored_by_default(self, todo_introspection: dict[str, Any]) -> None:
        definitions = from_introspection(todo_introspection)["definitions"]

        assert not any(name.startswith("__") for name in definitions)

    @pytest.mark.parametrize("options", [{"ignoreInternals": False}, ConversionOptions(ignore_internals=False)])
    def test_internals_kept(self, todo_introspection: dict[str, Any], options: Any) -> None:
        definitions = from_introspection(todo_introspection, options)["definitions"]

        assert "__Schema" in definitions
        assert "__TypeKind" in definitions

    def test_empty_options_use_defaults(self, todo_introspection: dict[str, Any]) -> None:
        definitions = from_introspection(todo_introspection, {})["definitions"]

        assert "__Schema" not in definitions


class TestInputIsolation:
    def test_input_is_not_mutated(self) -> None:
        introspection = introspect(
            """
            schema { query: RootQuery }
            type RootQuery { todo: Todo }
            type Todo { id: Int! }
            """
        )
        snapshot = copy.deepcopy(introspection)

        first = from_introspection(introspection)
        second = from_introspection(introspection)

        assert introspection == snapshot
        assert find_type(introspection, "RootQuery")["name"] == "RootQuery"
        assert first == second


class TestErrors:
    def test_malformed_default_value_fails_the_conversion(self) -> None:
        introspection = introspect(
            """
            input Range { min: Int, max: Int }
            type Query { count(range: Range = {min: 1}): Int, items(range: Range = {min: 1}): [Int] }
            """
        )

        with pytest.raises(MalformedDefaultValueError, match="range"):
            from_introspection(introspection)

    def test_duplicate_type_names_are_rejected(self) -> None:
        """Test that a type clashing with a renamed root is reported instead of overwritten."""
        introspection = introspect(
            """
            schema { query: RootQuery }
            type RootQuery { other: Query }
            type Query { id: Int }
            """
        )

        with pytest.raises(DuplicateTypeNameError, match="Query"):
            from_introspection(introspection)

    @pytest.mark.parametrize(
        "introspection",
        [
            {},
            {"data": None},
            {"__schema": {"types": None}},
            {"__schema": {"types": [{"kind": "OBJECT"}]}},
            {"__schema": {"types": ["Query"]}},
            {"__schema": {"types": [BROKEN_OBJECT]}},
        ],
    )
    def test_malformed_introspection(self, introspection: dict[str, Any]) -> None:
        with pytest.raises(IntrospectionFormatError):
            from_introspection(introspection)
