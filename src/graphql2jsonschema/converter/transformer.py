from collections.abc import Iterable
from typing import Any, assert_never

from graphql2jsonschema import log
from graphql2jsonschema.config import ConversionOptions
from graphql2jsonschema.errors import DuplicateTypeNameError
from graphql2jsonschema.introspection.models import (
    AbstractTypeDefinition,
    EnumTypeDefinition,
    InputObjectTypeDefinition,
    IntrospectionSchema,
    ObjectTypeDefinition,
    ScalarTypeDefinition,
    TypeDefinition,
)
from graphql2jsonschema.utils.graphql_type import is_builtin_scalar_type

from .fields import required_field_names, translate_field, translate_input_value
from .partition import partition_types
from .type_mapping import GRAPHQL_SCALAR_TO_JSON_SCHEMA, generic_object

JSON_SCHEMA_DRAFT_04 = "http://json-schema.org/draft-04/schema#"


class DefinitionsBuilder:
    """Collects JSON Schema definitions keyed by type name, refusing to overwrite a key."""

    def __init__(self) -> None:
        self._definitions: dict[str, dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def add(self, name: str, definition: dict[str, Any]) -> None:
        if name in self._definitions:
            raise DuplicateTypeNameError(name)
        self._definitions[name] = definition

    def build(self) -> dict[str, dict[str, Any]]:
        return dict(self._definitions)


class JsonSchemaTransformer:
    """
    Transformer class to convert a GraphQL introspection result to JSON Schema format.

    The query and mutation root types become the top level ``properties`` of
    the document and every other named type becomes an entry of ``definitions``.
    """

    def __init__(self, introspection_schema: IntrospectionSchema, options: ConversionOptions | None = None):
        self.introspection_schema = introspection_schema
        self.options = options or ConversionOptions()

    def transform(self) -> dict[str, Any]:
        """
        Transform the introspection schema to JSON Schema format.

        Returns:
            Dict[str, Any]: JSON Schema representation
        """
        log.info("Starting GraphQL introspection to JSON Schema transformation")

        root_types, named_types = partition_types(self.introspection_schema, self.options)
        log.info(f"Found {len(root_types)} root operation types and {len(named_types)} named types to transform")

        json_schema: dict[str, Any] = {
            "$schema": JSON_SCHEMA_DRAFT_04,
            "properties": self.reduce_types(root_types, is_root=True),
            "definitions": self.reduce_types(named_types, is_root=False),
        }

        log.info(f"Successfully transformed {len(json_schema['definitions'])} definitions")
        return json_schema

    def reduce_types(self, type_defs: Iterable[TypeDefinition], is_root: bool) -> dict[str, dict[str, Any]]:
        """
        Fold a collection of types into a map of JSON Schema definitions.

        Args:
            type_defs: Types to transform
            is_root: Whether the types are Query/Mutation root operation types

        Returns:
            dict[str, dict[str, Any]]: Definitions keyed by type name

        Raises:
            DuplicateTypeNameError: If two types share a name
        """
        builder = DefinitionsBuilder()
        for type_def in type_defs:
            try:
                builder.add(type_def.name, self.transform_type(type_def, is_root))
                log.debug(f"Transformed type: {type_def.name}")
            except (AttributeError, TypeError, KeyError, ValueError) as e:
                log.error(f"Failed to transform type {type_def.name}: {e}")
                raise
        return builder.build()

    def transform_type(self, type_def: TypeDefinition, is_root: bool = False) -> dict[str, Any]:
        """
        Transform a single GraphQL type to a JSON Schema definition.

        Args:
            type_def: The GraphQL type to transform
            is_root: Whether the type is a root operation type

        Returns:
            Dict[str, Any]: JSON Schema definition
        """
        definition: dict[str, Any]
        if isinstance(type_def, ObjectTypeDefinition):
            definition = self.transform_object_type(type_def, is_root)
        elif isinstance(type_def, InputObjectTypeDefinition):
            definition = self.transform_input_object_type(type_def)
        elif isinstance(type_def, EnumTypeDefinition):
            definition = self.transform_enum_type(type_def)
        elif isinstance(type_def, ScalarTypeDefinition):
            definition = self.transform_scalar_type(type_def)
        elif isinstance(type_def, AbstractTypeDefinition):
            log.debug(f"Using generic object for {type_def.kind} type '{type_def.name}'")
            definition = generic_object(type_def.name)
        else:
            assert_never(type_def)

        if type_def.description:
            definition["description"] = type_def.description

        return definition

    def transform_object_type(self, object_type: ObjectTypeDefinition, is_root: bool = False) -> dict[str, Any]:
        """
        Transform a GraphQL object type to JSON Schema.

        Fields of the Query and Mutation types are independent operations, so
        none of them is required even when its return type is NON_NULL.

        Args:
            object_type: The GraphQL object type
            is_root: Whether the type is a root operation type

        Returns:
            Dict[str, Any]: JSON Schema definition
        """
        definition: dict[str, Any] = {
            "type": "object",
            "properties": dict(translate_field(field) for field in object_type.fields),
        }

        required_fields = [] if is_root else required_field_names(object_type.fields)
        if required_fields:
            definition["required"] = required_fields

        return definition

    def transform_input_object_type(self, input_type: InputObjectTypeDefinition) -> dict[str, Any]:
        definition: dict[str, Any] = {
            "type": "object",
            "properties": dict(translate_input_value(field) for field in input_type.input_fields),
        }

        required_fields = required_field_names(input_type.input_fields)
        if required_fields:
            definition["required"] = required_fields

        return definition

    def transform_enum_type(self, enum_type: EnumTypeDefinition) -> dict[str, Any]:
        """
        Transform a GraphQL enum type to JSON Schema.

        Each value becomes its own single-value ``enum`` alternative so that the
        value description survives as ``title`` / ``description``.

        Args:
            enum_type: The GraphQL enum type

        Returns:
            Dict[str, Any]: JSON Schema definition
        """
        alternatives = []
        for value in enum_type.enum_values:
            alternative: dict[str, Any] = {"enum": [value.name], "title": value.description or value.name}
            if value.description:
                alternative["description"] = value.description
            alternatives.append(alternative)

        return {"type": "string", "anyOf": alternatives}

    def transform_scalar_type(self, scalar_type: ScalarTypeDefinition) -> dict[str, Any]:
        if is_builtin_scalar_type(scalar_type.name):
            return {"type": GRAPHQL_SCALAR_TO_JSON_SCHEMA[scalar_type.name], "title": scalar_type.name}
        return generic_object(scalar_type.name)
