"""Immutable model of a GraphQL introspection result.

Every named type is one variant of the ``TypeDefinition`` union and every type
reference is one variant of the ``TypeRef`` union. Consumers dispatch on the
variant class and close the chain with ``assert_never`` so that a new variant
has to be handled everywhere.
"""

from dataclasses import dataclass, field, replace
from typing import Union

from graphql import TypeKind


@dataclass(frozen=True)
class NamedTypeRef:
    """Leaf of a type reference chain."""

    name: str
    kind: TypeKind | None


@dataclass(frozen=True)
class ListTypeRef:
    of_type: "TypeRef"


@dataclass(frozen=True)
class NonNullTypeRef:
    of_type: "TypeRef"


TypeRef = Union[NamedTypeRef, ListTypeRef, NonNullTypeRef]


@dataclass(frozen=True)
class InputValue:
    """An input object field or a field argument.

    ``default_value`` keeps the raw literal as stored in the introspection result.
    """

    name: str
    type: TypeRef
    description: str | None = None
    default_value: str | None = None


@dataclass(frozen=True)
class Field:
    name: str
    type: TypeRef
    description: str | None = None
    args: tuple[InputValue, ...] = ()


@dataclass(frozen=True)
class EnumValue:
    name: str
    description: str | None = None


@dataclass(frozen=True)
class ObjectTypeDefinition:
    name: str
    description: str | None = None
    fields: tuple[Field, ...] = ()

    kind = TypeKind.OBJECT


@dataclass(frozen=True)
class InputObjectTypeDefinition:
    name: str
    description: str | None = None
    input_fields: tuple[InputValue, ...] = ()

    kind = TypeKind.INPUT_OBJECT


@dataclass(frozen=True)
class EnumTypeDefinition:
    name: str
    description: str | None = None
    enum_values: tuple[EnumValue, ...] = ()

    kind = TypeKind.ENUM


@dataclass(frozen=True)
class ScalarTypeDefinition:
    name: str
    description: str | None = None

    kind = TypeKind.SCALAR


@dataclass(frozen=True)
class AbstractTypeDefinition:
    """Interface, union or any kind without a dedicated JSON Schema mapping."""

    name: str
    kind: TypeKind | None
    description: str | None = None


TypeDefinition = Union[
    ObjectTypeDefinition,
    InputObjectTypeDefinition,
    EnumTypeDefinition,
    ScalarTypeDefinition,
    AbstractTypeDefinition,
]


@dataclass(frozen=True)
class IntrospectionSchema:
    """The ``__schema`` part of an introspection result."""

    types: tuple[TypeDefinition, ...] = field(default_factory=tuple)
    query_type: str | None = None
    mutation_type: str | None = None
    subscription_type: str | None = None


def rename_type(type_def: TypeDefinition, name: str) -> TypeDefinition:
    """Return a copy of ``type_def`` carrying ``name``."""
    return replace(type_def, name=name)
