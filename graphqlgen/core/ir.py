"""Intermediate Representation (IR) for GraphQL schemas.

This module defines dataclasses that describe the declarations of a GraphQL
schema independently of the graphql-core syntax tree, suitable for code
generation in any target language.
"""

from dataclasses import dataclass, field
from typing import Any

SCALAR = "scalar"
OBJECT = "object"
INTERFACE = "interface"
UNION = "union"
ENUM = "enum"
INPUT = "input"

BUILTIN_SCALARS = ("String", "Int", "Float", "Boolean", "ID")

ROOT_TYPES = ("Query", "Mutation", "Subscription")


@dataclass
class GraphQLTypeObject:
    """A reference from a field or argument to a named type."""
    name: str
    kind: str
    is_required: bool = False
    is_array: bool = False
    is_array_item_required: bool = False

    @property
    def is_scalar(self) -> bool:
        return self.kind == SCALAR

    @property
    def is_enum(self) -> bool:
        return self.kind == ENUM

    @property
    def is_leaf(self) -> bool:
        """True for scalars and enums, whose values need no resolver."""
        return self.is_scalar or self.is_enum


@dataclass
class GraphQLArgument:
    """Represents an argument to a field."""
    name: str
    type: GraphQLTypeObject
    default_value: Any = None


@dataclass
class GraphQLTypeField:
    """Represents a field of an object, interface or input type."""
    name: str
    type: GraphQLTypeObject
    arguments: list[GraphQLArgument] = field(default_factory=list)
    description: str | None = None


@dataclass
class GraphQLType:
    """Represents a GraphQL object or interface type."""
    name: str
    kind: str  # 'object' or 'interface'
    fields: list[GraphQLTypeField]
    implements: list[str] = field(default_factory=list)
    description: str | None = None

    @property
    def is_interface(self) -> bool:
        return self.kind == INTERFACE

    @property
    def is_root(self) -> bool:
        return self.name in ROOT_TYPES


@dataclass
class GraphQLInputType:
    """Represents a GraphQL input object type."""
    name: str
    fields: list[GraphQLTypeField]
    description: str | None = None


@dataclass
class GraphQLEnum:
    """Represents a GraphQL enum type."""
    name: str
    values: list[str]
    description: str | None = None


@dataclass
class GraphQLUnion:
    """Represents a GraphQL union; ``types`` holds the member type names."""
    name: str
    types: list[str]
    description: str | None = None


@dataclass
class GraphQLScalar:
    """Represents a custom GraphQL scalar."""
    name: str
    description: str | None = None


@dataclass
class IRSchema:
    """Complete intermediate representation of a GraphQL schema.

    Every collection keeps schema declaration order.
    """
    types: list[GraphQLType] = field(default_factory=list)
    enums: list[GraphQLEnum] = field(default_factory=list)
    unions: list[GraphQLUnion] = field(default_factory=list)
    inputs: list[GraphQLInputType] = field(default_factory=list)
    scalars: list[GraphQLScalar] = field(default_factory=list)


@dataclass(frozen=True)
class ModelBinding:
    """Where the implementation (model) type backing a schema type lives."""
    absolute_file_path: str
    import_path_relative_to_output: str
    model_type_name: str


ModelMap = dict[str, ModelBinding]


@dataclass(frozen=True)
class GenerateArgs:
    """Everything a generator needs; built once per run."""
    types: list[GraphQLType]
    enums: list[GraphQLEnum]
    unions: list[GraphQLUnion]
    context_path: str
    model_map: ModelMap
    inputs: list[GraphQLInputType] = field(default_factory=list)
    scalars: list[GraphQLScalar] = field(default_factory=list)

    @property
    def object_types(self) -> list[GraphQLType]:
        """Object types only; interfaces get no resolvers."""
        return [t for t in self.types if not t.is_interface]


@dataclass(frozen=True)
class CodeFileLike:
    """One generated resolver file, relative to the resolvers directory."""
    path: str
    code: str
    force: bool = False
