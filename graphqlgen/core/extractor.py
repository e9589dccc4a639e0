"""Extracts the generator IR from a parsed GraphQL document.

Uses the graphql-core syntax tree directly so that declaration order is kept:
generated code must come out in the order the schema declares things.
"""

from graphql import (
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    ExecutableDefinitionNode,
    FragmentDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    TypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    value_from_ast_untyped,
)

from .errors import ExtractionError
from .ir import (
    BUILTIN_SCALARS,
    ENUM,
    INPUT,
    INTERFACE,
    OBJECT,
    SCALAR,
    UNION,
    GraphQLArgument,
    GraphQLEnum,
    GraphQLInputType,
    GraphQLScalar,
    GraphQLType,
    GraphQLTypeField,
    GraphQLTypeObject,
    GraphQLUnion,
    IRSchema,
)

_DEFINITION_KINDS = {
    ObjectTypeDefinitionNode: OBJECT,
    InterfaceTypeDefinitionNode: INTERFACE,
    InputObjectTypeDefinitionNode: INPUT,
    EnumTypeDefinitionNode: ENUM,
    UnionTypeDefinitionNode: UNION,
    ScalarTypeDefinitionNode: SCALAR,
}

_EXTENSION_KINDS = {
    ObjectTypeExtensionNode: OBJECT,
    InterfaceTypeExtensionNode: INTERFACE,
    InputObjectTypeExtensionNode: INPUT,
    EnumTypeExtensionNode: ENUM,
    UnionTypeExtensionNode: UNION,
}


def _description(node) -> str | None:
    return node.description.value if node.description else None


class SchemaExtractor:
    """Reduces a GraphQL document to types, enums, unions, inputs and scalars."""

    def __init__(self, document: DocumentNode):
        self.document = document
        self.ir = IRSchema()
        self._kinds: dict[str, str] = {}
        self._declared: dict[str, object] = {}

    def extract(self) -> IRSchema:
        """Walk the document and return the IR."""
        self._collect_kinds()

        extensions = []
        for definition in self.document.definitions:
            if isinstance(definition, TypeDefinitionNode):
                self._process_definition(definition)
            elif type(definition) in _EXTENSION_KINDS:
                extensions.append(definition)

        # Extensions may precede their base definition in the document
        for extension in extensions:
            self._process_extension(extension)

        return self.ir

    def _collect_kinds(self):
        """Record the kind of every declared name before resolving references."""
        for definition in self.document.definitions:
            if isinstance(definition, ExecutableDefinitionNode):
                raise ExtractionError(
                    "executable definitions are not allowed in a schema",
                    self._executable_label(definition),
                )
            kind = _DEFINITION_KINDS.get(type(definition))
            if kind is None:
                continue
            name = definition.name.value
            if name in self._kinds:
                raise ExtractionError("declared more than once", name)
            self._kinds[name] = kind

    @staticmethod
    def _executable_label(definition) -> str:
        if isinstance(definition, FragmentDefinitionNode):
            return f"fragment {definition.name.value}"
        name = definition.name.value if definition.name else "<anonymous>"
        return f"{definition.operation.value} {name}"

    def _process_definition(self, node: TypeDefinitionNode):
        name = node.name.value
        kind = self._kinds.get(name)
        if kind in (OBJECT, INTERFACE):
            declared = GraphQLType(
                name=name,
                kind=kind,
                fields=self._process_fields(name, node.fields),
                implements=[i.name.value for i in node.interfaces or ()],
                description=_description(node),
            )
            self.ir.types.append(declared)
        elif kind == INPUT:
            declared = GraphQLInputType(
                name=name,
                fields=self._process_fields(name, node.fields),
                description=_description(node),
            )
            self.ir.inputs.append(declared)
        elif kind == ENUM:
            declared = GraphQLEnum(
                name=name,
                values=[v.name.value for v in node.values or ()],
                description=_description(node),
            )
            self.ir.enums.append(declared)
        elif kind == UNION:
            declared = GraphQLUnion(
                name=name,
                types=self._union_members(name, node.types),
                description=_description(node),
            )
            self.ir.unions.append(declared)
        elif kind == SCALAR:
            declared = GraphQLScalar(name=name, description=_description(node))
            self.ir.scalars.append(declared)
        else:
            return
        self._declared[name] = declared

    def _process_extension(self, node):
        name = node.name.value
        declared = self._declared.get(name)
        if declared is None or self._kinds[name] != _EXTENSION_KINDS[type(node)]:
            raise ExtractionError("cannot extend an undeclared type", f"extend {name}")

        if isinstance(declared, (GraphQLType, GraphQLInputType)):
            existing = {f.name for f in declared.fields}
            for field in self._process_fields(name, node.fields):
                if field.name in existing:
                    raise ExtractionError("field declared more than once", f"{name}.{field.name}")
                declared.fields.append(field)
            if isinstance(declared, GraphQLType):
                for interface in node.interfaces or ():
                    if interface.name.value not in declared.implements:
                        declared.implements.append(interface.name.value)
        elif isinstance(declared, GraphQLEnum):
            declared.values.extend(v.name.value for v in node.values or ())
        elif isinstance(declared, GraphQLUnion):
            declared.types.extend(self._union_members(name, node.types))

    def _union_members(self, union_name: str, type_nodes) -> list[str]:
        members = []
        for type_node in type_nodes or ():
            member = type_node.name.value
            if self._kinds.get(member) != OBJECT:
                raise ExtractionError(
                    f"union member {member} is not an object type", union_name
                )
            members.append(member)
        return members

    def _process_fields(self, type_name: str, field_nodes) -> list[GraphQLTypeField]:
        """Process field definitions into GraphQLTypeField list."""
        fields = []
        for node in field_nodes or ():
            declaration = f"{type_name}.{node.name.value}"
            args = []
            # Input fields have no arguments
            for arg_node in getattr(node, "arguments", None) or ():
                args.append(
                    GraphQLArgument(
                        name=arg_node.name.value,
                        type=self._get_type_info(
                            arg_node.type, f"{declaration}({arg_node.name.value})"
                        ),
                        default_value=value_from_ast_untyped(arg_node.default_value)
                        if arg_node.default_value
                        else None,
                    )
                )
            fields.append(
                GraphQLTypeField(
                    name=node.name.value,
                    type=self._get_type_info(node.type, declaration),
                    arguments=args,
                    description=_description(node),
                )
            )
        return fields

    def _get_type_info(self, type_node: TypeNode, declaration: str) -> GraphQLTypeObject:
        """Unwrap NonNull and List wrappers into a GraphQLTypeObject."""
        is_required = False
        is_array = False
        is_array_item_required = False

        # NonNull wrapper means required
        if isinstance(type_node, NonNullTypeNode):
            is_required = True
            type_node = type_node.type

        # List wrapper, with an optional non-null item [Type!]
        if isinstance(type_node, ListTypeNode):
            is_array = True
            type_node = type_node.type
            if isinstance(type_node, NonNullTypeNode):
                is_array_item_required = True
                type_node = type_node.type
            if isinstance(type_node, ListTypeNode):
                raise ExtractionError("nested lists are not supported", declaration)

        name = type_node.name.value
        kind = self._kinds.get(name)
        if kind is None:
            if name not in BUILTIN_SCALARS:
                raise ExtractionError(f"unknown type {name}", declaration)
            kind = SCALAR

        return GraphQLTypeObject(
            name=name,
            kind=kind,
            is_required=is_required,
            is_array=is_array,
            is_array_item_required=is_array_item_required,
        )


def extract_ir(document: DocumentNode) -> IRSchema:
    """Extract the full IR from a parsed document."""
    return SchemaExtractor(document).extract()


def extract_types(document: DocumentNode) -> list[GraphQLType]:
    return extract_ir(document).types


def extract_enums(document: DocumentNode) -> list[GraphQLEnum]:
    return extract_ir(document).enums


def extract_unions(document: DocumentNode) -> list[GraphQLUnion]:
    return extract_ir(document).unions
