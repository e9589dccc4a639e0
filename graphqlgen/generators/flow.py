"""Flow generators: resolver type declarations and resolver scaffolds.

Flow has no namespaces, so per-type declarations are prefixed with the type
name instead: ``User_defaultResolvers``, ``User_Id_Resolver``,
``User_Resolvers``.
"""

from ..core.formatting import FormatOptions, format_code
from ..core.ir import (
    OBJECT,
    SCALAR,
    CodeFileLike,
    GenerateArgs,
    GraphQLType,
    GraphQLTypeField,
    GraphQLTypeObject,
)
from .common import (
    GENERATED_HEADER,
    delegates_to_parent,
    parent_type_name,
    resolve_model_imports,
    safe_comment,
    upper_first,
)
from .scaffolder import ResolverScaffolder

FLOW_SCALARS = {
    "String": "string",
    "ID": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}

ROOT_PARENT = "void"


class FlowGenerator:
    """Generates the Flow resolver types file from IR."""

    def __init__(self, args: GenerateArgs):
        self.args = args
        self.model_imports, self.local_names = resolve_model_imports(args)

    def render_type(self, type_obj: GraphQLTypeObject, for_resolver: bool = False) -> str:
        """Render a field type using Flow's ``?T`` maybe types."""
        if type_obj.kind == SCALAR:
            base = FLOW_SCALARS.get(type_obj.name, "any")
        elif for_resolver and type_obj.kind == OBJECT and type_obj.name in self.local_names:
            base = self.local_names[type_obj.name]
        else:
            base = type_obj.name

        if type_obj.is_array:
            item = base if type_obj.is_array_item_required else f"?{base}"
            base = f"Array<{item}>"
        return base if type_obj.is_required else f"?{base}"

    def generate(self) -> str:
        lines = ["/* @flow */", f"// {GENERATED_HEADER}", ""]
        lines.append("import type { GraphQLResolveInfo } from 'graphql'")
        lines.append(f"import type {{ Context }} from '{self.args.context_path}'")
        for model_import in self.model_imports:
            lines.append(
                f"import type {{ {', '.join(model_import.specifiers)} }} from '{model_import.path}'"
            )
        lines.append("")

        local_models = [n for m in self.model_imports for n in m.local_names]
        if local_models:
            lines.append(f"export type {{ {', '.join(local_models)} }}")
            lines.append("")

        for enum in self.args.enums:
            lines.extend(self._doc(enum.description))
            values = " | ".join(f"'{v}'" for v in enum.values) or "empty"
            lines.append(f"export type {enum.name} = {values}")
            lines.append("")

        for union in self.args.unions:
            lines.extend(self._doc(union.description))
            lines.append(f"export type {union.name} = {' | '.join(union.types) or 'empty'}")
            lines.append("")

        for input_type in self.args.inputs:
            lines.extend(self._generate_object_type(input_type.name, input_type.fields, input_type.description, exact=True))

        for graphql_type in self.args.types:
            # Interfaces stay inexact so implementing types remain assignable
            lines.extend(
                self._generate_object_type(
                    graphql_type.name,
                    graphql_type.fields,
                    graphql_type.description,
                    exact=not graphql_type.is_interface,
                )
            )

        object_types = self.args.object_types
        for graphql_type in object_types:
            lines.extend(self._generate_resolver_types(graphql_type))

        lines.append("export type Resolvers = {|")
        for graphql_type in object_types:
            lines.append(f"  {graphql_type.name}: {graphql_type.name}_Resolvers,")
        lines.append("|}")
        lines.append("")
        return "\n".join(lines)

    @staticmethod
    def _doc(description: str | None, indent: str = "") -> list[str]:
        comment = safe_comment(description)
        return [f"{indent}/** {comment} */"] if comment else []

    def _generate_object_type(
        self,
        name: str,
        fields: list[GraphQLTypeField],
        description: str | None,
        exact: bool,
    ) -> list[str]:
        open_brace, close_brace = ("{|", "|}") if exact else ("{", "}")
        lines = self._doc(description)
        lines.append(f"export type {name} = {open_brace}")
        for graphql_field in fields:
            lines.append(f"  {graphql_field.name}: {self.render_type(graphql_field.type)},")
        lines.append(close_brace)
        lines.append("")
        return lines

    def _generate_resolver_types(self, graphql_type: GraphQLType) -> list[str]:
        name = graphql_type.name
        parent = parent_type_name(graphql_type, self.local_names, ROOT_PARENT)

        lines = [f"// Resolvers for {name}", f"export const {name}_defaultResolvers = {{"]
        if parent != ROOT_PARENT:
            for graphql_field in graphql_type.fields:
                if delegates_to_parent(graphql_field):
                    lines.append(
                        f"  {graphql_field.name}: (parent: {parent}) => parent.{graphql_field.name},"
                    )
        lines.append("}")
        lines.append("")

        for graphql_field in graphql_type.fields:
            if not graphql_field.arguments:
                continue
            lines.append(f"export type {name}_{upper_first(graphql_field.name)}_Args = {{|")
            for arg in graphql_field.arguments:
                optional = "" if arg.type.is_required else "?"
                lines.append(f"  {arg.name}{optional}: {self.render_type(arg.type)},")
            lines.append("|}")
            lines.append("")

        for graphql_field in graphql_type.fields:
            field_name = upper_first(graphql_field.name)
            args_type = f"{name}_{field_name}_Args" if graphql_field.arguments else "{||}"
            result = self.render_type(graphql_field.type, for_resolver=True)
            lines.append(
                f"export type {name}_{field_name}_Resolver = ("
                f"parent: {parent}, args: {args_type}, ctx: Context, info: GraphQLResolveInfo"
                f") => {result} | Promise<{result}>"
            )
        lines.append("")

        lines.append(f"export type {name}_Resolvers = {{|")
        for graphql_field in graphql_type.fields:
            lines.append(
                f"  {graphql_field.name}: {name}_{upper_first(graphql_field.name)}_Resolver,"
            )
        lines.append("|}")
        lines.append("")
        return lines


def generate(args: GenerateArgs) -> str:
    """Generate the Flow types file."""
    return FlowGenerator(args).generate()


def scaffold(args: GenerateArgs) -> list[CodeFileLike]:
    """Generate Flow resolver scaffolds."""
    return ResolverScaffolder(args, "flow", ".js").generate()


def format(code: str, options: FormatOptions | None = None) -> str:
    """Format generated Flow."""
    return format_code(code, options)
