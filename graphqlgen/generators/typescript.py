"""TypeScript generators: resolver type declarations and resolver scaffolds.

Generates a single types file shaped like:

    export interface User {
      id: string
      name: string | null
    }

    export namespace UserResolvers {
      export const defaultResolvers = { ... }
      export type IdResolver = (parent: UserModel, ...) => string | Promise<string>
      export interface Type { id: IdResolver, ... }
    }
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

TS_SCALARS = {
    "String": "string",
    "ID": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}

# Parent of root operation types that have no model
ROOT_PARENT = "undefined"


class TypeScriptGenerator:
    """Generates the TypeScript resolver types file from IR."""

    def __init__(self, args: GenerateArgs):
        self.args = args
        self.model_imports, self.local_names = resolve_model_imports(args)

    def render_type(self, type_obj: GraphQLTypeObject, for_resolver: bool = False) -> str:
        """Render a field type; resolvers return models in place of object types."""
        if type_obj.kind == SCALAR:
            base = TS_SCALARS.get(type_obj.name, "any")
        elif for_resolver and type_obj.kind == OBJECT and type_obj.name in self.local_names:
            base = self.local_names[type_obj.name]
        else:
            base = type_obj.name

        if type_obj.is_array:
            item = base if type_obj.is_array_item_required else f"{base} | null"
            base = f"Array<{item}>"
        return base if type_obj.is_required else f"{base} | null"

    def generate(self) -> str:
        """Generate the complete types file."""
        lines = [f"// {GENERATED_HEADER}", ""]
        lines.extend(self._generate_imports())

        for enum in self.args.enums:
            lines.extend(self._doc(enum.description))
            values = " | ".join(f"'{v}'" for v in enum.values) or "never"
            lines.append(f"export type {enum.name} = {values}")
            lines.append("")

        for union in self.args.unions:
            lines.extend(self._doc(union.description))
            members = " | ".join(union.types) or "never"
            lines.append(f"export type {union.name} = {members}")
            lines.append("")

        for input_type in self.args.inputs:
            lines.extend(self._generate_interface(input_type.name, input_type.fields, input_type.description))

        for graphql_type in self.args.types:
            lines.extend(self._generate_interface(graphql_type.name, graphql_type.fields, graphql_type.description))

        object_types = self.args.object_types
        for graphql_type in object_types:
            lines.extend(self._generate_namespace(graphql_type))

        lines.append("export interface Resolvers {")
        for graphql_type in object_types:
            lines.append(f"  {graphql_type.name}: {graphql_type.name}Resolvers.Type")
        lines.append("}")
        lines.append("")
        return "\n".join(lines)

    def _generate_imports(self) -> list[str]:
        lines = [
            "import { GraphQLResolveInfo } from 'graphql'",
            f"import {{ Context }} from '{self.args.context_path}'",
        ]
        for model_import in self.model_imports:
            lines.append(
                f"import {{ {', '.join(model_import.specifiers)} }} from '{model_import.path}'"
            )
        lines.append("")

        # Re-exported so scaffolds can import models from the types file
        local_models = [n for m in self.model_imports for n in m.local_names]
        if local_models:
            lines.append(f"export type {{ {', '.join(local_models)} }}")
            lines.append("")
        return lines

    @staticmethod
    def _doc(description: str | None, indent: str = "") -> list[str]:
        comment = safe_comment(description)
        return [f"{indent}/** {comment} */"] if comment else []

    def _generate_interface(
        self, name: str, fields: list[GraphQLTypeField], description: str | None
    ) -> list[str]:
        lines = self._doc(description)
        lines.append(f"export interface {name} {{")
        for graphql_field in fields:
            lines.extend(self._doc(graphql_field.description, "  "))
            lines.append(f"  {graphql_field.name}: {self.render_type(graphql_field.type)}")
        lines.append("}")
        lines.append("")
        return lines

    def _generate_namespace(self, graphql_type: GraphQLType) -> list[str]:
        parent = parent_type_name(graphql_type, self.local_names, ROOT_PARENT)
        lines = [f"export namespace {graphql_type.name}Resolvers {{"]

        lines.append("  export const defaultResolvers = {")
        if parent != ROOT_PARENT:
            for graphql_field in graphql_type.fields:
                if delegates_to_parent(graphql_field):
                    lines.append(
                        f"    {graphql_field.name}: (parent: {parent}) => parent.{graphql_field.name},"
                    )
        lines.append("  }")
        lines.append("")

        for graphql_field in graphql_type.fields:
            if not graphql_field.arguments:
                continue
            lines.append(f"  export interface Args{upper_first(graphql_field.name)} {{")
            for arg in graphql_field.arguments:
                optional = "" if arg.type.is_required else "?"
                lines.append(f"    {arg.name}{optional}: {self.render_type(arg.type)}")
            lines.append("  }")
            lines.append("")

        for graphql_field in graphql_type.fields:
            args_type = (
                f"Args{upper_first(graphql_field.name)}" if graphql_field.arguments else "{}"
            )
            result = self.render_type(graphql_field.type, for_resolver=True)
            lines.extend(self._doc(graphql_field.description, "  "))
            lines.append(
                f"  export type {upper_first(graphql_field.name)}Resolver = ("
                f"parent: {parent}, args: {args_type}, ctx: Context, info: GraphQLResolveInfo"
                f") => {result} | Promise<{result}>"
            )
        lines.append("")

        lines.append("  export interface Type {")
        for graphql_field in graphql_type.fields:
            lines.append(f"    {graphql_field.name}: {upper_first(graphql_field.name)}Resolver")
        lines.append("  }")
        lines.append("}")
        lines.append("")
        return lines


def generate(args: GenerateArgs) -> str:
    """Generate the TypeScript types file."""
    return TypeScriptGenerator(args).generate()


def scaffold(args: GenerateArgs) -> list[CodeFileLike]:
    """Generate TypeScript resolver scaffolds."""
    return ResolverScaffolder(args, "typescript", ".ts").generate()


def format(code: str, options: FormatOptions | None = None) -> str:
    """Format generated TypeScript."""
    return format_code(code, options)
