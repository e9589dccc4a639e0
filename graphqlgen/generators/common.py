"""Helpers shared by the TypeScript and Flow generators."""

import re
from dataclasses import dataclass, field

from jinja2 import Environment, PackageLoader, select_autoescape

from ..core.ir import GenerateArgs, GraphQLType, GraphQLTypeField

# Replaced by the writer with the configured types path
INTERFACES_PATH_PLACEHOLDER = "[TEMPLATE-INTERFACES-PATH]"

GENERATED_HEADER = "Code generated by graphqlgen, DO NOT EDIT."

# Names the generated types file declares itself
_RESERVED_NAMES = {"Context", "GraphQLResolveInfo", "Resolvers"}


def upper_first(name: str) -> str:
    """Uppercase the first character only: ``firstName`` -> ``FirstName``."""
    return name[:1].upper() + name[1:]


def safe_comment(text: str | None) -> str:
    """Make a description safe for a single-line ``/** */`` comment."""
    if not text:
        return ""
    text = text.replace("*/", "* /")
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def delegates_to_parent(graphql_field: GraphQLTypeField) -> bool:
    """True when the default resolver ``parent => parent.<field>`` suffices."""
    return graphql_field.type.is_leaf and not graphql_field.arguments


@dataclass
class ModelImport:
    """One import statement for model types, grouped by import path."""
    path: str
    # (exported name, local name)
    names: list[tuple[str, str]] = field(default_factory=list)

    @property
    def specifiers(self) -> list[str]:
        return [name if name == local else f"{name} as {local}" for name, local in self.names]

    @property
    def local_names(self) -> list[str]:
        return [local for _, local in self.names]


def resolve_model_imports(args: GenerateArgs) -> tuple[list[ModelImport], dict[str, str]]:
    """Group model bindings into imports and pick a local name per schema type.

    A model type whose name clashes with a generated declaration is imported
    under an alias with a ``Model`` suffix.
    """
    used = set(_RESERVED_NAMES)
    for collection in (args.types, args.enums, args.unions, args.inputs, args.scalars):
        used.update(declaration.name for declaration in collection)

    imports: dict[str, ModelImport] = {}
    seen: dict[tuple[str, str], str] = {}
    local_names: dict[str, str] = {}
    for type_name, binding in args.model_map.items():
        key = (binding.import_path_relative_to_output, binding.model_type_name)
        if key not in seen:
            local = binding.model_type_name
            while local in used:
                local = f"{local}Model"
            used.add(local)
            seen[key] = local
            model_import = imports.setdefault(key[0], ModelImport(path=key[0]))
            model_import.names.append((binding.model_type_name, local))
        local_names[type_name] = seen[key]
    return list(imports.values()), local_names


def parent_type_name(
    graphql_type: GraphQLType, local_names: dict[str, str], root_parent: str
) -> str:
    """Parent of a type's resolvers: its model, else its generated declaration."""
    if graphql_type.name in local_names:
        return local_names[graphql_type.name]
    if graphql_type.is_root:
        return root_parent
    return graphql_type.name


def create_environment() -> Environment:
    """Jinja2 environment for the resolver scaffold templates."""
    env = Environment(
        loader=PackageLoader("graphqlgen", "templates"),
        autoescape=select_autoescape(),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["upper_first"] = upper_first
    env.filters["safe_comment"] = safe_comment
    return env
