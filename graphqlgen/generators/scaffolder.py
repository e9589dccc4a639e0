"""Resolver scaffold generation.

Renders one Jinja2 template per object type, plus the context type and the
index that collects every resolver. Templates live under
``graphqlgen/templates/<language>/``.
"""

from typing import Any

from ..core.ir import CodeFileLike, GenerateArgs, GraphQLType
from .common import (
    INTERFACES_PATH_PLACEHOLDER,
    create_environment,
    delegates_to_parent,
    parent_type_name,
    resolve_model_imports,
)


class ResolverScaffolder:
    """Generates hand-completable resolver files for one target language.

    Example:
        files = ResolverScaffolder(args, "typescript", ".ts").generate()
    """

    def __init__(self, args: GenerateArgs, language: str, extension: str):
        self.args = args
        self.language = language
        self.extension = extension
        self.env = create_environment()
        _, self.local_names = resolve_model_imports(args)

    def generate(self) -> list[CodeFileLike]:
        """Return scaffold files in a stable order: types, context, index."""
        object_types = self.args.object_types
        files = [
            self._render(f"{t.name}{self.extension}", "type", self._type_context(t))
            for t in object_types
        ]
        files.append(self._render(f"types/Context{self.extension}", "context", {}))
        files.append(self._render(f"index{self.extension}", "index", {"types": object_types}))
        return files

    def _type_context(self, graphql_type: GraphQLType) -> dict[str, Any]:
        # Root types without a model get no parent annotation
        parent = parent_type_name(graphql_type, self.local_names, root_parent="")
        parent_import = parent
        if parent == graphql_type.name:
            # The scaffold exports a const with the type's own name
            parent = f"{graphql_type.name}Parent"
            parent_import = f"{graphql_type.name} as {parent}"
        return {
            "type": graphql_type,
            "parent": parent,
            "parent_import": parent_import,
            "fields": [
                {"name": f.name, "delegate": delegates_to_parent(f) and bool(parent)}
                for f in graphql_type.fields
            ],
        }

    def _render(self, path: str, template_name: str, context: dict[str, Any]) -> CodeFileLike:
        template = self.env.get_template(f"{self.language}/{template_name}{self.extension}.j2")
        code = template.render(interfaces_path=INTERFACES_PATH_PLACEHOLDER, **context)
        return CodeFileLike(path=path, code=code, force=False)
