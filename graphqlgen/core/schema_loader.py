"""Schema loading with support for ``# import`` comments.

A schema file may pull definitions from other files:

    # import * from "common.graphql"
    # import User, Post from "./blog.graphql"

Imported paths are relative to the importing file. Each file is read and
parsed once; import cycles are allowed.
"""

import os
import re

from graphql import DocumentNode, GraphQLError, Source, Visitor, parse, print_ast, visit

from .errors import SchemaError

IMPORT_PATTERN = re.compile(
    r"""^\s*\#\s*import\s+(?P<names>.+?)\s+from\s+["'](?P<path>[^"']+)["']\s*;?\s*$"""
)


def _definition_name(definition) -> str | None:
    name = getattr(definition, "name", None)
    return name.value if name else None


class _TypeReferenceCollector(Visitor):
    """Collects the names of every type a definition refers to."""

    def __init__(self):
        super().__init__()
        self.names: set[str] = set()

    def enter_named_type(self, node, *_args):
        self.names.add(node.name.value)


def _with_dependencies(document: DocumentNode, names: frozenset) -> set[str]:
    """Expand ``names`` with the types they reference in ``document``, transitively.

    References to types the document does not define are left for other
    imports to supply.
    """
    by_name: dict[str, list] = {}
    for definition in document.definitions:
        by_name.setdefault(_definition_name(definition), []).append(definition)

    selected: set[str] = set()
    pending = list(names)
    while pending:
        name = pending.pop()
        if name in selected or name not in by_name:
            continue
        selected.add(name)
        for definition in by_name[name]:
            collector = _TypeReferenceCollector()
            visit(definition, collector)
            pending.extend(collector.names)
    return selected


class SchemaLoader:
    """Collects the definitions of a schema file and everything it imports."""

    def __init__(self, schema_path: str):
        self.schema_path = schema_path
        self._documents: dict[str, tuple[DocumentNode, list[tuple[frozenset | None, str]]]] = {}
        self._included: set[tuple[str, int]] = set()
        self._visited: set[tuple[str, frozenset | None]] = set()
        self._definitions: list = []

    def load(self) -> DocumentNode:
        """Return one document holding the root file's and imported definitions."""
        root = os.path.normpath(os.path.abspath(self.schema_path))
        if not os.path.isfile(root):
            raise SchemaError(f"The schema file {self.schema_path} does not exist", self.schema_path)
        self._visited.add((root, None))
        self._load(root, None)
        return DocumentNode(definitions=tuple(self._definitions))

    def _read(self, path: str):
        """Parse a file once and return its document and import statements."""
        if path not in self._documents:
            try:
                with open(path, encoding="utf-8") as f:
                    content = f.read()
            except OSError as e:
                raise SchemaError(f"Error occurred while reading schema {path}: {e}", path) from e

            imports = []
            for line in content.splitlines():
                match = IMPORT_PATTERN.match(line)
                if not match:
                    continue
                names = match.group("names").strip()
                selected = (
                    None
                    if names == "*"
                    else frozenset(n.strip() for n in names.split(",") if n.strip())
                )
                imports.append((selected, match.group("path")))

            # A file holding nothing but imports is valid here, not to graphql-core
            if not any(
                line.strip() and not line.strip().startswith("#") for line in content.splitlines()
            ):
                document = DocumentNode(definitions=())
            else:
                try:
                    document = parse(Source(content, path))
                except GraphQLError as e:
                    raise SchemaError(f"Failed to parse schema {path}: {e}", path) from e
            self._documents[path] = (document, imports)
        return self._documents[path]

    def _load(self, path: str, names: frozenset | None):
        document, imports = self._read(path)
        wanted = None if names is None else _with_dependencies(document, names)

        found = set()
        for index, definition in enumerate(document.definitions):
            name = _definition_name(definition)
            if wanted is not None and name not in wanted:
                continue
            found.add(name)
            if (path, index) not in self._included:
                self._included.add((path, index))
                self._definitions.append(definition)

        if names is not None and names - found:
            missing = ", ".join(sorted(names - found))
            raise SchemaError(f"Couldn't find {missing} in {path}", path)

        for selected, import_path in imports:
            target = os.path.normpath(os.path.join(os.path.dirname(path), import_path))
            if not os.path.isfile(target):
                raise SchemaError(
                    f"The schema file {import_path} imported from {path} does not exist", target
                )
            if (target, selected) in self._visited:
                continue
            self._visited.add((target, selected))
            self._load(target, selected)


def load_schema(schema_path: str) -> str:
    """Return the SDL of ``schema_path`` with its imports inlined."""
    return print_ast(SchemaLoader(schema_path).load())


def parse_schema(schema_path: str) -> DocumentNode:
    """Load and parse the schema at ``schema_path``."""
    schema = load_schema(schema_path)
    try:
        return parse(schema)
    except GraphQLError as e:
        raise SchemaError(f"Failed to parse schema: {e}", schema_path) from e
