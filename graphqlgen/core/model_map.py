"""Resolves the ``models`` section of graphqlgen.yml into model bindings.

Each entry has the form ``TypeName: path/to/file.ts:ModelTypeName``.
"""

import os
import re
from pathlib import PurePath

from .errors import ModelMapError
from .ir import ModelBinding, ModelMap

MODEL_SEPARATOR = ":"

_SOURCE_EXTENSION = re.compile(r"(\.d)?\.(tsx?|jsx?|mjs)$")


def get_absolute_file_path(model_path: str, cwd: str | None = None) -> str:
    """Resolve a model path against ``cwd`` (default: the working directory)."""
    return os.path.normpath(os.path.join(cwd or os.getcwd(), model_path))


def get_import_path_relative_to_output(absolute_path: str, output_path: str) -> str:
    """Return the import specifier for ``absolute_path`` as seen from ``output_path``.

    ``output_path`` is the generated types file; the path is computed from its
    directory, uses forward slashes, drops the source extension and a trailing
    ``/index``, and always starts with ``.``.
    """
    output_dir = os.path.dirname(os.path.abspath(output_path))
    relative = PurePath(os.path.relpath(absolute_path, output_dir)).as_posix()
    if not relative.startswith("."):
        relative = f"./{relative}"
    relative = _SOURCE_EXTENSION.sub("", relative)
    if relative.endswith("/index"):
        relative = relative[: -len("/index")]
    return relative


def parse_model_entry(type_name: str, value: str) -> tuple[str, str]:
    """Split ``path:TypeName`` into its two parts, failing on anything else."""
    parts = value.split(MODEL_SEPARATOR) if isinstance(value, str) else []
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise ModelMapError(
            f'Invalid model definition for "{type_name}": "{value}". '
            f'Expected the form "path/to/file{MODEL_SEPARATOR}TypeName"',
            type_name,
        )
    return parts[0].strip(), parts[1].strip()


def build_model_map(
    models_config: dict[str, str],
    output_path: str,
    cwd: str | None = None,
) -> ModelMap:
    """Build one ModelBinding per entry of ``models_config``.

    Args:
        models_config: Mapping of schema type name to ``path:TypeName``
        output_path: Path of the generated types file that will import the models
        cwd: Directory model paths are relative to (default: working directory)

    Raises:
        ModelMapError: If an entry is not of the form ``path:TypeName``
    """
    model_map: ModelMap = {}
    absolute_output_path = get_absolute_file_path(output_path, cwd)
    for type_name, value in models_config.items():
        model_path, model_type_name = parse_model_entry(type_name, value)
        absolute_file_path = get_absolute_file_path(model_path, cwd)
        model_map[type_name] = ModelBinding(
            absolute_file_path=absolute_file_path,
            import_path_relative_to_output=get_import_path_relative_to_output(
                absolute_file_path, absolute_output_path
            ),
            model_type_name=model_type_name,
        )
    return model_map


def validate_model_map(model_map: ModelMap, type_names: list[str]) -> None:
    """Fail on model map entries that name no object or interface type."""
    known = set(type_names)
    for type_name in model_map:
        if type_name not in known:
            raise ModelMapError(
                f'Model defined for "{type_name}", but the schema has no such type',
                type_name,
            )
