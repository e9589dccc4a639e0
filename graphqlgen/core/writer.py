"""Writes generated code to disk.

The types file is always regenerated. Resolver scaffolds are meant to be
completed by hand, so an existing scaffold is never overwritten unless forced.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass, field

from ..generators.common import INTERFACES_PATH_PLACEHOLDER
from .errors import WriteError
from .ir import CodeFileLike

WRITTEN = "written"
SKIPPED = "skipped"

# Called with (state, path) after each resolver file is handled
Reporter = Callable[[str, str], None]


@dataclass
class WriteReport:
    """Paths written and skipped by write_resolvers, in generator order."""
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def did_skip(self) -> bool:
        return bool(self.skipped)


def _write_file(path: str, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(path, e) from e


def _make_dirs(path: str) -> list[str]:
    """Create ``path`` recursively; return the directories that were created."""
    created = []
    current = os.path.abspath(path)
    while current and not os.path.exists(current):
        created.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise WriteError(path, e) from e
    return created


def write_types(types: str, output_path: str) -> str:
    """Write the types file, replacing any existing one. Returns the path."""
    parent = os.path.dirname(output_path)
    if parent:
        _make_dirs(parent)
    _write_file(output_path, types)
    return output_path


def write_resolvers(
    resolvers: list[CodeFileLike],
    output_dir: str,
    types_path: str,
    force: bool = False,
    report: Reporter | None = None,
) -> WriteReport:
    """Write resolver scaffolds under ``output_dir``.

    A file is skipped when it already exists, or when its directory existed
    before this call and is not ``output_dir`` itself. ``force`` (or the
    file's own force flag) writes regardless.

    Args:
        resolvers: Generated scaffold files
        output_dir: Resolvers output directory from the config
        types_path: Configured types file path, substituted for the placeholder
        force: Overwrite existing files
        report: Optional callback invoked as ``report(state, path)``

    Raises:
        WriteError: If a directory or file cannot be written
    """
    result = WriteReport()
    root = os.path.abspath(output_dir)
    created_dirs = set(_make_dirs(output_dir))

    for f in resolvers:
        write_path = os.path.join(output_dir, f.path)
        parent = os.path.abspath(os.path.dirname(write_path))
        pre_existing_dir = (
            parent != root and parent not in created_dirs and os.path.exists(parent)
        )
        if not (force or f.force) and (os.path.exists(write_path) or pre_existing_dir):
            result.skipped.append(write_path)
            if report:
                report(SKIPPED, write_path)
            continue

        created_dirs.update(_make_dirs(parent))
        _write_file(write_path, f.code.replace(INTERFACES_PATH_PLACEHOLDER, types_path, 1))
        result.written.append(write_path)
        if report:
            report(WRITTEN, write_path)

    return result
