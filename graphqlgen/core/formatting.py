"""Formatting of generated TypeScript and Flow code.

Format options are looked up once per run from a prettier configuration file
and passed explicitly to every formatter call.
"""

import os
import re

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

PRETTIER_CONFIG_FILES = (
    ".prettierrc",
    ".prettierrc.json",
    ".prettierrc.yaml",
    ".prettierrc.yml",
)

_OPENERS = "{(["
_CLOSERS = "})]"
_LEADING_CLOSERS = re.compile(r"^(?:\|?[}\])])+")


class FormatOptions(BaseModel):
    """Indentation settings applied by format_code.

    Validated from prettier keys (``tabWidth``, ``useTabs``); other prettier
    options are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    tab_width: int = Field(default=2, alias="tabWidth", ge=0)
    use_tabs: bool = Field(default=False, alias="useTabs")

    @property
    def indent(self) -> str:
        return "\t" if self.use_tabs else " " * self.tab_width


def resolve_format_options(cwd: str | None = None) -> FormatOptions | None:
    """Read the first prettier config file found in ``cwd``.

    Both JSON and YAML configs are accepted (YAML is a superset of JSON).
    Returns None when there is no config file.
    """
    cwd = cwd or os.getcwd()
    for file_name in PRETTIER_CONFIG_FILES:
        path = os.path.join(cwd, file_name)
        if not os.path.isfile(path):
            continue
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid prettier configuration {path}: {e}", path) from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid prettier configuration {path}: expected a mapping", path)
        try:
            return FormatOptions.model_validate(data)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigError(f"Invalid prettier configuration {path}: {problems}", path) from e
    return None


def _bracket_delta(line: str) -> int:
    """Net bracket depth change of a line, ignoring strings and comments."""
    delta = 0
    quote = None
    i = 0
    while i < len(line):
        char = line[i]
        if quote:
            if char == "\\":
                i += 1
            elif char == quote:
                quote = None
        elif char in "'\"`":
            quote = char
        elif line.startswith("//", i):
            break
        elif line.startswith("/*", i):
            end = line.find("*/", i + 2)
            if end == -1:
                break
            i = end + 1
        elif char in _OPENERS:
            delta += 1
        elif char in _CLOSERS:
            delta -= 1
        i += 1
    return delta


def _leading_closers(line: str) -> int:
    match = _LEADING_CLOSERS.match(line)
    if not match:
        return 0
    return sum(1 for c in match.group(0) if c in _CLOSERS)


def _opens_block(line: str) -> bool:
    return line.rstrip("|").endswith(tuple(_OPENERS))


def format_code(code: str, options: FormatOptions | None = None) -> str:
    """Re-indent ``code`` by bracket depth and normalize blank lines."""
    options = options or FormatOptions()
    indent = options.indent
    lines: list[str] = []
    depth = 0

    for raw in code.splitlines():
        line = raw.strip()
        if not line:
            # Collapse runs, and no blank line right after an opener
            if lines and lines[-1] and not _opens_block(lines[-1]):
                lines.append("")
            continue
        closers = _leading_closers(line)
        if closers and lines and not lines[-1]:
            lines.pop()
        lines.append(indent * max(depth - closers, 0) + line)
        depth = max(depth + _bracket_delta(line), 0)

    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) + "\n"
