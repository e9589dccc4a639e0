"""Loading and validation of graphqlgen.yml.

Example configuration:

    language: typescript
    input:
      schema: ./src/schema.graphql
      models:
        User: ./src/models.ts:UserModel
    output:
      types: ./src/generated/resolvers.ts
      resolvers: ./src/resolvers/

Paths are used as written, relative to the working directory.
"""

import os

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .registry import SUPPORTED_LANGUAGES

DEFAULT_CONFIG_FILE = "graphqlgen.yml"


class InputConfig(BaseModel):
    """The ``input`` section."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    schema_path: str = Field(alias="schema", min_length=1)
    models: dict[str, str] = Field(default_factory=dict)


class OutputConfig(BaseModel):
    """The ``output`` section."""

    model_config = ConfigDict(extra="forbid")

    types: str = Field(min_length=1)
    resolvers: str = Field(min_length=1)


class GraphQLGenDefinition(BaseModel):
    """Validated contents of graphqlgen.yml."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    language: str
    input: InputConfig
    output: OutputConfig

    @field_validator("language")
    @classmethod
    def check_language(cls, value: str) -> str:
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"unsupported language {value!r}, expected one of: {', '.join(SUPPORTED_LANGUAGES)}"
            )
        return value


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        lines.append(f"  {location}: {err['msg']}")
    return "\n".join(lines)


def parse_config(data: object, path: str = DEFAULT_CONFIG_FILE) -> GraphQLGenDefinition:
    """Validate already-loaded YAML data."""
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {path}: expected a mapping at the top level", path)
    try:
        return GraphQLGenDefinition.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {path}:\n{_format_validation_error(e)}", path) from e


def load_config(path: str = DEFAULT_CONFIG_FILE) -> GraphQLGenDefinition:
    """Read and validate the configuration file at ``path``."""
    if not os.path.isfile(path):
        raise ConfigError(f"No {os.path.basename(path)} found at {path}", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path) from e
    except OSError as e:
        raise ConfigError(f"Could not read {path}: {e}", path) from e
    return parse_config(data, path)
