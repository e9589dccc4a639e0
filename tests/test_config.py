"""Tests for graphqlgen.yml loading."""

import pytest

from graphqlgen.core.config import GraphQLGenDefinition, load_config, parse_config
from graphqlgen.core.errors import ConfigError

VALID = """\
language: typescript
input:
  schema: ./src/schema.graphql
  models:
    User: ./src/models.ts:UserModel
output:
  types: ./src/generated/resolvers.ts
  resolvers: ./src/resolvers/
"""


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_config(self, tmp_path):
        path = tmp_path / "graphqlgen.yml"
        path.write_text(VALID)
        config = load_config(str(path))
        assert isinstance(config, GraphQLGenDefinition)
        assert config.language == "typescript"
        assert config.input.schema_path == "./src/schema.graphql"
        assert config.input.models == {"User": "./src/models.ts:UserModel"}
        assert config.output.types == "./src/generated/resolvers.ts"
        assert config.output.resolvers == "./src/resolvers/"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="No graphqlgen.yml found"):
            load_config(str(tmp_path / "graphqlgen.yml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "graphqlgen.yml"
        path.write_text("language: [typescript\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(str(path))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "graphqlgen.yml"
        path.write_text("")
        with pytest.raises(ConfigError, match="expected a mapping"):
            load_config(str(path))


class TestParseConfig:
    """Tests for validating loaded data."""

    def _data(self, **overrides):
        data = {
            "language": "flow",
            "input": {"schema": "schema.graphql"},
            "output": {"types": "generated/resolvers.js", "resolvers": "resolvers/"},
        }
        data.update(overrides)
        return data

    def test_models_default_to_empty(self):
        assert parse_config(self._data()).input.models == {}

    def test_unsupported_language(self):
        with pytest.raises(ConfigError, match="unsupported language 'reason'"):
            parse_config(self._data(language="reason"))

    def test_missing_section(self):
        data = self._data()
        del data["output"]
        with pytest.raises(ConfigError, match="output"):
            parse_config(data)

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="generateModels"):
            parse_config(self._data(generateModels=True))

    def test_error_names_the_file(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_config(self._data(language=None), "api/graphqlgen.yml")
        assert exc_info.value.path == "api/graphqlgen.yml"
        assert exc_info.value.message.startswith("Invalid api/graphqlgen.yml:")

    def test_config_is_immutable(self):
        config = parse_config(self._data())
        with pytest.raises(Exception):
            config.language = "typescript"
