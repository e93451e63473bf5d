"""Tests for reader configuration and environment handling."""

from pathlib import Path

import pytest

from bpmnflow.common.exceptions import ConfigurationError
from bpmnflow.config import OutputFormat, ReaderConfig
from bpmnflow.constants import (
    DEFAULT_SCHEMA_PATH,
    ENV_OUTPUT_FORMAT,
    ENV_SCHEMA_PATH,
    get_output_format,
    get_schema_path,
)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_SCHEMA_PATH, raising=False)
    monkeypatch.delenv(ENV_OUTPUT_FORMAT, raising=False)
    return monkeypatch


class TestEnvironmentHelpers:
    def test_defaults(self, clean_env):
        assert get_schema_path() == str(DEFAULT_SCHEMA_PATH)
        assert get_output_format() == "text"

    def test_output_format_is_lowercased(self, clean_env):
        clean_env.setenv(ENV_OUTPUT_FORMAT, "JSON")
        assert get_output_format() == "json"

    def test_bundled_schema_exists(self):
        assert DEFAULT_SCHEMA_PATH.is_file()


class TestReaderConfig:
    def test_default(self):
        config = ReaderConfig.default()
        assert config.schema_path == DEFAULT_SCHEMA_PATH
        assert config.output_format is OutputFormat.TEXT

    def test_missing_schema_rejected(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Schema file not found") as exc_info:
            ReaderConfig(schema_path=tmp_path / "absent.xsd")
        assert exc_info.value.config_key == "schema_path"

    def test_from_env_defaults(self, clean_env):
        config = ReaderConfig.from_env()
        assert config.schema_path == DEFAULT_SCHEMA_PATH.resolve()
        assert config.output_format is OutputFormat.TEXT

    def test_from_env_overrides(self, clean_env, tmp_path):
        schema = tmp_path / "custom.xsd"
        schema.write_text("<schema/>")
        clean_env.setenv(ENV_SCHEMA_PATH, str(schema))
        clean_env.setenv(ENV_OUTPUT_FORMAT, "yaml")

        config = ReaderConfig.from_env()

        assert config.schema_path == schema.resolve()
        assert config.output_format is OutputFormat.YAML

    def test_from_env_invalid_format_falls_back(self, clean_env):
        clean_env.setenv(ENV_OUTPUT_FORMAT, "xml")
        assert ReaderConfig.from_env().output_format is OutputFormat.TEXT

    def test_from_env_missing_schema(self, clean_env, tmp_path):
        clean_env.setenv(ENV_SCHEMA_PATH, str(tmp_path / "absent.xsd"))
        with pytest.raises(ConfigurationError):
            ReaderConfig.from_env()

    def test_from_dict(self):
        config = ReaderConfig.from_dict(
            {"schema_path": str(DEFAULT_SCHEMA_PATH), "output_format": "JSON"}
        )
        assert config.output_format is OutputFormat.JSON

    def test_from_dict_invalid_format(self):
        with pytest.raises(ConfigurationError, match="Invalid output_format: csv"):
            ReaderConfig.from_dict({"output_format": "csv"})

    def test_to_dict_round_trip(self):
        config = ReaderConfig.from_dict({"output_format": "yaml"})
        assert ReaderConfig.from_dict(config.to_dict()) == config
        assert config.to_dict()["output_format"] == "yaml"
        assert Path(config.to_dict()["schema_path"]).is_file()

    def test_string_schema_path_is_coerced(self):
        config = ReaderConfig(schema_path=str(DEFAULT_SCHEMA_PATH))
        assert isinstance(config.schema_path, Path)
        assert config.schema_path == DEFAULT_SCHEMA_PATH
        assert config.to_dict()["schema_path"] == str(DEFAULT_SCHEMA_PATH)

    def test_missing_string_schema_path_rejected(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Schema file not found"):
            ReaderConfig(schema_path=str(tmp_path / "absent.xsd"))
