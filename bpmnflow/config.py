# bpmnflow/config.py
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TypedDict

from bpmnflow.common.exceptions import ConfigurationError
from bpmnflow.constants import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SCHEMA_PATH,
    get_output_format,
    get_schema_path,
)


class OutputFormat(StrEnum):
    """Supported workflow output formats"""
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class ReaderConfigDict(TypedDict, total=False):
    """TypedDict for reader configuration dictionary"""
    schema_path: str
    output_format: str


@dataclass(frozen=True)
class ReaderConfig:
    """Configuration for the BPMN2 reader and CLI"""

    schema_path: Path = DEFAULT_SCHEMA_PATH
    output_format: OutputFormat = OutputFormat.TEXT

    def __post_init__(self):
        """Validate configuration after initialization"""
        object.__setattr__(self, "schema_path", Path(self.schema_path))
        if not self.schema_path.is_file():
            raise ConfigurationError(
                f"Schema file not found: {self.schema_path}",
                config_key="schema_path",
            )

    @classmethod
    def default(cls) -> 'ReaderConfig':
        """Configuration using the bundled BPMN2 schema"""
        return cls()

    @classmethod
    def from_env(cls) -> 'ReaderConfig':
        """Create configuration from environment variables using constants module"""
        schema_path = Path(get_schema_path()).expanduser().resolve()
        return cls(schema_path=schema_path, output_format=cls.output_format_from_env())

    @staticmethod
    def output_format_from_env() -> OutputFormat:
        """Output format from the environment, text when unset or unknown"""
        try:
            return OutputFormat(get_output_format())
        except ValueError:
            return OutputFormat.TEXT

    @classmethod
    def from_dict(cls, config_dict: ReaderConfigDict) -> 'ReaderConfig':
        """Create configuration from typed dictionary"""
        schema_path = Path(
            config_dict.get('schema_path', str(DEFAULT_SCHEMA_PATH))
        ).expanduser().resolve()

        format_str = config_dict.get('output_format', DEFAULT_OUTPUT_FORMAT)
        try:
            output_format = OutputFormat(format_str.lower())
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid output_format: {format_str}", config_key="output_format"
            ) from e

        return cls(schema_path=schema_path, output_format=output_format)

    def to_dict(self) -> ReaderConfigDict:
        """Convert configuration to typed dictionary"""
        return {
            'schema_path': str(self.schema_path),
            'output_format': self.output_format.value,
        }
