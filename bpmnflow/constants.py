"""Constants and default values for bpmnflow configuration.

This module centralizes all configuration constants and environment variable
settings used by the reader and the command line interface.
"""

import os
from pathlib import Path
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "BPMNFLOW_"

ENV_SCHEMA_PATH: Final[str] = f"{ENV_VAR_PREFIX}SCHEMA_PATH"
ENV_OUTPUT_FORMAT: Final[str] = f"{ENV_VAR_PREFIX}OUTPUT_FORMAT"


# =============================================================================
# Default Configuration Values
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schemas"
DEFAULT_SCHEMA_PATH: Final[Path] = SCHEMA_DIR / "BPMN20.xsd"
DEFAULT_OUTPUT_FORMAT: Final[str] = "text"


# =============================================================================
# File Format Constants
# =============================================================================

FILE_EXT_JSON: Final[str] = "json"
FILE_EXT_YAML: Final[str] = "yaml"
FILE_EXT_YML: Final[str] = "yml"

EXPORT_EXTENSIONS: Final[tuple[str, ...]] = (
    FILE_EXT_JSON,
    FILE_EXT_YAML,
    FILE_EXT_YML,
)


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_str(env_var: str, default: str) -> str:
    """
    Get string value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        String value from environment or default
    """
    return os.getenv(env_var, default)


def get_schema_path() -> str:
    """Get schema path from environment or the bundled schema."""
    return get_env_str(ENV_SCHEMA_PATH, str(DEFAULT_SCHEMA_PATH))


def get_output_format() -> str:
    """Get CLI output format from environment or default."""
    return get_env_str(ENV_OUTPUT_FORMAT, DEFAULT_OUTPUT_FORMAT).lower()


# =============================================================================
# Documentation
# =============================================================================

ENVIRONMENT_VARIABLE_DOCS = """
Environment Variables Reference:

  BPMNFLOW_SCHEMA_PATH      - XML schema used to validate BPMN2 documents
                              Default: bundled BPMN20.xsd
  BPMNFLOW_OUTPUT_FORMAT    - CLI output format: text|json|yaml
                              Default: text
"""
