"""Serialization of Workflow objects to JSON and YAML."""

import json
from io import StringIO
from pathlib import Path

from ruamel.yaml import YAML

from bpmnflow.common.exceptions import ConfigurationError
from bpmnflow.constants import EXPORT_EXTENSIONS, FILE_EXT_JSON
from bpmnflow.models import Workflow


def _yaml() -> YAML:
    yaml = YAML()
    yaml.default_flow_style = False
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def workflow_to_json(workflow: Workflow) -> str:
    return json.dumps(workflow.to_dict(), indent=2)


def workflow_to_yaml(workflow: Workflow) -> str:
    stream = StringIO()
    _yaml().dump(workflow.to_dict(), stream)
    return stream.getvalue()


def save_workflow(workflow: Workflow, file_path: str | Path) -> None:
    """
    Save a Workflow to a JSON or YAML file.

    The format is chosen from the file extension.

    Args:
        workflow: Workflow to save
        file_path: Output file path (.json, .yaml or .yml)

    Raises:
        ConfigurationError: If the extension is not supported
    """
    file_path = Path(file_path)
    suffix = file_path.suffix.lower().lstrip(".")

    if suffix not in EXPORT_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported export format: {file_path.suffix}", config_key="output"
        )

    if suffix == FILE_EXT_JSON:
        content = workflow_to_json(workflow)
    else:
        content = workflow_to_yaml(workflow)

    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)
