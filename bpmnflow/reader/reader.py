"""BPMN2 reader that translates a process-definition document into a Workflow."""

import logging
from pathlib import Path

from bpmnflow.common.exceptions import ReaderError
from bpmnflow.config import ReaderConfig
from bpmnflow.constants import DEFAULT_SCHEMA_PATH
from bpmnflow.models import Workflow
from bpmnflow.workflow import WorkflowBuilder

from .document import DocumentLoader
from .extractors import (
    extract_end_events,
    extract_exclusive_gateways,
    extract_sequence_flows,
    extract_start_events,
    extract_tasks,
    read_process,
    resolve_roles,
)

logger = logging.getLogger(__name__)


class Bpmn2Reader:
    """
    Reads BPMN2 documents into immutable Workflow objects.

    Every ``read`` call is self-contained: the document is parsed, validated
    and translated from scratch, and nothing is kept once the call returns.

    Example:
        ```python
        reader = Bpmn2Reader()
        workflow = reader.read("order.bpmn")
        print(workflow.id, [node.id for node in workflow.start_events])
        ```
    """

    def __init__(self, schema: str | Path | None = None):
        """
        Args:
            schema: Path to the XML schema, defaults to the bundled BPMN2 schema
        """
        self.schema_path = Path(schema) if schema is not None else DEFAULT_SCHEMA_PATH

    @classmethod
    def from_config(cls, config: ReaderConfig) -> "Bpmn2Reader":
        return cls(config.schema_path)

    def read(self, file_path: str | Path) -> Workflow:
        """
        Translate a BPMN2 document into a Workflow.

        Args:
            file_path: Path to the BPMN2 XML document

        Returns:
            The built Workflow

        Raises:
            MalformedDocumentError: If the document is not well-formed XML
            SchemaViolationError: If the document does not conform to the schema
            MissingIdError: If a lane, flow node or sequence flow has no id
            WorkflowBuildError: If the extracted entities do not form a valid workflow
        """
        try:
            document = DocumentLoader(self.schema_path).load(file_path)
        except ReaderError as e:
            logger.error(f"Failed to load {file_path}: {e}")
            raise

        builder = WorkflowBuilder()
        workflow_id = read_process(document, builder, file_path)

        node_roles = resolve_roles(document, builder, file_path)
        counts = {
            "startEvent": extract_start_events(document, builder, node_roles, file_path),
            "task": extract_tasks(document, builder, node_roles, file_path),
            "exclusiveGateway": extract_exclusive_gateways(
                document, builder, node_roles, file_path
            ),
            "endEvent": extract_end_events(document, builder, node_roles, file_path),
        }
        counts["sequenceFlow"] = extract_sequence_flows(document, builder, file_path)
        logger.debug(f"Extracted from {file_path}: {counts}")

        workflow = builder.build()
        logger.info(f"Read workflow '{workflow_id}' from {file_path}")
        return workflow


def read_workflow(file_path: str | Path, schema: str | Path | None = None) -> Workflow:
    """
    Read a Workflow from a BPMN2 file.

    This is a convenience function that wraps Bpmn2Reader.

    Args:
        file_path: Path to the BPMN2 document
        schema: Optional path to the XML schema

    Returns:
        The built Workflow
    """
    return Bpmn2Reader(schema).read(file_path)
