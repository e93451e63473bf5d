"""
bpmnflow: BPMN2 process definitions as workflow graphs.

bpmnflow reads a BPMN2 XML document, validates it against the BPMN2 schema
and translates its lanes, events, tasks, exclusive gateways and sequence
flows into an immutable Workflow that an execution engine can interpret.

Core Components:
    - Bpmn2Reader: Document loading, validation and translation
    - WorkflowBuilder: Accumulates entities and validates the graph
    - Workflow: Immutable graph of roles, flow nodes and sequence flows
    - strict_warnings: Guard turning XML diagnostics into failures

Example Usage:
    ```python
    from bpmnflow import read_workflow

    workflow = read_workflow("path/to/order.bpmn")
    for node in workflow.flow_nodes:
        print(node.id, node.node_type, node.role_id)
    ```
"""

__version__ = "0.1.0"

from .common.exceptions import (
    BpmnFlowError,
    ConfigurationError,
    GuardError,
    MalformedDocumentError,
    MissingIdError,
    ReaderError,
    SchemaLoadError,
    SchemaViolationError,
    WorkflowBuildError,
)
from .config import OutputFormat, ReaderConfig
from .export import save_workflow, workflow_to_json, workflow_to_yaml
from .guard import run_guarded, strict_warnings
from .models import FlowNode, FlowNodeType, Role, SequenceFlow, Workflow
from .reader import Bpmn2Reader, read_workflow
from .workflow import WorkflowBuilder

__all__ = [
    # Core functionality
    "Bpmn2Reader",
    "read_workflow",
    "WorkflowBuilder",
    "__version__",
    # Models
    "Workflow",
    "Role",
    "FlowNode",
    "FlowNodeType",
    "SequenceFlow",
    # Utilities
    "strict_warnings",
    "run_guarded",
    "ReaderConfig",
    "OutputFormat",
    "save_workflow",
    "workflow_to_json",
    "workflow_to_yaml",
    # Errors
    "BpmnFlowError",
    "GuardError",
    "ReaderError",
    "MalformedDocumentError",
    "SchemaViolationError",
    "SchemaLoadError",
    "MissingIdError",
    "WorkflowBuildError",
    "ConfigurationError",
]
