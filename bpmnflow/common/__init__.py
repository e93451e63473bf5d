"""Common definitions shared across bpmnflow."""

from .exceptions import (
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

__all__ = [
    "BpmnFlowError",
    "ConfigurationError",
    "GuardError",
    "MalformedDocumentError",
    "MissingIdError",
    "ReaderError",
    "SchemaLoadError",
    "SchemaViolationError",
    "WorkflowBuildError",
]
