"""Common exceptions for bpmnflow.

This module defines all exception types raised while reading BPMN2
documents and building workflows, so callers can tell document-level
failures apart from structural problems detected at build time.
"""

from typing import Any


class BpmnFlowError(Exception):
    """Base exception for all bpmnflow errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.message = message
        self.context = context or {}


class GuardError(BpmnFlowError):
    """Raised when a guarded operation emits a warning."""

    def __init__(
        self,
        message: str,
        category: type[Warning] | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize guard error with the captured warning category."""
        super().__init__(message, context)
        self.category = category


class ReaderError(BpmnFlowError):
    """Raised when a BPMN2 document cannot be translated."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line_number: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize reader error with location details."""
        super().__init__(message, context)
        self.file_path = file_path
        self.line_number = line_number


class MalformedDocumentError(ReaderError):
    """Raised when the input is not well-formed XML."""


class SchemaViolationError(ReaderError):
    """Raised when the input does not conform to the BPMN2 schema."""


class SchemaLoadError(ReaderError):
    """Raised when the XML schema itself cannot be loaded."""


class MissingIdError(ReaderError):
    """Raised when a lane, flow node or sequence flow has no id attribute."""

    def __init__(
        self,
        element_name: str,
        file_path: str,
        line_number: int | None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize missing id error for the offending element."""
        line = f"line {line_number}" if line_number is not None else "unknown line"
        message = (
            f'The id attribute of the "{element_name}" element is not found '
            f'in "{file_path}" on {line}'
        )
        super().__init__(message, file_path, line_number, context)
        self.element_name = element_name


class WorkflowBuildError(BpmnFlowError):
    """
    Raised when the registered entities do not form a valid workflow.

    Collects every problem found during the build so they can be
    reported together.
    """

    def __init__(
        self,
        errors: list[str],
        workflow_id: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """
        Initialize with a list of build errors.

        Args:
            errors: List of build error messages
            workflow_id: Id of the workflow being built, if known
            context: Optional additional context
        """
        self.errors = errors
        self.workflow_id = workflow_id
        self.error_count = len(errors)

        if self.error_count == 1:
            message = f"Workflow build failed with 1 error:\n  • {errors[0]}"
        else:
            error_list = "\n  • ".join(errors)
            message = f"Workflow build failed with {self.error_count} errors:\n  • {error_list}"

        super().__init__(message, context)

    def get_error_summary(self) -> str:
        """Get a formatted summary of all errors."""
        if self.error_count == 1:
            return f"1 build error: {self.errors[0]}"
        return f"{self.error_count} build errors:\n" + "\n".join(
            f"  {i+1}. {error}" for i, error in enumerate(self.errors)
        )


class ConfigurationError(BpmnFlowError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key


__all__ = [
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
