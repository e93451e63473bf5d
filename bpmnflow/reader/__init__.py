"""
Reader module for bpmnflow - BPMN2 document translation.

This module loads BPMN2 process-definition documents, validates them
against the BPMN2 schema and translates them into Workflow objects.
"""

from .document import DocumentLoader, XMLDiagnosticWarning
from .extractors import (
    extract_end_events,
    extract_exclusive_gateways,
    extract_sequence_flows,
    extract_start_events,
    extract_tasks,
    get_attribute,
    read_process,
    resolve_roles,
)
from .reader import Bpmn2Reader, read_workflow

__all__ = [
    "Bpmn2Reader",
    "DocumentLoader",
    "XMLDiagnosticWarning",
    "read_workflow",
    "get_attribute",
    "read_process",
    "resolve_roles",
    "extract_start_events",
    "extract_tasks",
    "extract_exclusive_gateways",
    "extract_end_events",
    "extract_sequence_flows",
]
