"""Workflow assembly for bpmnflow."""

from .builder import WorkflowBuilder

__all__ = ["WorkflowBuilder"]
