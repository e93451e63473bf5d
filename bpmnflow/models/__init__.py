"""
Workflow models and enums for bpmnflow.

Usage:
    from bpmnflow.models import Workflow, FlowNode, FlowNodeType
"""

from .enums import BPMN2_MODEL_NS, FlowNodeType
from .workflow import FlowNode, Role, SequenceFlow, Workflow

__all__ = [
    "BPMN2_MODEL_NS",
    "FlowNodeType",
    "FlowNode",
    "Role",
    "SequenceFlow",
    "Workflow",
]
