"""
Enums and constants for bpmnflow workflows.

This module defines the enums and namespace constants used by the reader
and the workflow model to avoid magic strings throughout the codebase.
"""

from enum import StrEnum
from typing import Final

BPMN2_MODEL_NS: Final[str] = "http://www.omg.org/spec/BPMN/20100524/MODEL"


class FlowNodeType(StrEnum):
    """Kinds of flow node a workflow can contain."""

    START_EVENT = "startEvent"
    TASK = "task"
    EXCLUSIVE_GATEWAY = "exclusiveGateway"
    END_EVENT = "endEvent"
