"""Test fixtures for bpmnflow.

- documents: BPMN2 document templates and helpers shared by all test suites
"""

__all__ = ["documents"]
