"""Pytest configuration and fixtures for bpmnflow tests.

This module provides shared fixtures for writing BPMN2 documents into a
temporary directory and reading them back.
"""

import pytest

from bpmnflow.reader import Bpmn2Reader
from tests.fixtures.documents import (
    MINIMAL_PROCESS,
    ORDER_PROCESS,
    write_document,
)


@pytest.fixture
def write_bpmn(tmp_path):
    """Factory writing ``content`` wrapped in definitions to a .bpmn file."""

    def _write(content: str, name: str = "process.bpmn"):
        return write_document(tmp_path, content, name)

    return _write


@pytest.fixture
def minimal_bpmn_file(write_bpmn):
    """Minimal valid document: one lane, S1 -> T1 -> E1."""
    return write_bpmn(MINIMAL_PROCESS, "minimal.bpmn")


@pytest.fixture
def order_bpmn_file(write_bpmn):
    """Document with two lanes, a gateway, a default and a conditional flow."""
    return write_bpmn(ORDER_PROCESS, "order.bpmn")


@pytest.fixture
def reader():
    """Reader using the bundled BPMN2 schema."""
    return Bpmn2Reader()
