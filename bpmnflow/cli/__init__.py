"""Command line interface for bpmnflow."""

from bpmnflow.cli.main import app, main

__all__ = ["app", "main"]
