"""CLI utilities for bpmnflow."""

from bpmnflow.cli.utils.context import CLIContext
from bpmnflow.cli.utils.printer import CliPrinter

__all__ = ["CLIContext", "CliPrinter"]
