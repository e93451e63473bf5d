"""
CLI Context for bpmnflow.

Provides centralized workflow reading and context management for all CLI commands.
"""

from dataclasses import dataclass, field
from pathlib import Path

import typer
from rich.console import Console

from bpmnflow.cli.utils.printer import CliPrinter
from bpmnflow.common.exceptions import BpmnFlowError, ConfigurationError
from bpmnflow.config import OutputFormat, ReaderConfig
from bpmnflow.models import Workflow
from bpmnflow.reader import Bpmn2Reader


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    This context is created once by the app callback and passed to all
    commands via Typer's context injection.

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output
        config: Reader configuration (schema path, default output format)
        config_error: Why the environment configuration was rejected, reported
            only by commands that need the configured schema
        printer: CLI printer for formatted output
    """

    console: Console
    verbose: bool = False
    config: ReaderConfig | None = None
    config_error: ConfigurationError | None = None
    printer: CliPrinter = field(init=False)

    def __post_init__(self):
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)

    @property
    def output_format(self) -> OutputFormat:
        """Default output format, taken from the environment."""
        if self.config is not None:
            return self.config.output_format
        return ReaderConfig.output_format_from_env()

    def print_verbose(self, message: str, **kwargs) -> None:
        if self.verbose:
            self.console.print(message, **kwargs)

    def create_reader_or_exit(self, schema: Path | None = None) -> Bpmn2Reader:
        """
        Create a reader for an explicit schema or the configured one.

        Raises:
            typer.Exit: If no schema is given and the configuration is invalid
        """
        if schema is not None:
            return Bpmn2Reader(schema)
        if self.config_error is not None:
            self.printer.print_error(str(self.config_error))
            raise typer.Exit(code=1) from self.config_error
        if self.config is not None:
            return Bpmn2Reader.from_config(self.config)
        return Bpmn2Reader()

    def read_workflow_or_exit(self, source: Path, schema: Path | None = None) -> Workflow:
        """
        Read a workflow and exit on failure.

        Args:
            source: BPMN2 file to read
            schema: Optional schema overriding the configured one

        Returns:
            Workflow instance (only if successful; otherwise exits)

        Raises:
            typer.Exit: If reading fails
        """
        reader = self.create_reader_or_exit(schema)
        self.printer.show_progress(f"Reading workflow from {source}")
        try:
            workflow = reader.read(source)
        except BpmnFlowError as e:
            self.printer.print_read_error(e)
            raise typer.Exit(code=1) from e

        self.print_verbose("[green]✓ Workflow read successfully[/green]")
        return workflow
