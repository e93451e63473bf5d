"""CLI Printer for consistent output formatting."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bpmnflow.common.exceptions import ReaderError, WorkflowBuildError
from bpmnflow.models import Workflow


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose mode.
    """

    def __init__(self, console: Console, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def print_workflow(self, workflow: Workflow, source: str) -> None:
        """Print a human-readable summary of a workflow.

        Args:
            workflow: Workflow to describe
            source: File the workflow was read from
        """
        title = workflow.id if not workflow.name else f"{workflow.id} ({workflow.name})"
        self.console.print(f"[bold]Workflow:[/bold] {escape(title)}")
        self.console.print(f"[dim]Source: {escape(source)}[/dim]")

        if workflow.roles:
            self.console.print(
                "[bold]Roles:[/bold] "
                + escape(", ".join(
                    role.id if not role.name else f"{role.id} ({role.name})"
                    for role in workflow.roles
                ))
            )

        nodes = Table(title="Flow nodes")
        nodes.add_column("Id")
        nodes.add_column("Type")
        nodes.add_column("Name")
        nodes.add_column("Role")
        nodes.add_column("Default flow")
        for node in workflow.flow_nodes:
            nodes.add_row(
                *(
                    escape(cell or "")
                    for cell in (
                        node.id,
                        node.node_type.value,
                        node.name,
                        node.role_id,
                        node.default_flow_id,
                    )
                )
            )
        self.console.print(nodes)

        flows = Table(title="Sequence flows")
        flows.add_column("Id")
        flows.add_column("Source")
        flows.add_column("Target")
        flows.add_column("Name")
        flows.add_column("Condition")
        for flow in workflow.sequence_flows:
            flows.add_row(
                *(
                    escape(cell or "")
                    for cell in (
                        flow.id, flow.source_id, flow.target_id, flow.name, flow.condition
                    )
                )
            )
        self.console.print(flows)

    def print_read_error(self, error: Exception) -> None:
        """Print a read failure with its location when known."""
        if isinstance(error, WorkflowBuildError):
            self.print_error(error.get_error_summary())
            return

        self.print_error(str(error))
        if isinstance(error, ReaderError) and error.line_number:
            location = f"{error.file_path}:{error.line_number}"
            self.console.print(f"  [dim]at {escape(location)}[/dim]")

    def show_progress(self, message: str) -> None:
        if self.verbose:
            self.console.print(f"🔄 {escape(message)}")

    def show_success(self, message: str) -> None:
        self.console.print(f"✅ {escape(message)}")

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]❌ Error:[/red] {escape(message)}")
