"""bpmnflow CLI - Typer-based command line interface."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from bpmnflow.cli.utils import CLIContext
from bpmnflow.common.exceptions import ConfigurationError
from bpmnflow.config import OutputFormat, ReaderConfig
from bpmnflow.constants import ENVIRONMENT_VARIABLE_DOCS
from bpmnflow.export import save_workflow, workflow_to_json, workflow_to_yaml

# Create main app and console
app = typer.Typer(
    name="bpmnflow",
    help="bpmnflow: read BPMN2 process definitions into workflow graphs",
    no_args_is_help=True,
    epilog=ENVIRONMENT_VARIABLE_DOCS,
)
console = Console()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """
    bpmnflow CLI callback - sets up context for all commands.

    Configures logging and stores a CLIContext in ctx.obj so commands share
    the console, verbosity and reader configuration.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # reported later, and only by commands that fall back to the configured schema
    config, config_error = None, None
    try:
        config = ReaderConfig.from_env()
    except ConfigurationError as e:
        config_error = e

    ctx.obj = CLIContext(
        console=console, verbose=verbose, config=config, config_error=config_error
    )


@app.command(name="read")
def read_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="BPMN2 file to read")],
    schema: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="XML schema used for validation"),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format (text, json, yaml)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write JSON/YAML export to this file"),
    ] = None,
):
    """
    Read a BPMN2 document and show the resulting workflow.

    Example:
        bpmnflow read order.bpmn --format yaml
    """
    cli: CLIContext = ctx.obj
    workflow = cli.read_workflow_or_exit(source, schema)

    if output is not None:
        try:
            save_workflow(workflow, output)
        except ConfigurationError as e:
            cli.printer.print_error(str(e))
            raise typer.Exit(code=1) from e
        cli.printer.show_success(f"Workflow '{workflow.id}' written to {output}")
        return

    output_format = output_format or cli.output_format
    if output_format is OutputFormat.JSON:
        console.print_json(workflow_to_json(workflow))
    elif output_format is OutputFormat.YAML:
        typer.echo(workflow_to_yaml(workflow), nl=False)
    else:
        cli.printer.print_workflow(workflow, str(source))


@app.command(name="validate")
def validate_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="BPMN2 file to validate")],
    schema: Annotated[
        Path | None,
        typer.Option("--schema", "-s", help="XML schema used for validation"),
    ] = None,
):
    """
    Check that a BPMN2 document reads into a valid workflow.

    Example:
        bpmnflow validate order.bpmn
    """
    cli: CLIContext = ctx.obj
    workflow = cli.read_workflow_or_exit(source, schema)
    cli.printer.show_success(
        f"{source} is valid: workflow '{workflow.id}' with "
        f"{len(workflow.flow_nodes)} flow nodes and "
        f"{len(workflow.sequence_flows)} sequence flows"
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
