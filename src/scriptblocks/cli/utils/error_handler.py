"""Error handling utilities for CLI commands."""

from __future__ import annotations

import traceback

import typer
from rich.console import Console

from scriptblocks.cli.formatters.json_formatter import JsonFormatter
from scriptblocks.config import get_logger
from scriptblocks.exceptions import ScriptBlocksError

logger = get_logger(__name__)
console = Console(stderr=True)


def handle_cli_error(
    error: Exception,
    verbose: bool = False,
    json_output: bool = False,
    exit_code: int = 1,
) -> None:
    """Report an error from a CLI command and exit.

    Args:
        error: The exception that was raised
        verbose: Whether to show detailed error information
        json_output: Print a JSON error response to stdout instead
        exit_code: Exit code to use when exiting

    Raises:
        typer.Exit: Always
    """
    if json_output:
        print(JsonFormatter().format_error_response(error, exit_code))

    if isinstance(error, ScriptBlocksError):
        if not json_output:
            console.print(f"[red]✗ {error.message}[/red]", highlight=False)
            if error.hint:
                console.print(f"[yellow]→ {error.hint}[/yellow]", highlight=False)
            if verbose and error.details:
                console.print("\n[dim]Details:[/dim]")
                for key, value in error.details.items():
                    console.print(f"  [dim]{key}:[/dim] {value}", highlight=False)

        logger.error(
            "scriptblocks error occurred",
            error_type=type(error).__name__,
            message=error.message,
            hint=error.hint,
            details=error.details,
            exit_code=exit_code,
        )

    elif isinstance(error, FileNotFoundError):
        if not json_output:
            console.print(f"[red]✗ File not found: {error}[/red]", highlight=False)
            console.print("[yellow]→ Check that the file path is correct[/yellow]")
        logger.error(
            "File not found",
            error=str(error),
            filename=getattr(error, "filename", None),
            exit_code=exit_code,
        )

    else:
        if not json_output:
            console.print(f"[red]✗ Unexpected error: {error!s}[/red]", highlight=False)
            if verbose:
                console.print("\n[dim]Full traceback:[/dim]")
                console.print(traceback.format_exc(), highlight=False)
            else:
                console.print("[dim]Run with --verbose for full error details[/dim]")
        logger.error(
            "Unexpected error occurred",
            error=str(error),
            error_type=type(error).__name__,
            exit_code=exit_code,
            exc_info=True,
        )

    raise typer.Exit(exit_code)
