"""Validate a JSON block document."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptblocks.cli.formatters import JsonFormatter
from scriptblocks.cli.utils import handle_cli_error, read_block_document
from scriptblocks.validators import DocumentValidator

console = Console()


def validate_command(
    file: Annotated[Path, typer.Argument(help="JSON block document")],
    repair: Annotated[
        bool,
        typer.Option("--repair", help="Write a copy with duplicate ids replaced"),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Where --repair writes (default: FILE)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Check a block document for duplicate or empty ids.

    Exits with code 1 when the document has errors and --repair is not given.
    """
    try:
        validator = DocumentValidator()
        document = read_block_document(file)
        result = validator.validate(document)

        if repair and not result.is_valid:
            repaired = validator.repair(document)
            target = output or file
            target.write_text(
                JsonFormatter().format(repaired) + "\n", encoding="utf-8"
            )
            if not json_output:
                console.print(f"[green]Repaired ids written to {target}[/green]")

        if json_output:
            print(JsonFormatter().format(result))
        else:
            for error in result.errors:
                console.print(f"[red]✗ {error}[/red]", highlight=False)
            for warning in result.warnings:
                console.print(f"[yellow]! {warning}[/yellow]", highlight=False)
            if result.is_valid:
                console.print(f"[green]✓ {len(document)} blocks, no errors[/green]")
    except Exception as e:
        handle_cli_error(e, json_output=json_output)

    if not result.is_valid and not repair:
        raise typer.Exit(1)
