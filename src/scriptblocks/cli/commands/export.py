"""Export a screenplay as Fountain."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptblocks.cli.utils import handle_cli_error, read_script_text
from scriptblocks.config import get_logger, get_settings
from scriptblocks.parser import export_to_fountain, parse

logger = get_logger(__name__)
console = Console(stderr=True)


def export_command(
    file: Annotated[Path, typer.Argument(help="Screenplay text file")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the Fountain file here"),
    ] = None,
    keep_case: Annotated[
        bool,
        typer.Option("--keep-case", help="Don't uppercase character cues"),
    ] = False,
) -> None:
    """Export a screenplay in Fountain format."""
    try:
        uppercase = get_settings().export_uppercase_characters and not keep_case
        fountain = export_to_fountain(
            parse(read_script_text(file)), uppercase_characters=uppercase
        )
        if output:
            output.write_text(fountain, encoding="utf-8")
            logger.info("Exported Fountain file", source=str(file), output=str(output))
            console.print(f"[green]Wrote {output}[/green]", highlight=False)
        else:
            print(fountain, end="")
    except Exception as e:
        handle_cli_error(e)
