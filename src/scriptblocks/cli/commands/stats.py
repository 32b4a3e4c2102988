"""Show page, word and time estimates for a screenplay."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptblocks.cli.formatters import JsonFormatter, TableFormatter
from scriptblocks.cli.utils import handle_cli_error, read_script_text
from scriptblocks.config import get_settings_for_cli
from scriptblocks.metrics import estimate_metrics
from scriptblocks.parser import parse

console = Console()


def stats_command(
    file: Annotated[Path, typer.Argument(help="Screenplay text file")],
    words_per_page: Annotated[
        int | None,
        typer.Option("--words-per-page", min=1, help="Override words per page"),
    ] = None,
    words_per_minute: Annotated[
        int | None,
        typer.Option("--words-per-minute", min=1, help="Override words per minute"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Estimate page count, word count and screen time."""
    try:
        settings = get_settings_for_cli(
            cli_overrides={
                "words_per_page": words_per_page,
                "words_per_minute": words_per_minute,
            }
        )
        document = parse(read_script_text(file))
        metrics = estimate_metrics(
            document,
            words_per_page=settings.words_per_page,
            words_per_minute=settings.words_per_minute,
        )

        if json_output:
            print(JsonFormatter().format(metrics))
        else:
            summary = metrics.model_dump()
            summary["blocks"] = len(document)
            console.print(
                TableFormatter().create_summary_table(file.name, summary),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
    except Exception as e:
        handle_cli_error(e, json_output=json_output)
