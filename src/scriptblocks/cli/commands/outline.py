"""Scene and character listings for a screenplay."""

from dataclasses import asdict
from pathlib import Path
from typing import Annotated

import typer

from scriptblocks.analyzers import build_character_roster, build_scene_outline
from scriptblocks.cli.formatters import OutputFormat, TableFormatter
from scriptblocks.cli.utils import handle_cli_error, read_script_text
from scriptblocks.config import get_settings
from scriptblocks.parser import parse

FileArgument = Annotated[Path, typer.Argument(help="Screenplay text file")]
FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format", case_sensitive=False),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


def scenes_command(
    file: FileArgument,
    output_format: FormatOption = OutputFormat.TABLE,
    json_output: JsonOption = False,
) -> None:
    """List the scenes of a screenplay with their length."""
    if json_output:
        output_format = OutputFormat.JSON
    try:
        scenes = build_scene_outline(
            parse(read_script_text(file)),
            words_per_minute=get_settings().words_per_minute,
        )
        rows = [asdict(scene) for scene in scenes]
        if output_format != OutputFormat.JSON:
            for row in rows:
                del row["block_id"]
        TableFormatter(title="Scenes").print(rows, output_format)
    except Exception as e:
        handle_cli_error(e, json_output=output_format == OutputFormat.JSON)


def characters_command(
    file: FileArgument,
    output_format: FormatOption = OutputFormat.TABLE,
    json_output: JsonOption = False,
) -> None:
    """List speaking characters in order of appearance."""
    if json_output:
        output_format = OutputFormat.JSON
    try:
        roster = build_character_roster(parse(read_script_text(file)))
        TableFormatter(title="Characters").print(
            [asdict(character) for character in roster], output_format
        )
    except Exception as e:
        handle_cli_error(e, json_output=output_format == OutputFormat.JSON)
