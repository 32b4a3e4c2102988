"""Parse a screenplay text file into blocks."""

from pathlib import Path
from typing import Annotated

import typer

from scriptblocks.cli.formatters import BlockFormatter, OutputFormat
from scriptblocks.cli.utils import handle_cli_error, read_script_text
from scriptblocks.config import get_logger
from scriptblocks.parser import parse

logger = get_logger(__name__)


def parse_command(
    file: Annotated[Path, typer.Argument(help="Screenplay text file to parse")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the block document as JSON")
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format", case_sensitive=False),
    ] = OutputFormat.TABLE,
) -> None:
    """Parse a screenplay into typed blocks.

    The JSON output is a block document that 'serialize', 'validate' and
    other tools read back.
    """
    if json_output:
        output_format = OutputFormat.JSON

    try:
        document = parse(read_script_text(file))
        logger.info("Parsed script file", file=str(file), blocks=len(document))
        BlockFormatter().print(document, output_format)
    except Exception as e:
        handle_cli_error(e, json_output=output_format == OutputFormat.JSON)
