"""Write a block document back out as screenplay text."""

from pathlib import Path
from typing import Annotated

import typer

from scriptblocks.cli.utils import handle_cli_error, read_block_document
from scriptblocks.parser import serialize
from scriptblocks.validators import DocumentValidator


def serialize_command(
    file: Annotated[Path, typer.Argument(help="JSON block document")],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the text here instead of stdout"),
    ] = None,
) -> None:
    """Serialize a JSON block document into screenplay text."""
    try:
        document = DocumentValidator().ensure_valid(read_block_document(file))
        text = serialize(document)
        if output:
            output.write_text(text + "\n" if text else "", encoding="utf-8")
        else:
            print(text)
    except Exception as e:
        handle_cli_error(e)
