"""Helpers shared by CLI commands."""

from scriptblocks.cli.utils.error_handler import handle_cli_error
from scriptblocks.cli.utils.files import read_block_document, read_script_text

__all__ = ["handle_cli_error", "read_block_document", "read_script_text"]
