"""Output formatters for CLI commands."""

from scriptblocks.cli.formatters.base import OutputFormat, OutputFormatter
from scriptblocks.cli.formatters.block_formatter import BlockFormatter
from scriptblocks.cli.formatters.json_formatter import JsonFormatter
from scriptblocks.cli.formatters.table_formatter import TableFormatter

__all__ = [
    "BlockFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "TableFormatter",
]
