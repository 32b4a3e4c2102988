"""Block document formatter for CLI output."""

from __future__ import annotations

from rich.table import Table

from scriptblocks.cli.formatters.base import OutputFormat, OutputFormatter
from scriptblocks.cli.formatters.json_formatter import JsonFormatter
from scriptblocks.cli.formatters.table_formatter import TableFormatter
from scriptblocks.models import ScriptDocument


class BlockFormatter(OutputFormatter[ScriptDocument]):
    """Show the blocks of a document, one row per block."""

    def format(
        self, data: ScriptDocument, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format a block document.

        Args:
            data: The document
            format_type: Output format type

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return JsonFormatter(self.console).format(data)

        if format_type in (OutputFormat.CSV, OutputFormat.MARKDOWN):
            rows = [
                {"index": i, "type": b.type.value, "id": b.id, "text": b.text}
                for i, b in enumerate(data.blocks, start=1)
            ]
            return TableFormatter(console=self.console).format(rows, format_type)

        if not data.blocks:
            return "No blocks"

        table = Table(show_header=True, header_style="bold magenta", show_lines=True)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Text", overflow="fold")
        for index, block in enumerate(data.blocks, start=1):
            table.add_row(str(index), block.type.label, block.text)
        return self.render_to_string(table)
