"""Table output formatter for CLI."""

from __future__ import annotations

import csv
import io
from typing import Any

from rich.table import Table

from scriptblocks.cli.formatters.base import OutputFormat, OutputFormatter
from scriptblocks.cli.formatters.json_formatter import JsonFormatter


def _column_title(key: str) -> str:
    return key.replace("_", " ").title()


class TableFormatter(OutputFormatter[list[dict[str, Any]]]):
    """Formatter for rows of tabular data."""

    def __init__(self, title: str | None = None, **kwargs: Any) -> None:
        """Initialize formatter.

        Args:
            title: Optional table title
            **kwargs: Passed to OutputFormatter
        """
        super().__init__(**kwargs)
        self.title = title

    def format(
        self, data: list[dict[str, Any]], format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format tabular data.

        Args:
            data: List of dictionaries to format as table
            format_type: Output format type

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return JsonFormatter(self.console).format(data)
        if not data:
            return "No data to display"
        if format_type == OutputFormat.CSV:
            return self._format_csv(data)
        if format_type == OutputFormat.MARKDOWN:
            return self._format_markdown(data)
        return self._format_table(data)

    def _format_table(self, data: list[dict[str, Any]]) -> str:
        columns = list(data[0].keys())
        table = Table(title=self.title, show_header=True, header_style="bold magenta")
        for col in columns:
            table.add_column(_column_title(col))
        for row in data:
            table.add_row(*[_cell(row.get(col)) for col in columns])
        return self.render_to_string(table)

    def _format_csv(self, data: list[dict[str, Any]]) -> str:
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=list(data[0].keys()))
        writer.writeheader()
        writer.writerows(data)
        return output.getvalue()

    def _format_markdown(self, data: list[dict[str, Any]]) -> str:
        columns = list(data[0].keys())
        lines = [
            "| " + " | ".join(_column_title(col) for col in columns) + " |",
            "| " + " | ".join(["---"] * len(columns)) + " |",
        ]
        for row in data:
            cells = (_cell(row.get(col)).replace("\n", " ") for col in columns)
            lines.append("| " + " | ".join(cells) + " |")
        return "\n".join(lines)

    def create_summary_table(self, title: str, data: dict[str, Any]) -> str:
        """Create a two-column summary table from key-value pairs.

        Args:
            title: Table title
            data: Dictionary of key-value pairs

        Returns:
            Rendered table
        """
        table = Table(title=title, show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")
        for key, value in data.items():
            table.add_row(_column_title(key), _cell(value))
        return self.render_to_string(table)


def _cell(value: Any) -> str:
    return "-" if value is None else str(value)
