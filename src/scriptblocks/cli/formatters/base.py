"""Base formatter classes for CLI output."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console, RenderableType

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Supported output formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"
    MARKDOWN = "markdown"


class OutputFormatter(ABC, Generic[T]):
    """Base class for output formatters."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> str:
        """Format data for output.

        Args:
            data: Data to format
            format_type: Output format type

        Returns:
            Formatted string
        """

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TABLE) -> None:
        """Format and print data.

        JSON goes to stdout untouched so it stays machine readable.
        """
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            print(output)
        else:
            self.console.print(output, markup=False, highlight=False, soft_wrap=True)

    @staticmethod
    def render_to_string(renderable: RenderableType) -> str:
        """Render a rich object (such as a Table) to a string."""
        string_io = io.StringIO()
        Console(file=string_io, force_terminal=False, width=120).print(renderable)
        return string_io.getvalue()
