"""scriptblocks CLI commands."""

from __future__ import annotations

from scriptblocks.cli.commands.export import export_command
from scriptblocks.cli.commands.outline import characters_command, scenes_command
from scriptblocks.cli.commands.parse import parse_command
from scriptblocks.cli.commands.serialize import serialize_command
from scriptblocks.cli.commands.stats import stats_command
from scriptblocks.cli.commands.validate import validate_command

__all__ = [
    "characters_command",
    "export_command",
    "parse_command",
    "scenes_command",
    "serialize_command",
    "stats_command",
    "validate_command",
]
