"""Main CLI entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptblocks import __version__
from scriptblocks.cli.commands import (
    characters_command,
    export_command,
    parse_command,
    scenes_command,
    serialize_command,
    stats_command,
    validate_command,
)
from scriptblocks.cli.formatters import JsonFormatter
from scriptblocks.cli.utils import handle_cli_error
from scriptblocks.config import (
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptblocks",
    help="Convert screenplay text to typed blocks and back",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.command(name="parse")(parse_command)
app.command(name="serialize")(serialize_command)
app.command(name="stats")(stats_command)
app.command(name="export")(export_command)
app.command(name="scenes")(scenes_command)
app.command(name="characters")(characters_command)
app.command(name="validate")(validate_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scriptblocks version."""
    if json_output:
        print(JsonFormatter().format({"name": "scriptblocks", "version": __version__}))
    else:
        console.print(f"scriptblocks v{__version__}", highlight=False)


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="SCRIPTBLOCKS_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options and logging."""
    overrides: dict[str, object] = {}
    if debug:
        overrides = {"log_level": "DEBUG", "debug": True}
    elif verbose:
        overrides = {"log_level": "INFO"}

    try:
        settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)
    except Exception as e:
        handle_cli_error(e, verbose=verbose or debug)
    else:
        set_settings(settings)
        configure_logging(settings)
        logger.debug("Settings loaded", config=str(config) if config else None)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
