"""scriptblocks configuration settings.

Values are resolved with this precedence, highest first:

1. CLI flags (``scriptblocks stats draft.txt --words-per-minute 200``)
2. Config files, YAML, TOML or JSON; later files win
   (``scriptblocks --config myconfig.yaml stats draft.txt``)
3. ``SCRIPTBLOCKS_*`` environment variables
4. A ``.env`` file in the working directory
5. Field defaults
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptblocks.exceptions import ConfigurationError, check_config_keys

SUPPORTED_SUFFIXES = (".yml", ".yaml", ".toml", ".json")
# Lookup order for user and project config files
CONFIG_FILE_SUFFIXES = (".yaml", ".json", ".toml")


def read_config_file(config_path: Path) -> dict[str, Any]:
    """Read the raw values of one configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigurationError: For unsupported formats and misspelled keys.
    """
    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    elif suffix == ".toml":
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    elif suffix == ".json":
        data = json.loads(config_path.read_text(encoding="utf-8"))
    else:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix}",
            hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
            details={
                "file": str(config_path),
                "detected_format": suffix,
                "supported_formats": list(SUPPORTED_SUFFIXES),
            },
        )

    check_config_keys(data)
    return data


class ScriptBlocksSettings(BaseSettings):
    """Settings for metrics, Fountain export and logging."""

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTBLOCKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode (adds call sites to log events)",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    # Metrics
    words_per_page: int = Field(
        default=250,
        description="Words that fill one screenplay page",
        ge=1,
    )
    words_per_minute: int = Field(
        default=250,
        description="Words that make up one minute of screen time",
        ge=1,
    )

    # Fountain export
    export_uppercase_characters: bool = Field(
        default=True,
        description="Uppercase character cues when exporting to Fountain",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Any:
        """Expand ``~`` and environment variables in the log file path."""
        if isinstance(v, str):
            v = os.path.expandvars(v)
        if isinstance(v, str | Path):
            return Path(v).expanduser().resolve()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def lower_log_format(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptBlocksSettings:
        """Load settings from one YAML, TOML or JSON file.

        Values missing from the file come from the environment and defaults.
        """
        return cls(**read_config_file(Path(config_path)))

    @classmethod
    def load(
        cls,
        config_files: Iterable[Path] = (),
        overrides: dict[str, Any] | None = None,
    ) -> ScriptBlocksSettings:
        """Merge config files and CLI overrides over the environment.

        Args:
            config_files: Files to read; later files override earlier ones.
            overrides: CLI values; ``None`` entries are ignored.

        Returns:
            Settings with every source applied.
        """
        data: dict[str, Any] = {}
        for config_file in config_files:
            data.update(read_config_file(Path(config_file)))
        data.update(_given(overrides))
        return cls(**data)


def _given(overrides: dict[str, Any] | None) -> dict[str, Any]:
    return {k: v for k, v in (overrides or {}).items() if v is not None}


def find_config_files() -> list[Path]:
    """Return the existing user and project config files, user files first."""
    user_dir = Path.home() / ".config" / "scriptblocks"
    candidates = [user_dir / f"config{suffix}" for suffix in CONFIG_FILE_SUFFIXES]
    candidates += [
        Path.cwd() / f"scriptblocks{suffix}" for suffix in CONFIG_FILE_SUFFIXES
    ]
    return [path for path in candidates if path.is_file()]


_settings: ScriptBlocksSettings | None = None


def get_settings() -> ScriptBlocksSettings:
    """Get the global settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ScriptBlocksSettings.load(find_config_files())
    return _settings


def set_settings(settings: ScriptBlocksSettings) -> None:
    """Replace the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the global settings so the next lookup reloads every source."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptBlocksSettings:
    """Get settings for a CLI command.

    Args:
        config_file: A config file given with ``--config``. It replaces the
            user and project config files.
        cli_overrides: Values from command flags; ``None`` entries are ignored.

    Returns:
        Settings for the command. The global settings are not changed.

    Raises:
        FileNotFoundError: If config_file doesn't exist.
    """
    if config_file is not None:
        return ScriptBlocksSettings.load([config_file], cli_overrides)

    overrides = _given(cli_overrides)
    if not overrides:
        return get_settings()
    return ScriptBlocksSettings(**{**get_settings().model_dump(), **overrides})
