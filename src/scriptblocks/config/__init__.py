"""scriptblocks configuration module."""

from __future__ import annotations

from typing import Any

from scriptblocks.config.logging import configure_logging
from scriptblocks.config.logging import get_logger as _get_logger
from scriptblocks.config.settings import (
    ScriptBlocksSettings,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptblocks.config.settings import (
    reset_settings as _reset_settings,
)

__all__ = [
    "ScriptBlocksSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]

_logger_cache: dict[str, Any] = {}


def get_logger(name: str) -> Any:
    """Get a logger instance, cached per name.

    Getting a logger never configures logging. The CLI calls
    ``configure_logging`` once its settings are loaded; library users keep
    whatever logging setup their application already has.

    Args:
        name: Logger name (usually __name__).

    Returns:
        structlog logger (cached after first use).
    """
    if name not in _logger_cache:
        _logger_cache[name] = _get_logger(name)
    return _logger_cache[name]


def reset_settings() -> None:
    """Reset settings and clear logger cache.

    Ensures a clean state for testing or reconfiguration.
    """
    _reset_settings()
    _logger_cache.clear()
