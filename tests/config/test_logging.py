"""Tests for the logging configuration module."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from scriptblocks.config import get_logger as get_cached_logger
from scriptblocks.config.logging import configure_logging, get_logger
from scriptblocks.config.settings import ScriptBlocksSettings


class TestConfigureLogging:
    """Test the configure_logging function."""

    def test_default_configuration(self):
        """Test that defaults log warnings and above."""
        configure_logging(ScriptBlocksSettings())

        assert logging.getLogger().level == logging.WARNING
        assert get_logger("test") is not None

    @pytest.mark.parametrize(
        ("level_str", "level_const"),
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_log_levels(self, level_str, level_const):
        """Test each configurable level."""
        configure_logging(ScriptBlocksSettings(log_level=level_str))

        assert logging.getLogger().level == level_const

    def test_invalid_level(self):
        """Test that a level bypassing validation is still rejected."""
        settings = ScriptBlocksSettings.model_construct(
            log_level="CHATTY", log_format="console", log_file=None, debug=False
        )

        with pytest.raises(ValueError, match="Invalid log level 'CHATTY'"):
            configure_logging(settings)

    def test_file_handler(self, tmp_path):
        """Test that a rotating file handler is added for log_file."""
        log_file = tmp_path / "logs" / "scriptblocks.log"

        configure_logging(ScriptBlocksSettings(log_file=log_file, log_level="INFO"))

        handlers = logging.getLogger().handlers
        assert log_file.parent.exists()
        assert any(isinstance(h, RotatingFileHandler) for h in handlers)

    def test_json_output_to_file(self, tmp_path):
        """Test that JSON format writes one JSON object per line."""
        log_file = tmp_path / "scriptblocks.log"
        configure_logging(
            ScriptBlocksSettings(log_file=log_file, log_level="INFO", log_format="json")
        )

        get_logger("scriptblocks.test").info("Parsed document", blocks=4)
        for handler in logging.getLogger().handlers:
            handler.flush()

        last_line = log_file.read_text().strip().splitlines()[-1]
        assert isinstance(json.loads(last_line), dict)
        assert "Parsed document" in last_line
        assert "blocks" in last_line

    def test_level_filters_events(self, caplog):
        """Test that events below the configured level are dropped."""
        configure_logging(ScriptBlocksSettings(log_level="ERROR"))
        # basicConfig(force=True) drops the capture handler
        logging.getLogger().addHandler(caplog.handler)

        with caplog.at_level(logging.ERROR):
            get_logger("scriptblocks.test").info("hidden")
            get_logger("scriptblocks.test").error("shown")

        messages = " ".join(record.getMessage() for record in caplog.records)
        assert "shown" in messages
        assert "hidden" not in messages


class TestCachedLogger:
    """The package-level logger accessor."""

    def test_logger_cached_per_name(self):
        """Test that repeated lookups return the same logger."""
        first = get_cached_logger("scriptblocks.parser")

        assert get_cached_logger("scriptblocks.parser") is first
        assert get_cached_logger("scriptblocks.metrics") is not first

    def test_lookup_does_not_configure(self):
        """Test that getting a logger leaves root handlers and structlog alone."""
        root_logger = logging.getLogger()
        handlers_before = root_logger.handlers.copy()
        level_before = root_logger.level

        get_cached_logger("scriptblocks.validators")

        assert root_logger.handlers == handlers_before
        assert root_logger.level == level_before
        assert not structlog.is_configured()

    def test_unconfigured_events_reach_stdlib(self, caplog):
        """Test that events go through the host's stdlib logging setup."""
        with caplog.at_level(logging.INFO, logger="scriptblocks.host"):
            get_cached_logger("scriptblocks.host").info("Repaired block ids")

        assert any(
            record.name == "scriptblocks.host"
            and "Repaired block ids" in record.getMessage()
            for record in caplog.records
        )
