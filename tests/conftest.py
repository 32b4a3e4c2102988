"""Pytest configuration and fixtures."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
import structlog
from hypothesis import HealthCheck, settings

from scriptblocks.config import reset_settings

# The autouse settings reset is function scoped; it is safe to share across
# generated examples.
settings.register_profile(
    "scriptblocks", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("scriptblocks")

COFFEE_SHOP = """INT. COFFEE SHOP - DAY

JOHN enters the coffee shop.

JOHN
I need a coffee."""

LIVING_ROOM = """INT. LIVING ROOM - NIGHT

MARY sits on the couch reading a book. The room is dimly lit.

MARY
(to herself)
This chapter is fascinating.

The phone RINGS. Mary looks up.

MARY (CONT'D)
Who could that be?

CUT TO:

EXT. PORCH - CONTINUOUS

JOHN (O.S.)
It's me!

> THE END <"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from SCRIPTBLOCKS_* variables and cached settings."""
    for var in [k for k in os.environ if k.startswith("SCRIPTBLOCKS_")]:
        monkeypatch.delenv(var)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def restore_logging():
    """Restore root logging and structlog after tests that configure them."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)
    structlog.reset_defaults()


@pytest.fixture
def coffee_shop_script() -> str:
    """The four-block coffee shop example."""
    return COFFEE_SHOP


@pytest.fixture
def living_room_script() -> str:
    """A scene with every block type the parser emits."""
    return LIVING_ROOM


@pytest.fixture
def script_file(tmp_path: Path) -> Path:
    """Write the living room script to a file."""
    path = tmp_path / "living_room.txt"
    path.write_text(LIVING_ROOM, encoding="utf-8")
    return path
