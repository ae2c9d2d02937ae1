"""Shared test fixtures for verbosity_flag test suite."""

import io
import logging
import sys

import pytest
from loguru import logger


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: runs the demo scripts in a subprocess")


# ---------------------------------------------------------------------------
# Backend state fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def restore_root_logger():
    """Drop handlers added to the root logger and restore its level.

    configure_logging() uses basicConfig(force=True), which also removes
    pytest's capture handlers; pytest detaches those itself afterwards.
    """
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)


@pytest.fixture
def loguru_messages():
    """Collect formatted loguru messages; handlers are reset afterwards."""
    messages = []
    yield messages
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def stream():
    """A StringIO buffer for capturing stdlib logging output."""
    return io.StringIO()
