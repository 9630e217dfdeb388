"""Unit tests for stdlib logging setup."""

import logging

import logfire
import pytest

from inkwell.config import Settings
from inkwell.util.logging import setup_logging


@pytest.fixture
def restore_logging():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    levels = {name: logging.getLogger(name).level for name in ("httpx", "inkwell")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, saved in levels.items():
        logging.getLogger(name).setLevel(saved)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_records_are_forwarded_to_logfire(self, restore_logging):
        """The root logger hands records to Logfire."""
        setup_logging(Settings(environment="test"))

        root = logging.getLogger()
        assert any(isinstance(h, logfire.LogfireLoggingHandler) for h in root.handlers)
        assert logging.getLogger("inkwell").level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_debug_lowers_every_level(self, restore_logging):
        """Debug mode lets library loggers through too."""
        setup_logging(Settings(environment="test", debug=True))

        assert logging.getLogger("inkwell").level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.DEBUG
