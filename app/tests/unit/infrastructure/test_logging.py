"""Unit tests for logging infrastructure.

Tests cover:
- Test environment suppression
- Production vs development rendering flags
- Module logger context binding
"""

import logging
import sys
from unittest.mock import patch

import pytest

from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.logging.setup import _is_test_environment


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        """_is_test_environment returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True

    def test_is_test_environment_without_pytest(self):
        """_is_test_environment returns False when pytest is not loaded."""
        with patch.dict(sys.modules):
            del sys.modules["pytest"]
            assert _is_test_environment() is False

    def test_configure_logging_returns_bound_logger(self):
        """configure_logging returns a logger instance."""
        logger = configure_logging()
        assert hasattr(logger, "bind")

    def test_configure_logging_in_test_environment(self):
        """configure_logging suppresses logs in test environment."""
        configure_logging()
        assert logging.root.level == logging.CRITICAL + 1

    def test_configure_logging_with_overrides(self):
        """configure_logging accepts log level and production overrides."""
        assert configure_logging(log_level="DEBUG") is not None
        assert configure_logging(is_production=True) is not None
        assert configure_logging(is_production=False) is not None


@pytest.mark.unit
class TestLoggerUsage:
    """Tests for logger usage patterns."""

    def test_get_module_logger_binds_component(self):
        """get_module_logger() binds the calling module's name."""
        logger = get_module_logger()
        context = logger._context  # pylint: disable=protected-access
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_get_module_logger_with_none_frame(self):
        """get_module_logger handles None frame gracefully."""
        with patch("inspect.currentframe", return_value=None):
            assert get_module_logger() is not None

    def test_logger_accepts_structured_context(self):
        """Logging with keyword context does not raise."""
        logger = get_module_logger()
        logger.error("translation_failed", key="hello", errors=["Unknown external: name"])
        try:
            raise ValueError("Test error")
        except ValueError:
            logger.exception("test_error")
