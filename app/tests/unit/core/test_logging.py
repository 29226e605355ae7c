"""Unit tests for core.logging.

Tests cover:
- Test environment suppression
- Production vs development configuration
- Module logger context
"""

import logging
import sys
from unittest.mock import patch

import pytest

from core.logging import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
    module_context,
)


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

    def test_configure_logging_in_test_environment(self):
        """configure_logging suppresses logs in test environment."""
        configure_logging()
        assert logging.root.level == logging.CRITICAL + 1

    def test_configure_logging_outside_tests(self):
        """configure_logging accepts level and production overrides."""
        with patch("core.logging._is_test_environment", return_value=False):
            production = configure_logging(log_level="DEBUG", is_production=True)
            development = configure_logging(log_level="warning", is_production=False)

        assert hasattr(production, "bind")
        assert hasattr(development, "bind")
        # Restore test configuration
        configure_logging()

    def test_get_module_logger(self):
        """get_module_logger returns a bindable logger."""
        logger = get_module_logger()
        assert logger is not None
        assert hasattr(logger, "info")

    def test_configure_logging_unknown_level_falls_back(self):
        """Unknown level names do not raise."""
        with patch("core.logging._is_test_environment", return_value=False):
            configured = configure_logging(log_level="chatty", is_production=True)
        assert hasattr(configured, "bind")
        configure_logging()


@pytest.mark.unit
class TestModuleContext:
    """Tests for module logger context."""

    def test_module_context_fields(self):
        """Package, component and module path are derived from the name."""
        assert module_context("localization.registry") == {
            "package": "localization",
            "component": "registry",
            "module_path": "localization.registry",
        }

    def test_module_context_single_segment(self):
        """A top-level module is both package and component."""
        context = module_context("currency")
        assert context["package"] == context["component"] == "currency"

    def test_get_module_logger_with_name(self):
        """An explicit name binds that module's context."""
        with patch("core.logging.logger") as mock_logger:
            get_module_logger("localization.loader")
        mock_logger.bind.assert_called_once_with(
            package="localization",
            component="loader",
            module_path="localization.loader",
        )

    def test_get_module_logger_uses_caller(self):
        """Without a name the calling module's context is bound."""
        with patch("core.logging.logger") as mock_logger:
            get_module_logger()
        kwargs = mock_logger.bind.call_args.kwargs
        assert kwargs["module_path"] == __name__
        assert kwargs["component"] == __name__.split(".")[-1]
