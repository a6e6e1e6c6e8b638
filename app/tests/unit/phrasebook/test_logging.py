"""Unit tests for logging infrastructure.

Tests cover:
- Test environment suppression
- Configuration guard and renderer selection
- Module logger context
"""

import sys
from unittest.mock import patch

import pytest
import structlog
from structlog.testing import capture_logs

from phrasebook.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.fixture
def restore_logging():
    """Put the test logging configuration back after a test."""
    yield
    configure_logging(force=True)


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

    def test_existing_configuration_is_kept(self):
        """configure_logging leaves an existing configuration alone."""
        assert structlog.is_configured() is True
        assert configure_logging(log_level="DEBUG") is False

    def test_force_reconfigures(self, restore_logging):
        """configure_logging(force=True) applies the configuration."""
        assert configure_logging(force=True) is True
        assert structlog.is_configured() is True

    @pytest.mark.parametrize(
        "is_production, renderer",
        [
            (True, structlog.processors.JSONRenderer),
            (False, structlog.dev.ConsoleRenderer),
        ],
    )
    def test_renderer_selection(self, restore_logging, is_production, renderer):
        """Production logs render as JSON, development logs for the console."""
        with patch(
            "phrasebook.logging.setup._is_test_environment", return_value=False
        ):
            configure_logging(is_production=is_production, force=True)
        assert isinstance(structlog.get_config()["processors"][-1], renderer)


@pytest.mark.unit
class TestModuleLogger:
    """Tests for get_module_logger."""

    def test_binds_component_and_module_path(self):
        """Events carry the calling module's component and path."""
        logger = get_module_logger()
        with capture_logs() as captured:
            logger.info("module_event", key="Hello")

        assert captured == [
            {
                "event": "module_event",
                "key": "Hello",
                "component": __name__.split(".")[-1],
                "module_path": __name__,
                "log_level": "info",
            }
        ]

    def test_translator_events_are_captured(self):
        """Library loggers pick up the configuration active when they log."""
        from phrasebook.i18n import Translator

        with capture_logs() as captured:
            Translator().reset()

        assert captured[-1]["event"] == "reset_translator"
        assert captured[-1]["component"] == "translator"
        assert captured[-1]["module_path"] == "phrasebook.i18n.translator"
