"""Tests for logging configuration."""

import logging
from io import StringIO

from connectivity_analyzer.logging_config import (
    LOGGER_NAMESPACE,
    configure_logging,
    enable_debug,
    enable_quiet,
    get_logger,
)


class TestLoggingConfiguration:
    """Test logging setup and configuration."""

    def test_structured_mode_output(self):
        stream = StringIO()
        configure_logging(level=logging.INFO, stream=stream)
        get_logger("connectivity_analyzer.test.structured").info("Test message")
        output = stream.getvalue()
        assert "Test message" in output
        assert "INFO" in output
        assert "connectivity_analyzer.test.structured" in output

    def test_simple_mode_output(self):
        stream = StringIO()
        configure_logging(level=logging.INFO, simple_mode=True, stream=stream)
        get_logger("connectivity_analyzer.test.simple").info("Test message")
        assert stream.getvalue() == "INFO: Test message\n"

    def test_default_level_hides_info(self):
        stream = StringIO()
        configure_logging(stream=stream)
        logger = get_logger("connectivity_analyzer.test.default")
        logger.info("Should not appear")
        logger.warning("Should appear")
        output = stream.getvalue()
        assert "Should not appear" not in output
        assert "Should appear" in output

    def test_get_logger_returns_same_instance(self):
        assert get_logger("connectivity_analyzer.test.cache") is get_logger(
            "connectivity_analyzer.test.cache"
        )

    def test_foreign_names_nested_under_namespace(self):
        logger = get_logger("somewhere.else")
        assert logger.name == f"{LOGGER_NAMESPACE}.somewhere.else"


class TestLoggingLevels:
    def test_enable_debug(self):
        stream = StringIO()
        configure_logging(stream=stream)
        enable_debug()
        get_logger("connectivity_analyzer.test.debug").debug("Debug message")
        assert "Debug message" in stream.getvalue()

    def test_enable_quiet(self):
        stream = StringIO()
        configure_logging(level=logging.DEBUG, stream=stream)
        enable_quiet()
        logger = get_logger("connectivity_analyzer.test.quiet")
        logger.warning("Warning message")
        logger.error("Error message")
        output = stream.getvalue()
        assert "Warning message" not in output
        assert "Error message" in output

    def test_package_modules_log_fallbacks(self):
        """Range fallback is reported through the package handler."""
        from datetime import datetime, timezone

        from connectivity_analyzer.ranges import resolve_epoch_window

        stream = StringIO()
        configure_logging(stream=stream)
        resolve_epoch_window("bogus", datetime(2024, 1, 15, tzinfo=timezone.utc))
        assert "Unknown range selector 'bogus'" in stream.getvalue()


class TestCustomFormat:
    def test_custom_format_string(self):
        stream = StringIO()
        configure_logging(level=logging.INFO, format_string="[CUSTOM] %(message)s", stream=stream)
        get_logger("connectivity_analyzer.test.custom").info("Hello")
        assert stream.getvalue() == "[CUSTOM] Hello\n"
