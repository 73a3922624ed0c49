"""
Logging setup for the connectivity_analyzer package.

The analytics core is a library, so nothing is emitted until a handler is
attached. ``get_logger`` attaches a stderr handler lazily the first time a
package logger is requested; applications that want their own formatting
call ``configure_logging`` up front.

Usage:
    from connectivity_analyzer.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Segmented %d events into %d periods", n_events, n_periods)
"""

import logging
import sys
from typing import Dict, Optional, TextIO

LOGGER_NAMESPACE = "connectivity_analyzer"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

_loggers: Dict[str, logging.Logger] = {}
_configured: bool = False


def configure_logging(
    level: int = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    simple_mode: bool = False,
) -> None:
    """
    Attach a single stream handler to the package namespace.

    Args:
        level: Threshold for the namespace logger (default: WARNING).
        format_string: Explicit format. Overrides ``simple_mode``.
        stream: Destination stream (default: sys.stderr).
        simple_mode: Use the short ``LEVEL: message`` format instead of
            the timestamped one.
    """
    global _configured

    if format_string is None:
        format_string = SIMPLE_FORMAT if simple_mode else DEFAULT_FORMAT

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for ``name``, configuring the namespace on first use.

    Names outside the package namespace are nested under it so that every
    logger handed out shares the package handler.
    """
    if not _configured:
        configure_logging()

    if name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        name = f"{LOGGER_NAMESPACE}.{name}"

    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def set_level(level: int) -> None:
    """Change the threshold of every package logger at once."""
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)


def enable_debug() -> None:
    """Show fallback decisions (dropped rows, default ranges)."""
    set_level(logging.DEBUG)


def enable_quiet() -> None:
    """Only report errors."""
    set_level(logging.ERROR)
