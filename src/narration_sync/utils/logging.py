"""Logging setup for alignment diagnostics and playback tracking."""

import logging
import sys
from typing import Literal, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FormatStyle = Literal["simple", "detailed"]

PACKAGE_LOGGER = "narration_sync"

_FORMATS = {
    "simple": "%(levelname)s | %(name)s | %(message)s",
    "detailed": "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
}

_configured = False


def setup_logging(
    level: LogLevel = "INFO",
    format_style: FormatStyle = "simple",
    stream: TextIO | None = None,
) -> None:
    """Configure the ``narration_sync`` logger tree.

    Only the package logger gets a handler, so a host application keeps
    its own root configuration. Only the first call takes effect.

    Args:
        level: Log level, DEBUG shows per-token mismatches when enabled
        format_style: 'simple' for the CLI, 'detailed' when embedded in a player
        stream: Output stream, defaults to stderr so CLI output stays clean
    """
    global _configured

    if _configured:
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMATS[format_style]))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level))
    package_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__, which places it under ``narration_sync``)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)
