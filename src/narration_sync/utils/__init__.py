"""Utilities: logging, decorators."""

from narration_sync.utils.logging import setup_logging, get_logger
from narration_sync.utils.decorators import timed, logged

__all__ = [
    "setup_logging",
    "get_logger",
    "timed",
    "logged",
]
