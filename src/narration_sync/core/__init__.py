"""Core components: data classes, exceptions."""

from narration_sync.core.base import (
    RawToken,
    TranscribedWord,
    AlignedWord,
    AlignmentReport,
)
from narration_sync.core.exceptions import (
    NarrationSyncError,
    ConfigError,
    TimestampFormatError,
)

__all__ = [
    # Data classes
    "RawToken",
    "TranscribedWord",
    "AlignedWord",
    "AlignmentReport",
    # Exceptions
    "NarrationSyncError",
    "ConfigError",
    "TimestampFormatError",
]
