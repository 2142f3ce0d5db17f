"""Word timestamp payload decoding."""

from narration_sync.timestamps.parser import (
    WordTimestampRecord,
    parse_timestamps,
    load_timestamps,
)

__all__ = [
    "WordTimestampRecord",
    "parse_timestamps",
    "load_timestamps",
]
