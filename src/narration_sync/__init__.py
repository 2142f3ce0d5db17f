"""Narration Sync - align narration text with speech recognition word timestamps.

Usage:
    from narration_sync import NarrationSync

    sync = NarrationSync.from_config(env="development")
    narration = sync.build(story_text, timestamps_json)

    tracker = sync.tracker(narration)
    index = tracker.update(current_time)
"""

from narration_sync.core import AlignedWord, AlignmentReport, TranscribedWord
from narration_sync.alignment import align, find_active_index, normalize_word
from narration_sync.pipeline import AlignedNarration, NarrationSync, PlaybackTracker
from narration_sync.config import NarrationSyncConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "AlignedWord",
    "AlignmentReport",
    "TranscribedWord",
    "align",
    "find_active_index",
    "normalize_word",
    "AlignedNarration",
    "NarrationSync",
    "PlaybackTracker",
    "NarrationSyncConfig",
    "load_config",
]
