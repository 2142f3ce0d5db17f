"""Pipeline module - narration building and playback tracking."""

from narration_sync.pipeline.tracker import AlignedNarration, PlaybackTracker
from narration_sync.pipeline.orchestrator import NarrationSync

__all__ = [
    "AlignedNarration",
    "PlaybackTracker",
    "NarrationSync",
]
