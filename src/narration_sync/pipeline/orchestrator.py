"""Main entry point for Narration Sync."""

from pathlib import Path
from typing import Any, Sequence

from narration_sync.core import TranscribedWord
from narration_sync.alignment import align
from narration_sync.timestamps import parse_timestamps
from narration_sync.pipeline.tracker import AlignedNarration, PlaybackTracker
from narration_sync.config import NarrationSyncConfig, load_config
from narration_sync.utils import get_logger, setup_logging

logger = get_logger(__name__)


class NarrationSync:
    """Builds aligned narrations and trackers from configuration.

    Usage:
        sync = NarrationSync.from_config(env="development")

        narration = sync.build(story_text, story_timestamps_json)
        tracker = sync.tracker(narration)

        # On every playback tick
        index = tracker.update(player_time)
    """

    def __init__(self, config: NarrationSyncConfig | None = None):
        self.config = config or NarrationSyncConfig()
        setup_logging(level=self.config.log_level, format_style=self.config.log_format)

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        env: str | None = None,
        config_dir: Path | str = "configs",
    ) -> "NarrationSync":
        """Create NarrationSync instance from configuration files.

        Args:
            config_path: Optional specific config file
            env: Environment (development, production)
            config_dir: Directory containing config files

        Returns:
            Configured NarrationSync instance
        """
        config = load_config(
            config_path=config_path,
            env=env,
            config_dir=config_dir,
        )
        return cls(config)

    def build(
        self,
        text: str,
        timestamps: str | bytes | Sequence[TranscribedWord] | list[dict[str, Any]] | None,
    ) -> AlignedNarration:
        """Align narration text with its word timestamps.

        Args:
            text: Narration text
            timestamps: JSON payload, decoded records, or TranscribedWord list

        Returns:
            Immutable aligned narration

        Raises:
            TimestampFormatError: If a timestamp payload cannot be decoded
        """
        words = _coerce_timestamps(timestamps)
        aligned, report = align(
            text,
            words,
            fallback_duration=self.config.alignment.fallback_duration,
            log_mismatches=self.config.alignment.log_mismatches,
        )
        if not words:
            logger.info("No word timestamps, narration has no highlighting")
        else:
            logger.info(
                f"Aligned {len(aligned)} words from {report.total_tokens} tokens "
                f"({report.mismatched} mismatched)"
            )
        return AlignedNarration(text=text, words=aligned, report=report)

    def tracker(self, narration: AlignedNarration | None = None) -> PlaybackTracker:
        return PlaybackTracker(narration, poll_interval=self.config.playback.poll_interval)

    def status(self) -> dict:
        """Get effective configuration."""
        return {
            "alignment": self.config.alignment.model_dump(),
            "playback": self.config.playback.model_dump(),
            "log_level": self.config.log_level,
        }


def _coerce_timestamps(timestamps) -> list[TranscribedWord]:
    if timestamps is None or isinstance(timestamps, (str, bytes)):
        return parse_timestamps(timestamps)
    items = list(timestamps)
    if all(isinstance(item, TranscribedWord) for item in items):
        return items
    return parse_timestamps(items)
