"""Pydantic configuration schemas with validation."""

from typing import Literal
from pydantic import BaseModel, Field


class AlignmentConfig(BaseModel):
    """Text-timestamp alignment configuration."""
    fallback_duration: float = Field(default=0.5, gt=0.0)  # seconds per estimated word
    log_mismatches: bool = False


class PlaybackConfig(BaseModel):
    """Playback position polling configuration."""
    poll_interval: float = Field(default=0.1, gt=0.0, le=5.0)


class NarrationSyncConfig(BaseModel):
    """Root configuration for Narration Sync."""
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)

    # Global settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["simple", "detailed"] = "simple"
