"""Configuration management."""

from narration_sync.config.schema import (
    NarrationSyncConfig,
    AlignmentConfig,
    PlaybackConfig,
)
from narration_sync.config.loader import load_config, load_yaml, deep_merge, apply_env_overrides

__all__ = [
    # Main config
    "NarrationSyncConfig",
    "load_config",
    # Sub-configs
    "AlignmentConfig",
    "PlaybackConfig",
    # Utilities
    "load_yaml",
    "deep_merge",
    "apply_env_overrides",
]
