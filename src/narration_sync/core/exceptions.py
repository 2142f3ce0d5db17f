"""Custom exceptions for Narration Sync."""


class NarrationSyncError(Exception):
    """Base exception for all Narration Sync errors."""
    pass


class ConfigError(NarrationSyncError):
    """Configuration loading or validation error."""
    pass


class TimestampFormatError(NarrationSyncError):
    """Word timestamp payload could not be decoded or validated."""
    pass
