"""Data classes shared by the aligner, locator and tracker."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawToken:
    """A whitespace-delimited unit of the narration text."""
    text: str
    sequence_index: int


@dataclass(frozen=True)
class TranscribedWord:
    """A word with timing from an external speech recognizer."""
    word: str
    start: float  # seconds
    end: float  # seconds


@dataclass(frozen=True)
class AlignedWord:
    """A narration token paired with a playback interval."""
    original_text: str
    normalized_text: str
    start: float
    end: float
    source_index: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to the output record consumed by highlighting layers."""
        return {
            "originalWord": self.original_text,
            "normalizedWord": self.normalized_text,
            "start": self.start,
            "end": self.end,
            "index": self.source_index,
        }


@dataclass(frozen=True)
class AlignmentReport:
    """Diagnostics collected during one alignment pass.

    Counts are informational only. Nothing in here is ever raised.
    """
    total_tokens: int = 0
    skipped_punctuation: int = 0
    matched: int = 0
    mismatched: int = 0
    estimated: int = 0
    dropped: int = 0
    timestamps_used: int = 0
    timestamps_total: int = 0
    index_gaps: tuple[tuple[int, int], ...] = field(default_factory=tuple)

    @property
    def processed(self) -> int:
        """Tokens with a non-empty normalized key."""
        return self.total_tokens - self.skipped_punctuation

    @property
    def emitted(self) -> int:
        return self.matched + self.mismatched + self.estimated

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_tokens": self.total_tokens,
            "processed": self.processed,
            "skipped_punctuation": self.skipped_punctuation,
            "matched": self.matched,
            "mismatched": self.mismatched,
            "estimated": self.estimated,
            "dropped": self.dropped,
            "timestamps_used": self.timestamps_used,
            "timestamps_total": self.timestamps_total,
            "index_gaps": [list(gap) for gap in self.index_gaps],
        }
