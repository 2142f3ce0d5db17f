"""Decoding of recognizer word timestamp payloads."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from narration_sync.core import TimestampFormatError, TranscribedWord
from narration_sync.utils import get_logger, logged

logger = get_logger(__name__)


class WordTimestampRecord(BaseModel):
    """One word-with-timing record as produced by the recognizer service."""

    model_config = ConfigDict(extra="ignore")

    word: str = Field(description="Recognized word, punctuation may be attached")
    start: float = Field(ge=0.0, description="Start time in seconds")
    end: float = Field(ge=0.0, description="End time in seconds")

    def to_transcribed_word(self) -> TranscribedWord:
        return TranscribedWord(word=self.word, start=self.start, end=self.end)


_RECORDS = TypeAdapter(list[WordTimestampRecord])


@logged
def parse_timestamps(payload: str | bytes | list[Any] | None) -> list[TranscribedWord]:
    """Decode a word timestamp payload.

    The payload is either the JSON text stored alongside a narration or an
    already decoded list of ``{"word", "start", "end"}`` mappings. A missing
    or empty payload means the narration has no timing and yields an empty
    list. Record order is kept as given.

    Raises:
        TimestampFormatError: If the payload is not a valid list of records
    """
    if payload is None:
        return []

    try:
        if isinstance(payload, (str, bytes)):
            if not payload.strip():
                return []
            records = _RECORDS.validate_json(payload)
        else:
            records = _RECORDS.validate_python(payload)
    except ValidationError as e:
        raise TimestampFormatError(
            f"Invalid word timestamps ({e.error_count()} errors): {e.errors()[0]['msg']}"
        ) from e

    logger.debug(f"Parsed {len(records)} word timestamps")
    return [record.to_transcribed_word() for record in records]


def load_timestamps(path: Path | str) -> list[TranscribedWord]:
    """Read and decode a UTF-8 JSON timestamp file.

    Raises:
        TimestampFormatError: If the file is missing or invalid
    """
    path = Path(path)
    if not path.exists():
        raise TimestampFormatError(f"Timestamp file not found: {path}")
    return parse_timestamps(path.read_text(encoding="utf-8"))
