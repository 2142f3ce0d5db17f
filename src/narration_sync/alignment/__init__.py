"""Text-timestamp alignment module."""

from narration_sync.alignment.normalizer import normalize_word, is_alignable
from narration_sync.alignment.aligner import (
    DEFAULT_FALLBACK_DURATION,
    align,
    tokenize,
)
from narration_sync.alignment.locator import find_active_index, find_active_word
from narration_sync.alignment.spans import token_spans, span_for_word

__all__ = [
    "DEFAULT_FALLBACK_DURATION",
    "normalize_word",
    "is_alignable",
    "tokenize",
    "align",
    "find_active_index",
    "find_active_word",
    "token_spans",
    "span_for_word",
]
