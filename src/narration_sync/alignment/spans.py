"""Map aligned words back to character spans in the narration text."""

import re
from typing import Sequence

from narration_sync.core import AlignedWord

_TOKEN = re.compile(r"\S+")


def token_spans(text: str) -> list[tuple[int, int]]:
    """Character offsets of each whitespace-delimited token.

    Indexed the same way as ``RawToken.sequence_index``.
    """
    return [match.span() for match in _TOKEN.finditer(text)]


def span_for_word(
    text: str,
    word: AlignedWord,
    trim_punctuation: bool = True,
    spans: Sequence[tuple[int, int]] | None = None,
) -> tuple[int, int] | None:
    """Character span of the token an aligned word came from.

    Args:
        text: The narration text the word was aligned from
        word: Aligned word
        trim_punctuation: Shrink the span to its first..last alphanumeric char
        spans: Precomputed ``token_spans(text)``, computed here if omitted

    Returns:
        (start, end) offsets, or None if the word does not belong to ``text``
    """
    if spans is None:
        spans = token_spans(text)
    if not 0 <= word.source_index < len(spans):
        return None

    start, end = spans[word.source_index]
    if trim_punctuation:
        while start < end and not text[start].isalnum():
            start += 1
        while end > start and not text[end - 1].isalnum():
            end -= 1
        if start == end:
            return spans[word.source_index]
    return start, end
