"""Active word lookup for a playback position."""

import math
from bisect import bisect_right
from operator import attrgetter
from typing import Sequence

from narration_sync.core import AlignedWord

_start = attrgetter("start")


def find_active_index(current_time: float, words: Sequence[AlignedWord]) -> int:
    """Find the index of the word playing at ``current_time``.

    A word stays active from its own start until the next word starts, so
    short silences between words never leave a gap in the highlight. The
    last word stays active indefinitely once reached.

    Args:
        current_time: Playback position in seconds
        words: Aligned words ordered by start time

    Returns:
        Index into ``words``, or -1 if nothing is active yet
    """
    if not words or math.isnan(current_time):
        return -1
    # Greatest i with words[i].start <= current_time
    return bisect_right(words, current_time, key=_start) - 1


def find_active_word(current_time: float, words: Sequence[AlignedWord]) -> AlignedWord | None:
    index = find_active_index(current_time, words)
    return words[index] if index >= 0 else None
