"""Playback position tracking against a published aligned narration."""

import threading
from dataclasses import dataclass
from functools import cached_property
from typing import Callable

from narration_sync.core import AlignedWord, AlignmentReport
from narration_sync.alignment import find_active_index, span_for_word, token_spans
from narration_sync.utils import get_logger

logger = get_logger(__name__)

WordListener = Callable[[int, AlignedWord | None], None]

DEFAULT_POLL_INTERVAL = 0.1


@dataclass(frozen=True)
class AlignedNarration:
    """An aligned word list together with the text it was built from."""
    text: str
    words: tuple[AlignedWord, ...]
    report: AlignmentReport

    @property
    def has_timing(self) -> bool:
        return bool(self.words)

    @property
    def duration(self) -> float:
        return self.words[-1].end if self.words else 0.0

    @cached_property
    def token_spans(self) -> tuple[tuple[int, int], ...]:
        return tuple(token_spans(self.text))

    def span_of(self, word: AlignedWord, trim_punctuation: bool = True) -> tuple[int, int] | None:
        """Character span of ``word`` in the narration text."""
        return span_for_word(self.text, word, trim_punctuation=trim_punctuation, spans=self.token_spans)


class PlaybackTracker:
    """Tracks the active word as playback time advances.

    A narration is published as a whole: readers keep using the list they
    already hold until they observe the swap, and never see a partially
    built one. Listeners are only notified when the active index changes.
    """

    def __init__(
        self,
        narration: AlignedNarration | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self._lock = threading.Lock()
        self._narration = narration
        self._index = -1
        self._listeners: list[WordListener] = []
        self.poll_interval = poll_interval

    @property
    def narration(self) -> AlignedNarration | None:
        return self._narration

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def active_word(self) -> AlignedWord | None:
        with self._lock:
            narration, index = self._narration, self._index
        if narration is None or index < 0:
            return None
        return narration.words[index]

    def add_listener(self, listener: WordListener) -> None:
        """Register a callback invoked with (index, word) on every change."""
        self._listeners.append(listener)

    def publish(self, narration: AlignedNarration) -> None:
        """Replace the tracked narration and reset the active word."""
        with self._lock:
            self._narration = narration
            self._index = -1
        logger.debug(f"Published narration with {len(narration.words)} words")

    def update(self, current_time: float) -> int:
        """Recompute the active word for a playback position.

        Returns:
            Active index, -1 if nothing is active or no narration is published
        """
        narration = self._narration
        if narration is None:
            return -1

        index = find_active_index(current_time, narration.words)
        with self._lock:
            # A narration published meanwhile wins over this stale result
            if narration is not self._narration or index == self._index:
                return index
            self._index = index

        word = narration.words[index] if index >= 0 else None
        self._notify(index, word)
        return index

    def reset(self) -> None:
        """Return to the stopped state, nothing highlighted."""
        with self._lock:
            changed = self._index != -1
            self._index = -1
        if changed:
            self._notify(-1, None)

    def run(self, position: Callable[[], float], stop: threading.Event) -> None:
        """Poll the playback position every ``poll_interval`` until ``stop`` is set.

        Args:
            position: Returns the current playback time in seconds
            stop: Set by the caller (or a listener) to end polling
        """
        logger.debug(f"Polling playback position every {self.poll_interval:.3f}s")
        while not stop.is_set():
            self.update(position())
            stop.wait(self.poll_interval)

    def sweep(self, until: float | None = None) -> list[tuple[float, int]]:
        """Step playback time from 0 by ``poll_interval`` without waiting.

        Args:
            until: Last time to visit, defaults to the narration duration

        Returns:
            (time, index) for every step where the active word changed
        """
        narration = self._narration
        if narration is None:
            return []

        end = narration.duration if until is None else until
        changes: list[tuple[float, int]] = []
        step = 0
        current_time = 0.0
        while current_time <= end:
            previous = self._index
            index = self.update(current_time)
            if index != previous:
                changes.append((current_time, index))
            step += 1
            current_time = step * self.poll_interval
        return changes

    def _notify(self, index: int, word: AlignedWord | None) -> None:
        for listener in list(self._listeners):
            listener(index, word)
