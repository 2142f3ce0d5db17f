"""Narration text to word timestamp alignment."""

from typing import Sequence

from narration_sync.core import AlignedWord, AlignmentReport, RawToken, TranscribedWord
from narration_sync.alignment.normalizer import normalize_word
from narration_sync.utils import get_logger, timed

logger = get_logger(__name__)

DEFAULT_FALLBACK_DURATION = 0.5


def tokenize(text: str) -> list[RawToken]:
    """Split narration text on runs of whitespace.

    Every token gets a sequence index, including ones that will later be
    skipped as punctuation only.
    """
    return [RawToken(text=part, sequence_index=i) for i, part in enumerate(text.split())]


@timed
def align(
    text: str,
    timestamps: Sequence[TranscribedWord],
    fallback_duration: float = DEFAULT_FALLBACK_DURATION,
    log_mismatches: bool = False,
) -> tuple[tuple[AlignedWord, ...], AlignmentReport]:
    """Pair narration tokens with recognizer timestamps, strictly in order.

    Each alignable token consumes exactly one timestamp whether or not the
    words match, so a misrecognized word only affects its own timing and
    never shifts the rest of the narration. When timestamps run out, tokens
    are given an estimated interval following the last emitted word; if
    nothing was emitted yet there is no anchor and the token is dropped.

    Args:
        text: Narration text, word-delimited by whitespace
        timestamps: Recognizer words ordered by start time
        fallback_duration: Length in seconds of estimated intervals
        log_mismatches: Log every token whose key differs from its timestamp word

    Returns:
        Tuple of (aligned words, diagnostics report)
    """
    tokens = tokenize(text)
    aligned: list[AlignedWord] = []
    cursor = 0
    skipped = matched = mismatched = estimated = dropped = 0

    for token in tokens:
        key = normalize_word(token.text)

        if not key:
            skipped += 1
            continue

        if cursor >= len(timestamps):
            if not aligned:
                dropped += 1
                continue
            anchor = aligned[-1].end
            aligned.append(
                AlignedWord(
                    original_text=token.text,
                    normalized_text=key,
                    start=anchor,
                    end=anchor + fallback_duration,
                    source_index=token.sequence_index,
                )
            )
            estimated += 1
            continue

        stamp = timestamps[cursor]
        stamp_key = normalize_word(stamp.word)
        if key == stamp_key:
            matched += 1
        else:
            mismatched += 1
            if log_mismatches:
                logger.debug(
                    f"Mismatch at token {token.sequence_index}: "
                    f"{token.text!r} ({key}) vs {stamp.word!r} ({stamp_key})"
                )

        aligned.append(
            AlignedWord(
                original_text=token.text,
                normalized_text=key,
                start=stamp.start,
                end=stamp.end,
                source_index=token.sequence_index,
            )
        )
        cursor += 1

    report = AlignmentReport(
        total_tokens=len(tokens),
        skipped_punctuation=skipped,
        matched=matched,
        mismatched=mismatched,
        estimated=estimated,
        dropped=dropped,
        timestamps_used=cursor,
        timestamps_total=len(timestamps),
        index_gaps=_index_gaps(aligned),
    )

    logger.debug(
        f"Aligned {report.emitted}/{report.processed} tokens "
        f"({mismatched} mismatched, {estimated} estimated, {dropped} dropped), "
        f"timestamps used {cursor}/{len(timestamps)}"
    )
    if dropped:
        logger.warning(f"Dropped {dropped} tokens with no timing anchor")

    return tuple(aligned), report


def _index_gaps(words: Sequence[AlignedWord]) -> tuple[tuple[int, int], ...]:
    """Pairs of consecutive source indices with tokens missing in between."""
    return tuple(
        (prev.source_index, word.source_index)
        for prev, word in zip(words, words[1:])
        if word.source_index > prev.source_index + 1
    )
