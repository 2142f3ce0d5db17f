"""CLI for Narration Sync."""

import argparse
import json
import sys
from pathlib import Path

from narration_sync.core import NarrationSyncError
from narration_sync.alignment import find_active_index
from narration_sync.config import load_config
from narration_sync.pipeline import AlignedNarration, NarrationSync
from narration_sync.timestamps import load_timestamps


def _load_narration(args) -> tuple[NarrationSync, AlignedNarration]:
    config = load_config(
        config_path=args.config,
        env=args.env,
        config_dir=args.config_dir,
    )
    if args.debug:
        config = config.model_copy(
            update={
                "log_level": "DEBUG",
                "alignment": config.alignment.model_copy(update={"log_mismatches": True}),
            }
        )
    sync = NarrationSync(config)

    text_path = Path(args.text)
    if not text_path.exists():
        raise NarrationSyncError(f"Text file not found: {text_path}")

    text = text_path.read_text(encoding="utf-8")
    return sync, sync.build(text, load_timestamps(args.timestamps))


def cmd_align(args):
    """Align a narration with its word timestamps."""
    _, narration = _load_narration(args)
    records = [w.to_dict() for w in narration.words]

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"✓ Wrote {len(records)} words to {output}")
    elif args.json:
        print(json.dumps(records, indent=2, ensure_ascii=False))
    else:
        for word in narration.words:
            print(f"[{word.source_index:>4}] {word.start:7.2f}s - {word.end:7.2f}s  {word.original_text}")

    report = narration.report
    print(f"\nTokens: {report.total_tokens} ({report.skipped_punctuation} punctuation only)")
    print(f"Matched: {report.matched}  Mismatched: {report.mismatched}")
    print(f"Estimated: {report.estimated}  Dropped: {report.dropped}")
    print(f"Timestamps used: {report.timestamps_used}/{report.timestamps_total}")
    if report.index_gaps:
        gaps = ", ".join(f"{a}->{b}" for a, b in report.index_gaps)
        print(f"Index gaps: {gaps}")


def cmd_locate(args):
    """Show the active word at given playback times."""
    sync, narration = _load_narration(args)

    if args.times:
        steps = [(t, find_active_index(t, narration.words)) for t in args.times]
    else:
        # Replay the narration the way a player polls it, printing changes only
        steps = sync.tracker(narration).sweep()

    for current_time, index in steps:
        if index < 0:
            print(f"{current_time:7.2f}s  -")
        else:
            word = narration.words[index]
            print(f"{current_time:7.2f}s  [{index}] {word.original_text}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Narration Sync - align narration text with word timestamps",
    )
    parser.add_argument("--env", "-e", default=None, help="Environment")
    parser.add_argument("--config-dir", "-c", default="configs", help="Config directory")
    parser.add_argument("--config", help="Config file")
    parser.add_argument("--debug", action="store_true", help="Log mismatches")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Align
    p = subparsers.add_parser("align", help="Align text with timestamps")
    p.add_argument("text", help="Narration text file")
    p.add_argument("timestamps", help="Word timestamps JSON file")
    p.add_argument("--output", "-o", help="Write aligned words as JSON")
    p.add_argument("--json", action="store_true", help="Print aligned words as JSON")
    p.set_defaults(func=cmd_align)

    # Locate
    p = subparsers.add_parser("locate", help="Find active word at playback times")
    p.add_argument("text", help="Narration text file")
    p.add_argument("timestamps", help="Word timestamps JSON file")
    p.add_argument("times", nargs="*", type=float, help="Playback times in seconds, omit to step by poll_interval")
    p.set_defaults(func=cmd_locate)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except NarrationSyncError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1
    return 0
