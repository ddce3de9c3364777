#!/usr/bin/env python3
"""
Elite Splits CLI

Command-line access to the elite metric engine: a per-segment report of
seconds per elite with highlighted segments, and a command to store a
segment's elite count in a run state file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from elite_splits.config.loader import (
    HighlightSettings,
    load_highlight_settings,
    parse_highlight_settings,
)
from elite_splits.core.aggregation import build_records, counter_progress, format_counter_progress
from elite_splits.core.counters import write_segment_count
from elite_splits.core.highlight import select_highlights
from elite_splits.io.loader import editor_from_state, load_run_state, save_run_state, snapshot_from_state
from elite_splits.reporting import export_records_to_csv, records_to_frame
from elite_splits.utils.constants import HIGHLIGHT_MODES
from elite_splits.utils.env import env_bool

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elite-splits",
        description="Seconds-per-elite metrics and highlighting for split files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report using config/highlight.yml
  elite-splits report run.json

  # Flag the three slowest segments and export CSV
  elite-splits report run.json --mode rank --rank 3 --csv reports/elites.csv

  # Store 7 elites for segment 2
  elite-splits set-count run.json 2 7
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable verbose logging (also ELITE_SPLITS_DEBUG=1)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Print per-segment elite metrics")
    report.add_argument("run_json", help="Path to run state JSON")
    report.add_argument("--settings", help="Highlight settings YAML (default: config/highlight.yml)")
    report.add_argument("--mode", choices=HIGHLIGHT_MODES, help="Highlight mode (overrides settings file)")
    report.add_argument("--percentage", type=float, help="Percent of segments to highlight")
    report.add_argument("--rank", type=int, help="Number of slowest segments to highlight")
    report.add_argument("--threshold", type=float, help="Seconds-per-elite highlight cutoff")
    report.add_argument("--current-split", type=int,
                        help="Current split index, for the completed elite count")
    report.add_argument("--csv", help="Also export the table to this CSV path")

    set_count = subparsers.add_parser("set-count", help="Store a segment's elite count")
    set_count.add_argument("run_json", help="Path to run state JSON (updated in place)")
    set_count.add_argument("segment", type=int, help="Segment index (0-based)")
    set_count.add_argument("count", type=float, help="Elite count (floored, clamped to 0)")

    return parser


def resolve_settings(args: argparse.Namespace) -> HighlightSettings:
    """Settings from --mode flags when given, else from the settings file."""
    if args.mode:
        return parse_highlight_settings({
            "mode": args.mode,
            "percentage": args.percentage,
            "rank": args.rank,
            "threshold": args.threshold,
        })
    if args.settings:
        return load_highlight_settings(args.settings)
    try:
        return load_highlight_settings()
    except FileNotFoundError:
        logger.info("No highlight settings file found, highlighting disabled")
        return HighlightSettings()


def run_report(args: argparse.Namespace) -> int:
    snapshot = snapshot_from_state(load_run_state(args.run_json))
    settings = resolve_settings(args)

    records = build_records(snapshot)
    highlights = select_highlights(records, settings.to_policy())
    df = records_to_frame(records, highlights, [segment.name for segment in snapshot.segments])

    table = df.assign(flag=df["highlighted"].map({True: "*", False: ""}))
    columns = ["flag", "segment_index", "segment_name", "event_count", "rate_display"]
    print(table[columns].to_string(index=False))
    print()
    progress = counter_progress(snapshot, args.current_split)
    print(f"Elites: {format_counter_progress(progress)}  (mode: {settings.mode}, highlighted: {len(highlights)})")

    if args.csv:
        path = export_records_to_csv(df, args.csv)
        print(f"📊 CSV exported: {path}")
    return 0


def run_set_count(args: argparse.Namespace) -> int:
    editor = editor_from_state(load_run_state(args.run_json))
    if not 0 <= args.segment < len(editor.segments):
        print(f"❌ Error: segment {args.segment} out of range (run has {len(editor.segments)} segments)")
        return 1

    write_segment_count(editor, args.segment, args.count)
    save_run_state(editor.to_state_dict(), args.run_json)
    print(f"✅ Segment {args.segment} elite count saved")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the elite-splits command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose or env_bool("ELITE_SPLITS_DEBUG") else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.command == "report":
            return run_report(args)
        return run_set_count(args)
    except (FileNotFoundError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
