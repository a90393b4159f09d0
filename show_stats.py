#!/usr/bin/env python3
"""
Print usage statistics for a coding-agent source.

Reads the same session logs as the dashboard (pi: ~/.pi/agent/sessions,
Claude Code: ~/.claude/projects) and prints a text report or the JSON
payload served by /api/stats/<source>.

Usage:
    python show_stats.py                      # list available sources
    python show_stats.py --source claude      # text report
    python show_stats.py --source pi --json   # JSON payload
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from config import ConfigError, load_config
from log_reader import MalformedLogError
from normalizers import UnknownSourceError
from stats_service import compute_statistics, list_available_sources
from summary import generate_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Show usage statistics from coding-agent session logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List sources found on this machine
  python show_stats.py

  # Text report for Claude Code
  python show_stats.py --source claude

  # JSON payload written to a file
  python show_stats.py --source pi --json --out-file pi_stats.json

  # Custom session directories / token rates
  python show_stats.py --source claude --config stats.yaml
        """
    )

    parser.add_argument(
        "--source",
        help="Source id to report on (default: list available sources)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config overriding session dirs and token rates",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON payload instead of the text report",
    )

    parser.add_argument(
        "--out-file",
        type=Path,
        default=None,
        help="Write output to this file instead of stdout",
    )

    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of top items to show in the report (default: 10)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def _emit(text: str, out_file: Path | None) -> None:
    if out_file is None:
        print(text)
        return
    out_file.write_text(text + "\n", encoding="utf-8")
    print(f"Written to: {out_file}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (ConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not args.source:
        sources = list_available_sources(config)
        if args.json:
            _emit(json.dumps(sources, indent=2), args.out_file)
        elif not sources:
            print("No session directories found.", file=sys.stderr)
        else:
            _emit("\n".join(f"{s['id']:10s} {s['label']}" for s in sources), args.out_file)
        return 0

    try:
        stats = compute_statistics(args.source, config)
    except (UnknownSourceError, MalformedLogError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        _emit(json.dumps(stats.to_dict(), indent=2), args.out_file)
    else:
        _emit(generate_summary(stats, args.top), args.out_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
