"""
CLI entry point for course-records.

Usage
─────
  # Interactive loop
  course-records
  python -m course_records

  # Start with records loaded from a CSV file
  course-records --load courses.csv

  # Run commands without the loop
  course-records --load courses.csv -c "sort desc" -c "save sorted.csv"
"""

import argparse
import logging
import sys
from typing import Optional

from course_records.exceptions import CourseRecordsError
from course_records.store.models import ParseErrorPolicy, StoreConfig
from course_records.store.store import RecordStore

from .commands import cmd_load
from .shell import CourseShell

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="course-records",
        description="Manage students' course records interactively",
    )
    parser.add_argument(
        "--load",
        default=None,
        metavar="PATH",
        help="CSV file to load before starting",
    )
    parser.add_argument(
        "--skip-bad-rows",
        action="store_true",
        default=False,
        help="Skip malformed CSV rows instead of stopping at the first one",
    )
    parser.add_argument(
        "-c", "--command",
        action="append",
        default=None,
        dest="commands",
        metavar="CMD",
        help="Run CMD and exit instead of starting the loop (repeatable)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )
    return parser


def build_config(ns: argparse.Namespace) -> StoreConfig:
    """Map parsed flags onto a StoreConfig."""
    policy = ParseErrorPolicy.SKIP if ns.skip_bad_rows else ParseErrorPolicy.ABORT
    return StoreConfig(on_parse_error=policy)


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    level = logging.DEBUG if ns.debug else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    store = RecordStore(config=build_config(ns))
    ok = True

    if ns.load:
        try:
            cmd_load(store, ns.load)
        except CourseRecordsError as exc:
            logger.debug("initial load failed", exc_info=True)
            print(f"Error: {exc}", file=sys.stderr)
            ok = False

    shell = CourseShell(store)

    if ns.commands:
        for line in ns.commands:
            ok = shell.execute(line) and ok
            if not shell.running:
                break
        return 0 if ok else 1

    return shell.run()


if __name__ == "__main__":
    raise SystemExit(main())
