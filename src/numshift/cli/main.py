#!/usr/bin/env python3
"""
numshift: shift the numbers of ``NUMBER.EXTENSION`` files in the current directory.

The program asks for an offset 'a' and a minimum 'b', then renames every
matching file numbered at least 'b' from ``N.ext`` to ``(N + a).ext``.
Files are processed in an order that keeps the batch from overwriting files
it has not renamed yet.
"""

from __future__ import annotations

# Standard library imports
import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

# Local application imports
from ..config import APP_VERSION, AppConfig, build_config
from ..core.errors import DirectoryScanError, InvalidInputError
from ..core.types import RenameSummary
from ..output.console import print_banner, print_summary
from ..output.logger import SimpleLogger
from ..processing.rename import rename_files, summarize
from ..utils.path import scan_directory
from .prompt import read_offset_and_minimum


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments. None are required; the program is interactive."""
    p = argparse.ArgumentParser(
        prog="numshift",
        description="Add an offset to the number of every NUMBER.EXTENSION file in the current directory.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "--pause-on-exit",
        action="store_true",
        help="Wait for Enter before exiting (only when stdin is a terminal)",
    )
    p.add_argument("--log-file", type=Path, default=None, help="Also append log lines to this file")
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return p.parse_args(argv)


def report_summary(logger: SimpleLogger, summary: RenameSummary) -> None:
    """Show the totals for the rename pass and record them in the log."""
    print_summary(summary, logger.elapsed())
    logger.info(
        f"Matched: {summary.total} | Renamed: {summary.renamed} | "
        f"Skipped: {summary.skipped} | Failed: {summary.failed}"
    )


def pause_before_exit(config: AppConfig) -> None:
    """Keep a console window open until Enter is pressed, when asked to."""
    if not config.console.pause_on_exit or not sys.stdin or not sys.stdin.isatty():
        return
    print("Press Enter to exit.", end="", flush=True)
    sys.stdin.readline()


def run(config: AppConfig, logger: SimpleLogger) -> int:
    """Prompt, scan, and rename. Returns the exit code."""
    if config.console.show_banner:
        print_banner()

    try:
        offset, minimum = read_offset_and_minimum()
    except InvalidInputError as ex:
        print()
        logger.error(str(ex))
        return 1

    try:
        current_dir = Path.cwd()
        logger.info(f"Searching for files in: {current_dir}")
        files = scan_directory(current_dir, logger, config.scan)
    except (OSError, DirectoryScanError) as ex:
        logger.error(str(ex))
        logger.error("No files were renamed.")
        return 1

    if not files:
        logger.info("No files matching 'NUMBER.EXTENSION' found in the current directory.")
        return 0

    results = rename_files(files, offset, minimum, logger)
    report_summary(logger, summarize(results))
    logger.info("Renaming process complete.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    config = build_config(pause_on_exit=args.pause_on_exit, log_file=args.log_file)
    logger = SimpleLogger(config.console.log_file)
    try:
        return run(config, logger)
    finally:
        pause_before_exit(config)


if __name__ == "__main__":
    sys.exit(main())
