"""
Simple logging system for numshift.

Writes timestamped lines to the console and, optionally, to a log file.
"""

from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional


class SimpleLogger:
    """Simple logger that writes to console and file."""

    def __init__(self, log_file: Optional[Path] = None):
        self.log_file = log_file
        self.start_time = time.time()

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f"\n{'='*60}\n")
                f.write(f"Session started: {datetime.now().isoformat()}\n")
                f.write(f"{'='*60}\n")

    def log(self, message: str, prefix: str = "", error: bool = False) -> None:
        """Log a message to console and file.

        Args:
            message: The message to log
            prefix: Optional prefix like [INFO], [ERROR], etc.
            error: Whether to write to stderr instead of stdout
        """
        timestamp = datetime.now().strftime("%H:%M:%S")

        if prefix:
            formatted = f"[{timestamp}] {prefix} {message}"
        else:
            formatted = f"[{timestamp}] {message}"

        output = sys.stderr if error else sys.stdout
        print(formatted, file=output, flush=True)

        if self.log_file:
            try:
                with open(self.log_file, 'a', encoding='utf-8') as f:
                    f.write(formatted + '\n')
            except OSError:
                pass  # Don't fail on logging errors

    def elapsed(self) -> float:
        """Seconds since the logger was created."""
        return time.time() - self.start_time

    def section(self, title: str) -> None:
        """Print a section header.

        Args:
            title: Section title
        """
        self.log("")
        self.log("=" * 60)
        self.log(title.center(60))
        self.log("=" * 60)

    def success(self, message: str) -> None:
        """Log a success message."""
        self.log(message, prefix="[SUCCESS]")

    def skip(self, message: str) -> None:
        """Log an expected skip (not an error)."""
        self.log(message, prefix="[SKIP]")

    def error(self, message: str) -> None:
        """Log an error message."""
        self.log(message, prefix="[ERROR]", error=True)

    def warning(self, message: str) -> None:
        """Log a warning message to stderr."""
        self.log(message, prefix="[WARNING]", error=True)

    def info(self, message: str) -> None:
        """Log an info message."""
        self.log(message, prefix="[INFO]")
