"""
Rich rendering for the interactive banner and the closing summary.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.types import RenameSummary

BANNER_LINES = [
    "This program renames files in the current directory.",
    "It targets files named like 'NUMBER.EXTENSION' (e.g., 5.txt, 33.jpg).",
    "It will add your input number 'a' to the numeric part of these filenames.",
    "For example, if 'a' is 2, 5.txt becomes 7.txt.",
    "If 'a' is -2, 5.txt becomes 3.txt (files with new negative numbers will be skipped).",
    "You will also enter a number 'b'. Only files with an original number >= 'b' will be renamed.",
]


def make_console(stream: Optional[TextIO] = None) -> Console:
    """Console bound to `stream` (stdout at call time by default)."""
    return Console(file=stream or sys.stdout, highlight=False, soft_wrap=True)


def get_banner_panel(title: str = "numshift") -> Panel:
    """Get a Rich Panel explaining what the program does."""
    body = Text("\n".join(BANNER_LINES))
    return Panel(body, title=f"[cyan]{title}[/]", border_style="cyan", title_align="left")


def print_banner(console: Optional[Console] = None) -> None:
    console = console or make_console()
    console.print(get_banner_panel())
    console.print()


def get_summary_table(summary: RenameSummary, elapsed: float) -> Table:
    """Get a Rich Table with the totals of a rename pass."""
    table = Table(title="Summary", title_justify="left", border_style="cyan")
    table.add_column("Result")
    table.add_column("Files", justify="right")
    table.add_row("Matched", str(summary.total))
    table.add_row("Renamed", str(summary.renamed), style="green")
    table.add_row("Skipped", str(summary.skipped))
    table.add_row("Failed", str(summary.failed), style="red" if summary.failed else None)
    table.add_row("Elapsed", f"{elapsed:.1f}s")
    return table


def print_summary(summary: RenameSummary, elapsed: float, console: Optional[Console] = None) -> None:
    console = console or make_console()
    console.print()
    console.print(get_summary_table(summary, elapsed))
