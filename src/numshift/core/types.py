"""
Core data types for numshift.

This module contains the records passed between the scan, ordering and
rename stages.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class MatchedFile:
    """A file named ``NUMBER.EXTENSION`` found in the working directory."""

    number: int
    extension: str  # no leading dot, may itself contain dots
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def target_name(self, new_number: int) -> str:
        """Filename carrying `new_number` and this file's extension."""
        return f"{new_number}.{self.extension}"


class RenameStatus(Enum):
    """Outcome of processing one matched file."""

    RENAMED = "renamed"
    BELOW_MINIMUM = "below_minimum"
    NEGATIVE = "negative"
    IDENTICAL = "identical"
    FAILED = "failed"

    @property
    def is_skip(self) -> bool:
        return self in (RenameStatus.BELOW_MINIMUM, RenameStatus.NEGATIVE, RenameStatus.IDENTICAL)


@dataclass(frozen=True)
class RenameResult:
    """What happened to a single matched file during the rename pass."""

    file: MatchedFile
    status: RenameStatus
    new_number: int
    new_name: str | None
    message: str


@dataclass
class RenameSummary:
    """Per-status counts for one rename pass."""

    total: int = 0
    counts: Counter = field(default_factory=Counter)

    @classmethod
    def from_results(cls, results: list[RenameResult]) -> "RenameSummary":
        summary = cls(total=len(results))
        summary.counts.update(r.status for r in results)
        return summary

    @property
    def renamed(self) -> int:
        return self.counts[RenameStatus.RENAMED]

    @property
    def skipped(self) -> int:
        return sum(n for status, n in self.counts.items() if status.is_skip)

    @property
    def failed(self) -> int:
        return self.counts[RenameStatus.FAILED]
