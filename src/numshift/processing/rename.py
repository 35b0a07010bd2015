"""
Rename processing module for numshift.

This module orders matched files so that shifting their numbers does not
clobber files that are still waiting to be renamed, and then performs the
renames one by one, reporting every skip and failure.
"""

from __future__ import annotations

from ..core.types import MatchedFile, RenameResult, RenameStatus, RenameSummary
from ..output.logger import SimpleLogger


def order_for_offset(files: list[MatchedFile], offset: int) -> list[MatchedFile]:
    """
    Sort files so that no rename targets a number not yet processed.

    Highest number first when `offset` is non-negative, lowest first when it
    is negative. Files sharing a number keep their scan order.
    """
    return sorted(files, key=lambda f: f.number, reverse=offset >= 0)


def describe_order(offset: int) -> str:
    if offset >= 0:
        return "Sorting files from highest original number to lowest for renaming..."
    return "Sorting files from lowest original number to highest for renaming..."


class RenameProcessor:
    """Processor for the shift-and-rename pass."""

    @staticmethod
    def check_skip(file: MatchedFile, new_number: int, minimum: int) -> tuple[RenameStatus, str] | None:
        """
        Apply the skip rules in order; the first that matches wins.
        Returns (status, message) for a skip, None if the file should be renamed.
        """
        if file.number < minimum:
            return (
                RenameStatus.BELOW_MINIMUM,
                f"Skipping '{file.name}': Original number ({file.number}) is less than 'b' ({minimum}).",
            )
        if new_number < 0:
            return (
                RenameStatus.NEGATIVE,
                f"Skipping '{file.name}': New number ({new_number}) would be negative. "
                "New filenames must be non-negative.",
            )
        if file.target_name(new_number) == file.name:
            return (
                RenameStatus.IDENTICAL,
                f"Skipping '{file.name}': New filename is identical to original.",
            )
        return None

    @staticmethod
    def rename_one(file: MatchedFile, new_name: str) -> tuple[bool, str]:
        """
        Rename `file` in place to `new_name`, refusing to replace an existing file.
        Returns (success, message).
        """
        new_path = file.path.with_name(new_name)
        try:
            if new_path.exists() or new_path.is_symlink():
                return False, f"Error renaming '{file.name}' to '{new_name}': target already exists"
            file.path.rename(new_path)
        except OSError as ex:
            return False, f"Error renaming '{file.name}' to '{new_name}': {ex.strerror or ex}"
        return True, f"Renamed '{file.name}' to '{new_name}'"

    @staticmethod
    def process(file: MatchedFile, offset: int, minimum: int, logger: SimpleLogger) -> RenameResult:
        """Compute the new name for one file, skip or rename it, and log the outcome."""
        new_number = file.number + offset

        skip = RenameProcessor.check_skip(file, new_number, minimum)
        if skip is not None:
            status, msg = skip
            logger.skip(msg)
            new_name = None if status is RenameStatus.NEGATIVE else file.target_name(new_number)
            return RenameResult(file=file, status=status, new_number=new_number, new_name=new_name, message=msg)

        new_name = file.target_name(new_number)
        ok, msg = RenameProcessor.rename_one(file, new_name)
        if ok:
            logger.success(msg)
            status = RenameStatus.RENAMED
        else:
            logger.error(msg)
            status = RenameStatus.FAILED
        return RenameResult(file=file, status=status, new_number=new_number, new_name=new_name, message=msg)


def rename_files(
    files: list[MatchedFile],
    offset: int,
    minimum: int,
    logger: SimpleLogger,
) -> list[RenameResult]:
    """
    Order `files` for `offset` and rename each of them.

    A failure on one file is logged and the pass continues with the next.

    Args:
        files: Matched files, in any order
        offset: Amount added to every number
        minimum: Files numbered below this are left alone
        logger: Receives the ordering line and per-file outcomes

    Returns:
        One RenameResult per file, in processing order
    """
    ordered = order_for_offset(files, offset)
    logger.info(describe_order(offset))
    logger.section("Attempting to rename files")
    return [RenameProcessor.process(f, offset, minimum, logger) for f in ordered]


def summarize(results: list[RenameResult]) -> RenameSummary:
    """Count the outcomes of a rename pass."""
    return RenameSummary.from_results(results)
