"""
Path and file system utilities for numshift.

This module handles all path-related functionality including:
- Filename parsing for ``NUMBER.EXTENSION`` names
- Scanning the working directory for matching regular files
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from ..config import ScanSettings
from ..core.errors import DirectoryScanError, ParseError, RangeOverflowError
from ..core.types import MatchedFile
from ..output.logger import SimpleLogger

FILENAME_PATTERN = re.compile(r"([0-9]+)\.(.+)")


def parse_number(filename: str, digits: str, limit: int) -> int:
    """Convert a digit run to an int bounded by `limit`.

    Args:
        filename (str): Filename the digits came from, used in error messages.
        digits (str): The digit run.
        limit (int): Largest accepted value.

    Returns:
        int: The parsed number.

    Raises:
        ParseError: If `digits` is not a plain run of ASCII digits.
        RangeOverflowError: If the value exceeds `limit`.
    """
    # FILENAME_PATTERN only yields ASCII digits; this guards direct callers.
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(filename, digits)
    number = int(digits)
    if number > limit:
        raise RangeOverflowError(filename, digits, limit)
    return number


def parse_filename(name: str, limit: int | None = None) -> tuple[int, str] | None:
    """Parse a filename into a (number, extension).

    The whole name must be one or more digits, a dot, and a non-empty rest.
    Examples:
        "5.txt" -> (5, "txt")
        "007.tar.gz" -> (7, "tar.gz")
        "5" -> None
        "a5.txt" -> None

    Args:
        name (str): Filename (not full path) to parse.
        limit (int | None): Largest accepted number; defaults to the configured int range.

    Returns:
        Optional[Tuple[int, str]]: (number, extension) if matched, else None.
    """
    match = FILENAME_PATTERN.fullmatch(name)
    if not match:
        return None
    if limit is None:
        limit = ScanSettings().max_number
    digits, extension = match.group(1), match.group(2)
    return parse_number(name, digits, limit), extension


def scan_directory(
    directory: Path,
    logger: SimpleLogger,
    settings: ScanSettings | None = None,
) -> list[MatchedFile]:
    """
    List the regular files directly inside `directory` named ``NUMBER.EXTENSION``.

    Symlinks, directories and special files are ignored, as are names that do
    not match. Names whose number cannot be represented are reported as
    warnings and left out.

    Args:
        directory: Directory to scan (not recursed into)
        logger: Receives per-file warnings
        settings: Scan settings; defaults to ScanSettings()

    Returns:
        Unordered list of MatchedFile records

    Raises:
        DirectoryScanError: If the directory cannot be enumerated
    """
    settings = settings or ScanSettings()
    limit = settings.max_number
    matched: list[MatchedFile] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if not entry.is_file(follow_symlinks=False):
                    continue
                try:
                    parsed = parse_filename(entry.name, limit)
                except (ParseError, RangeOverflowError) as ex:
                    logger.warning(str(ex))
                    continue
                if parsed is None:
                    continue
                number, extension = parsed
                matched.append(MatchedFile(number=number, extension=extension, path=Path(entry.path)))
    except OSError as ex:
        raise DirectoryScanError(str(directory), ex.strerror or str(ex)) from ex

    return matched
