"""Exception types raised by numshift."""

from __future__ import annotations


class NumshiftError(Exception):
    """Base class for all numshift errors."""


class InvalidInputError(NumshiftError):
    """A value typed at a prompt is not an integer (or input ended early)."""

    def __init__(self, label: str, token: str | None) -> None:
        self.label = label
        self.token = token
        if token is None:
            detail = "no input received"
        else:
            detail = f"got {token!r}"
        super().__init__(f"Invalid input for '{label}'. Please enter an integer ({detail}).")


class DirectoryScanError(NumshiftError):
    """The working directory could not be enumerated."""

    def __init__(self, directory: str, reason: str) -> None:
        self.directory = directory
        super().__init__(f"Error accessing directory {directory}: {reason}")


class ParseError(NumshiftError):
    """A filename's digit run could not be converted to an integer."""

    def __init__(self, filename: str, digits: str) -> None:
        self.filename = filename
        self.digits = digits
        super().__init__(f"Could not convert number part of '{filename}': {digits!r} is not a decimal number")


class RangeOverflowError(NumshiftError):
    """A filename's digit run does not fit the native signed integer range."""

    def __init__(self, filename: str, digits: str, limit: int) -> None:
        self.filename = filename
        self.digits = digits
        self.limit = limit
        super().__init__(f"Number part of '{filename}' is out of range (maximum {limit})")
