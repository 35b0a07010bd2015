"""
Interactive integer prompts.

Values are read as whitespace-delimited tokens, so both integers may be typed
on one line or on separate lines.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from ..core.errors import InvalidInputError

PROMPT_OFFSET = "Enter an integer 'a' (the number to add for renaming): "
PROMPT_MINIMUM = "Enter an integer 'b' (the minimum original number to rename): "

INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class TokenReader:
    """Hands out whitespace-delimited tokens from a text stream, line by line."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._pending: Iterator[str] = iter(())

    def next_token(self) -> str | None:
        """Return the next token, or None at end of input."""
        while True:
            token = next(self._pending, None)
            if token is not None:
                return token
            line = (self._stream or sys.stdin).readline()
            if not line:
                return None
            self._pending = iter(line.split())


def parse_integer(token: str | None, label: str) -> int:
    """Convert a token to int.

    Raises:
        InvalidInputError: If `token` is missing or not an optionally signed run of digits.
    """
    if token is None or not INTEGER_TOKEN.fullmatch(token):
        raise InvalidInputError(label, token)
    return int(token)


def read_integer(reader: TokenReader, prompt: str, label: str, out: Optional[TextIO] = None) -> int:
    """Print `prompt` and read one integer token."""
    out = out or sys.stdout
    out.write(prompt)
    out.flush()
    return parse_integer(reader.next_token(), label)


def read_offset_and_minimum(reader: Optional[TokenReader] = None) -> tuple[int, int]:
    """Prompt for 'a' (offset) then 'b' (minimum).

    Raises:
        InvalidInputError: On the first value that is not an integer.
    """
    reader = reader or TokenReader()
    offset = read_integer(reader, PROMPT_OFFSET, "a")
    minimum = read_integer(reader, PROMPT_MINIMUM, "b")
    return offset, minimum
