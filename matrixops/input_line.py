"""Token reading from a single line of a text stream."""

from __future__ import annotations

import re
from typing import Pattern, TextIO

_INT = re.compile(r"\s*([+-]?\d+)")
_CHAR = re.compile(r"\s*(\S)")
_WORD = re.compile(r"\s*(\S+)")


class LineReader:
    """Reads one line from a stream and hands out its tokens one by one."""

    def __init__(self, stream: TextIO) -> None:
        line = stream.readline()
        if line.endswith("\n"):
            line = line[:-1]
        self.line = line
        self._pos = 0

    def _take(self, pattern: Pattern[str], what: str) -> str:
        match = pattern.match(self.line, self._pos)
        if match is None:
            raise ValueError(f"expected {what}")
        self._pos = match.end()
        return match.group(1)

    def get_int(
        self,
        error: str = "element out of range",
        minimum: int = -1024,
        maximum: int = 1000,
    ) -> int:
        """Read the next integer; raise ValueError(error) if it is out of range."""
        value = int(self._take(_INT, "an integer"))
        if value < minimum or value > maximum:
            raise ValueError(error)
        return value

    def get_char(self) -> str:
        """Read the next non-blank character."""
        return self._take(_CHAR, "a character")

    def get_string(self) -> str:
        """Read the next whitespace-separated word."""
        return self._take(_WORD, "a word")

    def check_end_of_input(self) -> None:
        """Raise ValueError if anything but whitespace is left on the line."""
        if self.line[self._pos:].strip():
            raise ValueError("Too many characters")