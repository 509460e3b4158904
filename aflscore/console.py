"""Reading words, whole numbers and yes/no answers from a text stream."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_NUMBER = re.compile(r"[+-]?\d+")
_WORD = re.compile(r"\S+")


class Console:
    """Prompted, whitespace-separated input over a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text to the output stream and flush it."""
        self._out.write(text)
        self._out.flush()

    def _fill(self) -> None:
        """Skip whitespace, reading further lines until some text is pending."""
        self._pending = self._pending.lstrip()
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended")
            self._pending = line.lstrip()

    def _next_word(self) -> str:
        self._fill()
        match = _WORD.match(self._pending)
        word = match.group()
        self._pending = self._pending[match.end():]
        return word

    def _next_number(self) -> int | None:
        """Read an integer; on failure drop the rest of the line and return None."""
        self._fill()
        match = _NUMBER.match(self._pending)
        if match is not None:
            value = int(match.group())
            if _INT_MIN <= value <= _INT_MAX:
                self._pending = self._pending[match.end():]
                return value
        self._pending = ""
        return None

    def read_word(self, prompt: str = "") -> str:
        """Show the prompt and return the next whitespace-separated word."""
        self.write(prompt)
        return self._next_word()

    def read_whole_number(self, prompt: str = "") -> int:
        """Show the prompt until a whole number is entered, and return it."""
        while True:
            self.write(prompt)
            value = self._next_number()
            if value is not None:
                return value
            self.write("Please enter a whole number\n")

    def read_yes_no(self, prompt: str = "") -> bool:
        """Show the prompt until y or n is entered; True means yes."""
        while True:
            answer = self.read_word(prompt)
            if answer in ("y", "Y"):
                return True
            if answer in ("n", "N"):
                return False
            self.write("Please enter y or n\n")