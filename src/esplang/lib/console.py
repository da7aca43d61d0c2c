from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO

from ..common import ScriptError, ScriptInputError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class Console:
    """Line-based text I/O shared by OUTPUT, INPUT and error display."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.closed = False

    def __enter__(self) -> "Console":
        self.closed = False
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if not self.closed:
            self.stdout.flush()
            self.closed = True

    def emit(self, text: str) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed console")
        self.stdout.write(f"{text}\n")

    def read_integer(self, name: str) -> int:
        """Prompt until a whole line holds an integer; re-asks on anything else."""
        self.emit(f"Enter an integer number for variable {name}: ")
        self.stdout.flush()
        while True:
            raw = self.stdin.readline()
            if not raw:
                raise ScriptInputError(f"Input ended before a value for variable {name} was read")
            text = raw.strip()
            if _INTEGER_RE.fullmatch(text):
                try:
                    return int(text)
                except ValueError:
                    logger.debug("rejected %d-character integer input", len(text))
            self.emit("Please enter a valid integer number: ")
            self.stdout.flush()

    def report(self, error: ScriptError) -> None:
        prefix = "Syntax error: " if error.is_syntax_error else ""
        self.emit(f"Line {error.lineno}: {error.line}")
        self.emit(f"{prefix}{type(error).__name__}: {error.message}")
