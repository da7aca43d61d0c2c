from __future__ import annotations

import re
from typing import Iterable

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def depth_of_line(text: str) -> int:
    """Count the leading space characters of `text`."""
    return len(text) - len(text.lstrip(" "))


class ProgramCode:
    """
    Holds:
      - the immutable, 0-indexed program lines
      - the filename used in diagnostics
    """

    def __init__(self, source: str, filename: str = "<esp>"):
        self.source = source
        self.filename = filename
        lines = _LINE_BREAK_RE.split(source)
        if lines[-1] == "":
            lines.pop()
        self.lines: tuple[str, ...] = tuple(lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str], filename: str = "<esp>") -> "ProgramCode":
        stripped = [line.rstrip("\r\n") for line in lines]
        return cls("\n".join(stripped), filename)

    def __len__(self) -> int:
        return len(self.lines)

    def line(self, index: int) -> str:
        return self.lines[index]

    def depth_of(self, index: int) -> int:
        return depth_of_line(self.lines[index])

    def is_blank(self, index: int) -> bool:
        return not self.lines[index].strip()

    def __repr__(self) -> str:
        return f"<ProgramCode {self.filename!r} lines={len(self.lines)}>"
