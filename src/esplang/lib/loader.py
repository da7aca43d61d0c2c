from __future__ import annotations

import logging
from pathlib import Path

from ..code import ProgramCode

logger = logging.getLogger(__name__)


class ProgramLoadError(OSError):
    """No program is available from the requested path."""


class ProgramNotFoundError(ProgramLoadError):
    pass


class ProgramUnreadableError(ProgramLoadError):
    pass


def load_program(path: str | Path, *, encoding: str = "utf-8") -> ProgramCode:
    """Read a program file into a ProgramCode."""
    program_path = Path(path)
    if not program_path.exists():
        raise ProgramNotFoundError(f"The file {program_path} doesn't exist.")
    if not program_path.is_file():
        raise ProgramUnreadableError(f"The path {program_path} is not a file.")
    try:
        source = program_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ProgramUnreadableError(f"The file {program_path} could not be read: {exc}") from exc
    code = ProgramCode(source, str(program_path))
    logger.debug("loaded %s (%d lines)", program_path, len(code))
    return code
