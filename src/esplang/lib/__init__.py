from .console import Console
from .loader import (
    ProgramLoadError,
    ProgramNotFoundError,
    ProgramUnreadableError,
    load_program,
)

__all__ = [
    "Console",
    "ProgramLoadError",
    "ProgramNotFoundError",
    "ProgramUnreadableError",
    "load_program",
]
