import logging

from .code import ProgramCode
from .common import (
    INDENT_UNIT,
    InvalidIdentifierError,
    InvalidSyntaxError,
    OperatorError,
    ScriptArithmeticError,
    ScriptError,
    ScriptInputError,
    UndefinedVariableError,
)
from .core import RunResult
from .lib import Console, ProgramLoadError, load_program
from .main import Interpreter
from .statements import StatementKind, classify
from .variables import VariableStore

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "INDENT_UNIT",
    "Console",
    "Interpreter",
    "InvalidIdentifierError",
    "InvalidSyntaxError",
    "OperatorError",
    "ProgramCode",
    "ProgramLoadError",
    "RunResult",
    "ScriptArithmeticError",
    "ScriptError",
    "ScriptInputError",
    "StatementKind",
    "UndefinedVariableError",
    "VariableStore",
    "classify",
    "load_program",
]
