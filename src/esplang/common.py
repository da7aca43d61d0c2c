from __future__ import annotations

INDENT_UNIT = 4


class ScriptError(Exception):
    """Base class for every error raised while running an ESP program.

    Errors are raised without a location by the evaluator and classifier;
    the execution loop attaches the 1-based line number and line text
    through :meth:`at` before handing the error to the reporter.
    """

    def __init__(self, message: str, *, lineno: int | None = None, line: str | None = None):
        super().__init__(message)
        self.message = message
        self.lineno = lineno
        self.line = line

    def at(self, lineno: int, line: str) -> "ScriptError":
        self.lineno = lineno
        self.line = line
        return self

    @property
    def is_syntax_error(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message


class InvalidSyntaxError(ScriptError):
    @property
    def is_syntax_error(self) -> bool:
        return True


class UndefinedVariableError(ScriptError):
    pass


class InvalidIdentifierError(ScriptError):
    pass


class ScriptArithmeticError(ScriptError):
    pass


class OperatorError(ScriptError):
    pass


class ScriptInputError(ScriptError):
    """The input stream ended while an INPUT statement was waiting."""
