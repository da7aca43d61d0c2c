from __future__ import annotations

import enum
import functools
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .common import InvalidSyntaxError
from .helpers import format_int

if TYPE_CHECKING:
    from .core import ExecutionState

logger = logging.getLogger(__name__)


class StatementKind(enum.Enum):
    INPUT = "input"
    ASSIGNMENT = "assignment"
    OUTPUT = "output"
    IF = "if"
    GOTO = "goto"


@dataclass(frozen=True)
class Statement:
    kind: StatementKind
    text: str
    expression: Optional[str] = None
    target: Optional[str] = None


# Keyword forms are tried before the assignment form.
_PATTERNS = (
    (StatementKind.INPUT, re.compile(r"input\s+(?P<target>\S+)")),
    (StatementKind.OUTPUT, re.compile(r"print\s+(?P<expression>\S.*)")),
    (StatementKind.IF, re.compile(r"if\s+(?P<expression>\S.*)")),
    (StatementKind.GOTO, re.compile(r"goto\s+(?P<expression>\S.*)")),
    (StatementKind.ASSIGNMENT, re.compile(r"(?P<target>[^\s=]+)\s*=(?!=)\s*(?P<expression>\S.*)")),
)


@functools.lru_cache(maxsize=1024)
def classify(text: str) -> Statement:
    """Classify one line whose indentation has already been removed."""
    line = text.rstrip()
    for kind, pattern in _PATTERNS:
        match = pattern.fullmatch(line)
        if match is not None:
            groups = match.groupdict()
            return Statement(
                kind=kind,
                text=line,
                expression=groups.get("expression"),
                target=groups.get("target"),
            )
    raise InvalidSyntaxError(f"Unrecognized statement {line!r}")


class StatementMixin:
    def exec_INPUT(self, stmt: Statement, state: "ExecutionState") -> None:
        name = state.variables.validate(stmt.target)
        value = self.console.read_integer(name)
        state.variables.set(name, value)

    def exec_ASSIGNMENT(self, stmt: Statement, state: "ExecutionState") -> None:
        name = state.variables.validate(stmt.target)
        value = self.eval_arithmetic(stmt.expression, state.variables)
        state.variables.set(name, value)

    def exec_OUTPUT(self, stmt: Statement, state: "ExecutionState") -> None:
        value = self.eval_arithmetic(stmt.expression, state.variables)
        self.console.emit(format_int(value))

    def exec_IF(self, stmt: Statement, state: "ExecutionState") -> None:
        if self.eval_condition(stmt.expression, state.variables):
            state.block_depth += self.indent_unit
            logger.debug("entering block at depth %d", state.block_depth)

    def exec_GOTO(self, stmt: Statement, state: "ExecutionState") -> int:
        target = self.eval_arithmetic(stmt.expression, state.variables)
        if not 1 <= target <= len(state.code):
            shown = format_int(target) if target.bit_length() < 64 else "value"
            raise InvalidSyntaxError(
                f"goto target line {shown} is outside the program (1-{len(state.code)})"
            )
        index = target - 1
        if not state.code.is_blank(index) and state.code.depth_of(index) > state.block_depth:
            raise InvalidSyntaxError(f"goto target line {target} is inside an unentered block")
        logger.debug("jumping to line %d", target)
        return index
