from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .code import ProgramCode
from .common import INDENT_UNIT, InvalidSyntaxError, ScriptError
from .lib.console import Console
from .lib.loader import load_program
from .statements import Statement, classify
from .variables import VariableStore

logger = logging.getLogger(__name__)


@dataclass
class ExecutionState:
    code: ProgramCode
    variables: VariableStore
    line_num: int = 0
    block_depth: int = 0


@dataclass
class RunResult:
    variables: VariableStore
    exception: Optional[ScriptError] = None

    @property
    def ok(self) -> bool:
        return self.exception is None

    def raise_for_exception(self) -> None:
        if self.exception is not None:
            raise self.exception


class InterpreterCore:
    def __init__(self, console: Optional[Console] = None, *, indent_unit: int = INDENT_UNIT):
        """
        console:
          - None -> read from sys.stdin, write to sys.stdout
          - Console(stdin, stdout) -> explicit streams (tests, embedding)
        indent_unit:
          - number of spaces that make up one block level
        """
        if indent_unit < 1:
            raise ValueError("indent_unit must be a positive number of spaces")
        self.console = Console() if console is None else console
        self.indent_unit = indent_unit

    # ----- run -----

    def run_file(self, path: str | Path, *, variables: Optional[VariableStore] = None) -> RunResult:
        """Load `path` and run it. Load failures propagate as ProgramLoadError."""
        return self.run(load_program(path), variables=variables)

    def run(
        self,
        source: str | Sequence[str] | ProgramCode,
        *,
        variables: Optional[VariableStore] = None,
        filename: str = "<esp>",
    ) -> RunResult:
        """
        Execute `source` with a fresh variable store (or the one given).

        Script errors stop the run, are reported through the console and are
        returned in the result rather than raised.
        """
        if isinstance(source, ProgramCode):
            code = source
        elif isinstance(source, str):
            code = ProgramCode(source, filename)
        elif isinstance(source, Sequence):
            code = ProgramCode.from_lines(source, filename)
        else:
            raise TypeError("source must be str, a sequence of lines, or ProgramCode")

        state = ExecutionState(code, VariableStore() if variables is None else variables)
        result = RunResult(state.variables)
        with self.console:
            try:
                self.exec_program(state)
            except ScriptError as exc:
                index = min(state.line_num, len(code) - 1)
                exc.at(index + 1, code.line(index))
                logger.info("%s: line %d: %s", code.filename, exc.lineno, exc)
                self.console.report(exc)
                result.exception = exc
        return result

    # ----- control flow -----

    def exec_program(self, state: ExecutionState) -> None:
        code = state.code
        while state.line_num < len(code):
            if code.is_blank(state.line_num):
                state.line_num += 1
                continue

            line_depth = code.depth_of(state.line_num)
            if code.line(state.line_num)[line_depth].isspace():
                raise InvalidSyntaxError("Invalid indentation, indent with spaces only")
            if line_depth % self.indent_unit != 0:
                raise InvalidSyntaxError(
                    f"Invalid line depth {line_depth}, indent with multiples of "
                    f"{self.indent_unit} spaces"
                )

            if state.block_depth > line_depth:
                logger.debug("leaving block, depth %d -> %d", state.block_depth, line_depth)
                state.block_depth = line_depth
                continue
            if state.block_depth < line_depth:
                state.line_num += 1
                continue

            stmt = classify(code.line(state.line_num)[state.block_depth:])
            target = self.exec_stmt(stmt, state)
            if target is None:
                state.line_num += 1
            else:
                state.line_num = target

    def exec_stmt(self, stmt: Statement, state: ExecutionState) -> Optional[int]:
        logger.debug("line %d: %s %r", state.line_num + 1, stmt.kind.name, stmt.text)
        m = getattr(self, f"exec_{stmt.kind.name}", None)
        if m is None:
            raise NotImplementedError(f"Statement not supported: {stmt.kind.name}")
        return m(stmt, state)
