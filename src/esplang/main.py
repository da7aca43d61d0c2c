from __future__ import annotations

from .core import InterpreterCore
from .expressions import ExpressionMixin
from .statements import StatementMixin


class Interpreter(StatementMixin, ExpressionMixin, InterpreterCore):
    pass
