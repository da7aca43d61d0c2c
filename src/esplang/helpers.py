from __future__ import annotations

import operator
from typing import Callable, Dict

from .common import OperatorError, ScriptArithmeticError

NEGATE = "neg"


def int_divide(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise ScriptArithmeticError("Division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


ARITHMETIC_OPERATORS: Dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": int_divide,
}

COMPARISON_OPERATORS: Dict[str, Callable[[int, int], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    "==": operator.eq,
    ">=": operator.ge,
    "<=": operator.le,
}

PRECEDENCE: Dict[str, int] = {
    NEGATE: 3,
    "*": 2,
    "/": 2,
    "+": 1,
    "-": 1,
    **{op: 0 for op in COMPARISON_OPERATORS},
}


def is_operator(token: str) -> bool:
    return token in PRECEDENCE


def apply_operator(op: str, left: int, right: int) -> int | bool:
    fn = ARITHMETIC_OPERATORS.get(op) or COMPARISON_OPERATORS.get(op)
    if fn is None:
        raise OperatorError(f"Unsupported operator {op!r}")
    return fn(left, right)


def format_int(value: int) -> str:
    """Decimal text of `value`; values past the interpreter's digit limit are an arithmetic error."""
    try:
        return str(value)
    except ValueError as exc:
        raise ScriptArithmeticError(
            f"Integer of {value.bit_length()} bits is too large to convert to text"
        ) from exc
