from __future__ import annotations

import re
from typing import List, Sequence

from .common import InvalidSyntaxError, OperatorError
from .helpers import (
    ARITHMETIC_OPERATORS,
    COMPARISON_OPERATORS,
    NEGATE,
    PRECEDENCE,
    apply_operator,
    is_operator,
)
from .variables import VariableStore

_TOKEN_RE = re.compile(
    r"\s*(?:(?P<number>[0-9]+)|(?P<name>[A-Za-z_]\w*)|(?P<op>==|>=|<=|[-+*/<>()]))"
)


def tokenize(text: str) -> List[str]:
    """Split an infix expression into number, name, operator and paren tokens."""
    tokens: List[str] = []
    pos = 0
    end = len(text.rstrip())
    while pos < end:
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            bad = text[pos:].lstrip()[0]
            raise InvalidSyntaxError(f"Unrecognized character {bad!r} in expression")
        name = match.group("name")
        if name is not None and len(name) != 1:
            raise InvalidSyntaxError(
                f"Invalid token {name!r}, variable names are a single letter"
            )
        tokens.append(match.group(match.lastgroup))
        pos = match.end()
    return tokens


def to_postfix(tokens: Sequence[str]) -> List[str]:
    """
    Convert infix tokens to postfix order (shunting-yard).

    A `-` where an operand is expected is unary negation and is emitted as
    the `neg` token.
    """
    output: List[str] = []
    stack: List[str] = []
    expect_operand = True
    for token in tokens:
        if token == "(":
            stack.append(token)
            expect_operand = True
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise InvalidSyntaxError("Unmatched ')' in expression")
            stack.pop()
            expect_operand = False
        elif is_operator(token):
            if token == "-" and expect_operand:
                # prefix operator: nothing to its left can be popped yet
                stack.append(NEGATE)
            else:
                precedence = PRECEDENCE[token]
                while stack and stack[-1] != "(" and PRECEDENCE[stack[-1]] >= precedence:
                    output.append(stack.pop())
                stack.append(token)
            expect_operand = True
        else:
            output.append(token)
            expect_operand = False

    while stack:
        top = stack.pop()
        if top == "(":
            raise InvalidSyntaxError("Unmatched '(' in expression")
        output.append(top)

    if not output:
        raise InvalidSyntaxError("Empty expression")
    return output


def infix_to_postfix(text: str) -> List[str]:
    return to_postfix(tokenize(text))


def _pop_operand(stack: List[int | bool], op: str) -> int:
    if not stack:
        raise InvalidSyntaxError(f"Missing operand for operator {op!r}")
    value = stack.pop()
    if type(value) is bool:
        raise InvalidSyntaxError(f"A comparison result cannot be an operand of {op!r}")
    return value


def eval_postfix(postfix: Sequence[str], variables: VariableStore) -> int | bool:
    """Evaluate postfix tokens; comparisons produce a bool, everything else an int."""
    stack: List[int | bool] = []
    for token in postfix:
        if token.isdigit():
            try:
                stack.append(int(token))
            except ValueError as exc:
                raise InvalidSyntaxError(
                    f"Integer literal of {len(token)} digits is too long"
                ) from exc
        elif token == NEGATE:
            stack.append(-_pop_operand(stack, "-"))
        elif token in ARITHMETIC_OPERATORS or token in COMPARISON_OPERATORS:
            right = _pop_operand(stack, token)
            left = _pop_operand(stack, token)
            stack.append(apply_operator(token, left, right))
        elif token[:1].isalpha() or token[:1] == "_":
            stack.append(variables.get(token))
        else:
            raise OperatorError(f"Unknown operator {token!r}")

    if len(stack) != 1:
        raise InvalidSyntaxError("Malformed expression")
    return stack[0]


class ExpressionMixin:
    def eval_arithmetic(self, text: str, variables: VariableStore) -> int:
        tokens = tokenize(text)
        for token in tokens:
            if token in COMPARISON_OPERATORS:
                raise OperatorError(
                    f"Comparison operator {token!r} is only allowed in an if condition"
                )
        return eval_postfix(to_postfix(tokens), variables)

    def eval_condition(self, text: str, variables: VariableStore) -> bool:
        tokens = tokenize(text)
        comparisons = sum(1 for token in tokens if token in COMPARISON_OPERATORS)
        if comparisons != 1:
            raise InvalidSyntaxError(
                f"An if condition needs exactly one comparison operator, found {comparisons}"
            )
        result = eval_postfix(to_postfix(tokens), variables)
        if type(result) is not bool:
            raise InvalidSyntaxError("An if condition must be a comparison")
        return result
