from __future__ import annotations

import pytest

from esplang import (
    Interpreter,
    InvalidSyntaxError,
    OperatorError,
    ScriptArithmeticError,
    UndefinedVariableError,
    VariableStore,
)
from esplang.expressions import eval_postfix, infix_to_postfix, to_postfix, tokenize


@pytest.fixture
def variables():
    store = VariableStore()
    store.set("x", 6)
    store.set("Y", -4)
    return store


def test_tokenize_with_and_without_spaces():
    assert tokenize("( x+12 )*y") == ["(", "x", "+", "12", ")", "*", "y"]
    assert tokenize("a>=b") == ["a", ">=", "b"]
    assert tokenize("a == b") == ["a", "==", "b"]


@pytest.mark.parametrize("text", ["abc + 1", "x = 1", "2 % 3", "x != 2", "1.5"])
def test_tokenize_rejects_bad_input(text):
    with pytest.raises(InvalidSyntaxError):
        tokenize(text)


def test_postfix_precedence_and_parentheses():
    assert infix_to_postfix("2 + 3 * 4") == ["2", "3", "4", "*", "+"]
    assert infix_to_postfix("( 2 + 3 ) * 4") == ["2", "3", "+", "4", "*"]
    assert infix_to_postfix("8 - 3 - 2") == ["8", "3", "-", "2", "-"]
    assert infix_to_postfix("x + 1 > y * 2") == ["x", "1", "+", "y", "2", "*", ">"]


def test_postfix_unary_minus():
    assert infix_to_postfix("- 2 * 3") == ["2", "neg", "3", "*"]
    assert infix_to_postfix("4 * - ( 1 + 1 )") == ["4", "1", "1", "+", "neg", "*"]


@pytest.mark.parametrize("text", ["( 1 + 2", "1 + 2 )", ") 1 (", ""])
def test_postfix_rejects_unbalanced(text):
    with pytest.raises(InvalidSyntaxError):
        infix_to_postfix(text)


@pytest.mark.parametrize(
    "text",
    [
        "1 + 2 * 3 - 4",
        "( 1 + 2 ) * ( 3 - 4 )",
        "10 - 2 - 3",
        "2 * ( 3 + 4 * ( 5 - 1 ) ) - 7",
        "- 3 * - 3 + 1",
        "100 - ( 20 + 30 ) * 2",
    ],
)
def test_postfix_agrees_with_direct_infix(text):
    # no division, so Python's own integer arithmetic is a valid reference
    assert eval_postfix(infix_to_postfix(text), VariableStore()) == eval(text)


def test_eval_postfix_variables(variables):
    assert eval_postfix(to_postfix(tokenize("x * Y")), variables) == -24


@pytest.mark.parametrize("text, expected", [("7 / 2", 3), ("- 7 / 2", -3), ("7 / - 2", -3), ("- 7 / - 2", 3)])
def test_division_truncates_toward_zero(text, expected):
    assert eval_postfix(infix_to_postfix(text), VariableStore()) == expected


def test_eval_postfix_errors(variables):
    with pytest.raises(ScriptArithmeticError):
        eval_postfix(["1", "0", "/"], variables)
    with pytest.raises(UndefinedVariableError):
        eval_postfix(["z"], variables)
    with pytest.raises(InvalidSyntaxError):
        eval_postfix(["1", "+"], variables)
    with pytest.raises(InvalidSyntaxError):
        eval_postfix(["1", "2"], variables)
    with pytest.raises(OperatorError):
        eval_postfix(["1", "2", "%"], variables)


def test_comparison_produces_bool(variables):
    assert eval_postfix(infix_to_postfix("x > Y"), variables) is True
    assert eval_postfix(infix_to_postfix("x <= Y"), variables) is False


def test_comparison_result_is_not_an_operand(variables):
    with pytest.raises(InvalidSyntaxError):
        eval_postfix(infix_to_postfix("( x > 1 ) + 1"), variables)


def test_eval_condition(variables):
    interpreter = Interpreter()
    assert interpreter.eval_condition("( x + 1 ) == 7", variables) is True
    assert interpreter.eval_condition("x < Y", variables) is False
    with pytest.raises(InvalidSyntaxError):
        interpreter.eval_condition("x + 1", variables)
    with pytest.raises(InvalidSyntaxError):
        interpreter.eval_condition("( x > 1 ) == ( Y > 1 )", variables)


def test_eval_arithmetic_rejects_comparisons(variables):
    interpreter = Interpreter()
    assert interpreter.eval_arithmetic("x - Y", variables) == 10
    with pytest.raises(OperatorError):
        interpreter.eval_arithmetic("x >= 1", variables)
