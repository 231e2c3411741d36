"""
Tests for the postfix evaluator and operator kernels.
"""

import math

import pytest

from core import (
    RPNEvaluator, Operators, Token, LEFT_PAREN, parse_postfix,
    MalformedExpressionError, DivisionByZeroError
)


def num(v):
    return Token.number(v)


def op(s):
    return Token.operator(s)


def test_operand_order():
    # a 先入栈：8 2 - = 6，8 2 / = 4
    assert RPNEvaluator.evaluate((num(8), num(2), op('-'))) == 6.0
    assert RPNEvaluator.evaluate((num(8), num(2), op('/'))) == 4.0
    assert RPNEvaluator.evaluate((num(2), num(3), op('^'))) == 8.0


def test_nested_program():
    assert RPNEvaluator.evaluate(parse_postfix("3 4 2 * 1 5 - 2 ^ / +")) == 3.5


def test_result_is_python_float():
    assert type(RPNEvaluator.evaluate((num(1), num(2), op('+')))) is float


@pytest.mark.parametrize("program", [
    (op('+'),),
    (num(3), op('+')),
    (num(3), num(4)),
    (),
    (num(1), num(2), op('+'), op('*')),
])
def test_malformed_program(program):
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.evaluate(program)


def test_parenthesis_in_program():
    with pytest.raises(MalformedExpressionError):
        RPNEvaluator.evaluate((num(1), LEFT_PAREN))


def test_division_by_zero_raises_by_default():
    with pytest.raises(DivisionByZeroError):
        RPNEvaluator.evaluate((num(1), num(0), op('/')))


def test_division_by_zero_ieee():
    assert RPNEvaluator.evaluate((num(1), num(0), op('/')), 'ieee') == math.inf
    assert RPNEvaluator.evaluate(parse_postfix("0 1 - 0 /"), 'ieee') == -math.inf
    assert math.isnan(RPNEvaluator.evaluate((num(0), num(0), op('/')), 'ieee'))


def test_power_float_semantics():
    assert Operators.pow(2.0, -1.0) == 0.5
    assert Operators.pow(2.0, 0.5) == pytest.approx(math.sqrt(2))
    assert math.isnan(Operators.pow(-8.0, 1.0 / 3.0))
    assert Operators.pow(10.0, 400.0) == math.inf


def test_apply_dispatch():
    assert Operators.apply('+', 1.5, 2.0) == 3.5
    assert Operators.apply('*', 3.0, 4.0) == 12.0
    with pytest.raises(ValueError):
        Operators.apply('%', 1.0, 2.0)


def test_unknown_division_policy():
    with pytest.raises(ValueError):
        RPNEvaluator.evaluate((num(1), num(2), op('+')), 'bogus')
    with pytest.raises(ValueError):
        Operators.div(1.0, 0.0, 'bogus')
    with pytest.raises(ValueError):
        Operators.apply('/', 1.0, 2.0, 'IEEE')
