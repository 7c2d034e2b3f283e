"""Test the reversed-sequence reducer and operator application."""
import math

import pytest

from rpn_calc.common.tokens import NumericValue, Operator, OperatorKind
from rpn_calc.evaluator.reducer import apply_operator, reduce

ADD = Operator(kind=OperatorKind.ADD)
SUB = Operator(kind=OperatorKind.SUB)
MUL = Operator(kind=OperatorKind.MUL)
DIV = Operator(kind=OperatorKind.DIV)


def num(value: float) -> NumericValue:
    return NumericValue(value=value)


@pytest.mark.parametrize("kind,a,b,expected", [
    (OperatorKind.ADD, 1.0, 2.0, 3.0),
    (OperatorKind.SUB, 2.0, 1.0, 1.0),
    (OperatorKind.MUL, 2.0, 3.0, 6.0),
    (OperatorKind.DIV, 3.0, 2.0, 1.5),
])
def test_apply_operator(kind: OperatorKind, a: float, b: float, expected: float) -> None:
    """Operators take the left operand first."""
    assert apply_operator(kind, a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    (1.0, 0.0, math.inf),
    (-1.0, 0.0, -math.inf),
    (1.0, -0.0, -math.inf),
])
def test_divide_by_zero_gives_infinity(a: float, b: float, expected: float) -> None:
    """Division by zero follows IEEE-754 instead of raising."""
    assert apply_operator(OperatorKind.DIV, a, b) == expected


def test_zero_divided_by_zero_is_nan() -> None:
    assert math.isnan(apply_operator(OperatorKind.DIV, 0.0, 0.0))


def test_reduce_single_triple() -> None:
    """'2 1 -' reversed is [-, 1, 2] and folds to 2 - 1."""
    assert reduce([SUB, num(1.0), num(2.0)]) == [num(1.0)]


def test_reduce_adjacent_operators() -> None:
    """'1 2 3 + *' reversed: the inner '+' is folded first."""
    assert reduce([MUL, ADD, num(3.0), num(2.0), num(1.0)]) == [num(5.0)]


def test_reduce_operator_value_operator() -> None:
    """'2 2 * 4 + 2 /' reversed: an operator separated by one value."""
    tokens = [DIV, num(2.0), ADD, num(4.0), MUL, num(2.0), num(2.0)]
    assert reduce(tokens) == [num(4.0)]


def test_reduce_two_subexpressions() -> None:
    """'1 2 + 3 4 + *' folds both sums before the product."""
    tokens = [MUL, ADD, num(4.0), num(3.0), ADD, num(2.0), num(1.0)]
    assert reduce(tokens) == [num(21.0)]


@pytest.mark.parametrize("tokens", [
    [],
    [num(1.0)],
    [num(1.0), num(2.0)],
    [ADD, num(1.0)],
    [ADD],
])
def test_reduce_leaves_irreducible_shapes(tokens) -> None:
    """Shapes matching no rule are returned unchanged."""
    assert reduce(tokens) == tokens


def test_reduce_stops_when_tail_cannot_progress() -> None:
    """'1 + *' reversed: the tail '[+, 1]' cannot fold, so nothing changes."""
    tokens = [MUL, ADD, num(1.0)]
    assert reduce(tokens) == tokens


def test_reduce_leaves_extra_values() -> None:
    """'1 2 3 +' folds 2 + 3 and leaves the 1 behind."""
    assert reduce([ADD, num(3.0), num(2.0), num(1.0)]) == [num(5.0), num(1.0)]


def test_reduce_does_not_mutate_input() -> None:
    tokens = [ADD, num(2.0), num(1.0)]
    reduce(tokens)
    assert tokens == [ADD, num(2.0), num(1.0)]
