import math

import numpy as np
import pytest

from symbolic_calculus import (
    parse, evaluate, evaluate_batch, MathDomainError, DepthLimitError, Equation
)
from symbolic_calculus.expression_tree import BinaryOpNode, NumberNode, VariableNode, OpType


def test_constant_expression():
    assert evaluate(parse("2 + 3 * 4")) == 14.0


def test_evaluate_with_variables():
    equation = parse("x^3 + sin(x)")
    assert evaluate(equation, [2.0]) == pytest.approx(8.0 + math.sin(2.0))
    assert equation.evaluate([2.0]) == pytest.approx(8.0 + math.sin(2.0))


def test_values_follow_variable_table():
    equation = parse("y - x")
    assert equation.variable_names == ["y", "x"]
    assert evaluate(equation, [10.0, 4.0]) == 6.0


def test_too_few_values():
    with pytest.raises(ValueError):
        evaluate(parse("x + y"), [1.0])


@pytest.mark.parametrize("text, values", [
    ("1 / x", [0.0]),
    ("ln(x)", [-1.0]),
    ("ln(x)", [0.0]),
    ("sqrt(x)", [-1.0]),
    ("(-8) ^ (1 / 3)", []),
    ("0 ^ -1", []),
    ("arcsin(x)", [2.0]),
    ("arccos(x)", [-2.0]),
    ("ctg(x)", [0.0]),
])
def test_domain_errors(text, values):
    with pytest.raises(MathDomainError):
        evaluate(parse(text), values)


def test_integer_powers_of_negative_base():
    assert evaluate(parse("x ^ 3"), [-2.0]) == -8.0
    assert evaluate(parse("x ^ -2"), [-2.0]) == 0.25


def test_batch_matches_scalar():
    equation = parse("x^2 * cos(y) + ln(x + 2) / (y + 3)")
    rng = np.random.default_rng(0)
    X = rng.uniform(-1.0, 1.0, size=(25, 2))

    batch = evaluate_batch(equation, X)
    scalar = np.array([evaluate(equation, row) for row in X])
    np.testing.assert_allclose(batch, scalar, rtol=1e-12, atol=1e-12)


def test_batch_accepts_one_dimensional_input():
    result = evaluate_batch(parse("2 * x"), np.array([0.0, 1.0, 2.5]))
    np.testing.assert_allclose(result, [0.0, 2.0, 5.0])


def test_batch_marks_domain_errors_with_nan():
    result = evaluate_batch(parse("1 / x + sqrt(x)"), np.array([[0.0], [-1.0], [4.0]]))
    assert np.isnan(result[0])
    assert np.isnan(result[1])
    assert result[2] == pytest.approx(2.25)


def test_batch_column_check():
    with pytest.raises(ValueError):
        evaluate_batch(parse("x + y"), np.ones((3, 1)))


def test_deep_tree_reports_depth_limit():
    node = VariableNode(0)
    for _ in range(20000):
        node = BinaryOpNode(OpType.ADD, node, NumberNode(1))
    with pytest.raises(DepthLimitError):
        evaluate(Equation(node, ["x"]), [0.0])
