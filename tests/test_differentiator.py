import math

import pytest

from symbolic_calculus import (
    parse, differentiate, simplify, evaluate, to_infix, EquationError
)
from symbolic_calculus.expression_tree import SymPyConverter


def derivative_at(text, point, var_index=0):
    equation = parse(text)
    return evaluate(differentiate(equation, var_index), point)


def test_cubic_derivative():
    assert derivative_at("x^3", [2.0]) == pytest.approx(12.0)


def test_derivative_of_constant_and_variable():
    assert to_infix(differentiate(parse("5"))) == "0"
    assert to_infix(differentiate(parse("x"))) == "1"
    assert to_infix(differentiate(parse("y + x"), 1)) == "(0 + 1)"


def test_sum_rule_shape():
    equation = differentiate(parse("x^3 + sin(x)"))
    simplify(equation)
    assert to_infix(equation) == "((3 * (x ^ 2)) + cos(x))"


@pytest.mark.parametrize("text, point", [
    ("x^3 + sin(x)", [0.7]),
    ("x * cos(x)", [1.3]),
    ("(x + 1) / (x - 2)", [0.5]),
    ("2 ^ x", [1.5]),
    ("x ^ x", [1.2]),
    ("ln(x^2 + 1)", [0.4]),
    ("sqrt(3 * x + 1)", [2.0]),
    ("tg(x)", [0.3]),
    ("ctg(x)", [0.8]),
    ("arcsin(x / 2)", [0.6]),
    ("arccos(x)", [0.25]),
    ("arctg(x^2)", [1.1]),
    ("arcctg(x)", [0.9]),
    ("sin(cos(x)) * ln(x)", [2.2]),
])
def test_matches_sympy(text, point):
    equation = parse(text)
    converter = SymPyConverter(equation.variable_names)
    expected = converter.numeric(converter.derivative(equation.root, 0), point)

    assert derivative_at(text, point) == pytest.approx(expected, rel=1e-9, abs=1e-12)


def test_partial_derivatives():
    text = "x^2 * y + sin(y)"
    equation = parse(text)
    converter = SymPyConverter(equation.variable_names)
    point = [1.5, 0.5]
    for index in range(2):
        expected = converter.numeric(converter.derivative(equation.root, index), point)
        assert evaluate(differentiate(equation, index), point) == pytest.approx(expected)


def test_power_with_exponent_free_of_target():
    # y is constant with respect to x: d/dx x^y = y * x^(y - 1)
    equation = parse("x ^ y")
    value = evaluate(differentiate(equation, 0), [2.0, 3.0])
    assert value == pytest.approx(12.0)


def test_input_is_not_modified():
    equation = parse("x * sin(x) / (x + 1)")
    before = equation.copy()
    derivative = differentiate(equation)
    simplify(derivative)

    assert equation == before
    assert derivative.variable_names == equation.variable_names
    assert derivative.variable_names is not equation.variable_names


def test_arcctg_derivative_is_negative():
    assert derivative_at("arcctg(x)", [1.0]) == pytest.approx(-0.5)


def test_invalid_variable_index():
    with pytest.raises(EquationError):
        differentiate(parse("x + y"), 2)
    with pytest.raises(EquationError):
        differentiate(parse("x"), -1)


def test_second_derivative():
    second = differentiate(differentiate(parse("sin(x)")))
    assert evaluate(second, [0.5]) == pytest.approx(-math.sin(0.5))


def test_sine_derivative_at_zero():
    assert derivative_at("sin(x)", [0.0]) == pytest.approx(1.0)
