import math

import pytest

from symbolic_calculus import (
    parse, expand_taylor, evaluate, simplify, to_infix, VariableCountError,
    MathDomainError, NumberNode
)


def test_sine_maclaurin_order_three():
    polynomial = expand_taylor(parse("sin(x)"), 3)
    assert evaluate(polynomial, [0.1]) == pytest.approx(math.sin(0.1), abs=1e-3)
    assert evaluate(polynomial, [0.1]) == pytest.approx(0.1 - 0.1 ** 3 / 6)


def test_polynomial_is_reproduced_exactly():
    equation = parse("x^3 - 2 * x + 5")
    polynomial = expand_taylor(equation, 3)
    for x in (-1.5, 0.0, 0.7, 2.0):
        assert evaluate(polynomial, [x]) == pytest.approx(evaluate(equation, [x]))


def test_term_layout_is_left_nested():
    polynomial = expand_taylor(parse("x"), 1)
    assert to_infix(polynomial) == "(0 + (1 * (x ^ 1)))"
    simplify(polynomial)
    assert to_infix(polynomial) == "x"


def test_order_zero_is_the_value():
    polynomial = expand_taylor(parse("cos(x) + 2"), 0)
    assert polynomial.root == NumberNode(3)


def test_expansion_about_a_point():
    equation = parse("ln(x)")
    polynomial = expand_taylor(equation, 4, point=1.0)
    assert "(x - 1)" in to_infix(polynomial)
    assert evaluate(polynomial, [1.1]) == pytest.approx(math.log(1.1), abs=1e-5)


def test_exponential_via_power():
    polynomial = expand_taylor(parse("2.718281828459045 ^ x"), 6)
    assert evaluate(polynomial, [0.5]) == pytest.approx(math.exp(0.5), abs=1e-4)


def test_keeps_variable_table():
    equation = parse("sin(t)")
    polynomial = expand_taylor(equation, 2)
    assert polynomial.variable_names == ["t"]
    assert "t" in to_infix(polynomial)


def test_constant_equation():
    polynomial = expand_taylor(parse("2 * 3"), 5)
    assert polynomial.root == NumberNode(6)
    assert polynomial.variable_names == []


def test_rejects_more_than_one_variable():
    with pytest.raises(VariableCountError) as info:
        expand_taylor(parse("x * y"), 2)
    assert info.value.n_variables == 2


def test_rejects_negative_order():
    with pytest.raises(ValueError):
        expand_taylor(parse("x"), -1)


def test_derivative_undefined_at_point():
    with pytest.raises(MathDomainError):
        expand_taylor(parse("ln(x)"), 2)
