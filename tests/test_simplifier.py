import pytest

from symbolic_calculus import (
    parse, simplify, simplify_fully, simplify_node, to_infix, differentiate, evaluate,
    MathDomainError, CalculusSettings
)
from symbolic_calculus.expression_tree import BinaryOpNode, NumberNode, VariableNode, OpType


def simplified(text, settings=None):
    equation = parse(text)
    assert simplify(equation, settings) is None
    return to_infix(equation)


@pytest.mark.parametrize("text, expected", [
    ("x + 0", "x"),
    ("0 + x", "x"),
    ("x - 0", "x"),
    ("0 - x", "(-1 * x)"),
    ("x - x", "0"),
    ("x + x", "(2 * x)"),
    ("x * 1", "x"),
    ("1 * x", "x"),
    ("x * 0", "0"),
    ("0 * sin(x)", "0"),
    ("x * x", "(x ^ 2)"),
    ("0 / x", "0"),
    ("x / 1", "x"),
    ("x / x", "1"),
    ("x ^ 1", "x"),
    ("1 ^ x", "1"),
    ("0 ^ x", "0"),
    ("x ^ 0", "(x ^ 0)"),
    ("x + y", "(x + y)"),
    ("x - y", "(x - y)"),
    ("sin(x)", "sin(x)"),
])
def test_identity_rewrites(text, expected):
    assert simplified(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("2 + 3 * 4", "14"),
    ("sin(0)", "0"),
    ("x * (2 + 3)", "(x * 5)"),
    ("ln(1) + x", "x"),
    ("(1 + 1) * x", "(2 * x)"),
    ("sqrt(16) ^ 0.5", "2"),
])
def test_constant_folding(text, expected):
    assert simplified(text) == expected


def test_rewrites_compose_bottom_up():
    assert simplified("x * 0 + 1") == "1"
    assert simplified("(x - x) * y + z / 1") == "z"
    assert simplified("sin(x * 1 + 0)") == "sin(x)"


def test_zero_and_one_checks_use_epsilon():
    assert simplified("x + 0.0000000001") == "x"
    assert simplified("x * 1.0000000001") == "x"
    assert simplified("x + 0.001") == "(x + 0.001)"
    assert simplified("x + 0.001", CalculusSettings(epsilon=0.01)) == "x"


def test_power_rewrites_need_exact_literals():
    assert simplified("x ^ 1.0000000001") == "(x ^ 1.0000000001)"


def test_division_by_literal_zero():
    with pytest.raises(MathDomainError):
        simplify(parse("x / 0"))


def test_folding_domain_error():
    with pytest.raises(MathDomainError):
        simplify(parse("ln(0) + x"))
    with pytest.raises(MathDomainError):
        simplify(parse("sqrt(-4)"))


def test_simplify_preserves_value():
    equation = differentiate(parse("x^3 * ln(x) + x / (x + 1)"))
    before = evaluate(equation, [1.7])
    simplify(equation)
    assert evaluate(equation, [1.7]) == pytest.approx(before)


def test_simplify_fully_counts_passes():
    equation = parse("x * 0 + 1")
    assert simplify_fully(equation) == 2
    assert to_infix(equation) == "1"

    untouched = parse("x + y")
    assert simplify_fully(untouched) == 1


def test_simplify_fully_reaches_fixed_point():
    equation = differentiate(differentiate(parse("sin(x) * x ^ 2")))
    simplify_fully(equation)
    snapshot = equation.copy()
    simplify(equation)
    assert equation == snapshot


def test_simplify_fully_pass_limit():
    with pytest.raises(ValueError):
        simplify_fully(parse("x"), max_passes=0)
    equation = parse("x * 0 + 1")
    assert simplify_fully(equation, max_passes=1) == 1


def test_simplify_node_on_bare_tree():
    tree = BinaryOpNode(OpType.ADD, VariableNode(0), NumberNode(0))
    assert simplify_node(tree) == VariableNode(0)
