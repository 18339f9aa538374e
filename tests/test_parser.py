import pytest

from symbolic_calculus import parse, to_infix, EquationSyntaxError, CalculusSettings
from symbolic_calculus.expression_tree import (
    NumberNode, VariableNode, BinaryOpNode, UnaryOpNode, OpType
)


def test_parse_polynomial_with_function():
    equation = parse("x^3 + sin(x)")

    assert equation.variable_names == ["x"]
    expected = BinaryOpNode(
        OpType.ADD,
        BinaryOpNode(OpType.POW, VariableNode(0), NumberNode(3)),
        UnaryOpNode(OpType.SIN, VariableNode(0)),
    )
    assert equation.root == expected
    assert to_infix(equation) == "((x ^ 3) + sin(x))"


def test_variables_indexed_by_first_appearance():
    equation = parse("y + x * y + z")
    assert equation.variable_names == ["y", "x", "z"]
    assert to_infix(equation) == "((y + (x * y)) + z)"


@pytest.mark.parametrize("text, expected", [
    ("1 + 2 * 3", "(1 + (2 * 3))"),
    ("(1 + 2) * 3", "((1 + 2) * 3)"),
    ("8 / 4 / 2", "((8 / 4) / 2)"),
    ("10 - 4 - 3", "((10 - 4) - 3)"),
    ("2 ^ 3 ^ 2", "((2 ^ 3) ^ 2)"),
    ("2 * x ^ 2", "(2 * (x ^ 2))"),
    ("ln(x) / sqrt(x)", "(ln(x) / sqrt(x))"),
    ("arcctg(tg(x))", "arcctg(tg(x))"),
])
def test_precedence_and_left_associativity(text, expected):
    assert to_infix(parse(text)) == expected


def test_signed_number_literals():
    assert parse("x * -2").root == BinaryOpNode(OpType.MUL, VariableNode(0), NumberNode(-2))
    assert parse("x - -2.5").root == BinaryOpNode(OpType.SUB, VariableNode(0), NumberNode(-2.5))
    assert parse("-3").root == NumberNode(-3)
    # a separated '-' is never a sign
    assert to_infix(parse("x-2")) == "(x - 2)"


def test_whitespace_is_ignored():
    assert parse("  sin ( x )+1 ") == parse("sin(x) + 1")


def test_number_literal_keeps_fraction():
    assert parse("0.125").root == NumberNode(0.125)


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "(x + 1",
    "x + 1)",
    "x +",
    "* x",
    "-x",
    "foo(x)",
    "sin x",
    "sin",
    "x $ 1",
    "2 3",
    "x ()",
    "1.",
])
def test_malformed_input_raises(text):
    with pytest.raises(EquationSyntaxError):
        parse(text)


def test_error_reports_position():
    with pytest.raises(EquationSyntaxError) as info:
        parse("x + #")
    assert info.value.position == 4
    assert "position 4" in str(info.value)


def test_nesting_depth_is_bounded():
    deep = "(" * 101 + "x" + ")" * 101
    with pytest.raises(EquationSyntaxError):
        parse(deep)

    equation = parse(deep, CalculusSettings(max_nesting_depth=200))
    assert equation.root == VariableNode(0)


def test_nested_functions_count_towards_depth():
    text = "sin(" * 5 + "x" + ")" * 5
    with pytest.raises(EquationSyntaxError):
        parse(text, CalculusSettings(max_nesting_depth=4))
    assert parse(text, CalculusSettings(max_nesting_depth=5)).depth() == 6


def test_non_string_input():
    with pytest.raises(TypeError):
        parse(42)
