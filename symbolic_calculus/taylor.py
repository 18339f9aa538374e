"""
Taylor / Maclaurin expansion

Chains the differentiator, simplifier and evaluator: the n-th coefficient
is the n-th derivative evaluated at the expansion point divided by n!.
"""

from typing import Optional

from .differentiator import differentiate
from .errors import VariableCountError
from .evaluator import evaluate
from .expression_tree import Equation
from .expression_tree.core.node import Node, NumberNode, VariableNode, BinaryOpNode
from .expression_tree.core.operators import OpType
from .logging_system import log_step
from .settings import CalculusSettings, resolve_settings
from .simplifier import simplify


def _term_base(point: float) -> Node:
    if point == 0.0:
        return VariableNode(0)
    return BinaryOpNode(OpType.SUB, VariableNode(0), NumberNode(point))


def expand_taylor(equation: Equation, order: int, point: float = 0.0,
                  settings: Optional[CalculusSettings] = None) -> Equation:
    """
    Truncated Taylor polynomial of a single-variable equation.

    The polynomial is built left to right, so the running sum is always the
    left operand of the outermost '+':
    ``((c0 + c1 * x ^ 1) + c2 * x ^ 2) + ...``

    Args:
        equation: Equation with at most one variable
        order: Highest power kept
        point: Expansion point; 0 gives the Maclaurin series

    Returns:
        New, unsimplified Equation with a copy of the input's variable table

    Raises:
        VariableCountError: the equation has more than one variable
        MathDomainError: a derivative is undefined at ``point``
    """
    if equation.n_variables > 1:
        raise VariableCountError(
            f"Taylor expansion supports one variable, got {equation.variable_names}",
            equation.n_variables)
    if not isinstance(order, int) or order < 0:
        raise ValueError("order must be a non-negative integer")

    settings = resolve_settings(settings)
    at = [float(point)]
    total: Node = NumberNode(evaluate(equation, at))

    if equation.n_variables == 0:
        log_step("Taylor expansion of a constant equation has no variable terms")
        return equation.with_root(total)

    derivative = differentiate(equation, 0)
    simplify(derivative, settings)
    n_fact = 1
    for n in range(1, order + 1):
        coefficient = evaluate(derivative, at)
        n_fact *= n
        log_step(f"Taylor coefficient {n}: f^({n})({point}) = {coefficient}")
        term = BinaryOpNode(OpType.MUL,
                            NumberNode(coefficient / n_fact),
                            BinaryOpNode(OpType.POW, _term_base(float(point)), NumberNode(n)))
        total = BinaryOpNode(OpType.ADD, total, term)
        if n < order:
            derivative = differentiate(derivative, 0)
            simplify(derivative, settings)

    return equation.with_root(total)
