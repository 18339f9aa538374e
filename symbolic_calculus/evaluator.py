"""
Numeric evaluation

``evaluate`` walks the tree post-order and applies the same evaluation
rules as constant folding, so it raises MathDomainError exactly where the
simplifier would. ``evaluate_batch`` evaluates many points at once with the
compiled kernels and marks domain violations with NaN instead.
"""

import math
from typing import Sequence, Union

import numpy as np

from .errors import UnknownOperatorError, depth_guard
from .expression_tree import Equation
from .expression_tree.core.node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode
from .expression_tree.operator_table import get_operator


def evaluate_node(node: Node, values: Sequence[float]) -> float:
    if isinstance(node, NumberNode):
        return node.value
    if isinstance(node, VariableNode):
        return float(values[node.index])
    if isinstance(node, BinaryOpNode):
        left = evaluate_node(node.left_child, values)
        right = evaluate_node(node.right_child, values)
        return get_operator(node.operator).evaluate(left, right)
    if isinstance(node, UnaryOpNode):
        operand = evaluate_node(node.operand, values)
        return get_operator(node.operator).evaluate(math.nan, operand)
    raise UnknownOperatorError(f"cannot evaluate node of type {type(node).__name__}")


def evaluate(equation: Equation, values: Union[Sequence[float], np.ndarray] = ()) -> float:
    """
    Evaluate an equation at one point.

    Args:
        equation: Equation to evaluate
        values: One value per entry of ``equation.variable_names``

    Returns:
        The value as a Python float

    Raises:
        MathDomainError: an operator was applied outside its domain
    """
    values = np.asarray(values, dtype=np.float64).reshape(-1)
    if values.shape[0] < equation.n_variables:
        raise ValueError(f"expected {equation.n_variables} values for variables "
                         f"{equation.variable_names}, got {values.shape[0]}")
    with depth_guard("evaluate"):
        return evaluate_node(equation.root, values.tolist())


def evaluate_batch(equation: Equation, X: np.ndarray) -> np.ndarray:
    """
    Evaluate an equation at many points.

    Args:
        equation: Equation to evaluate
        X: Array of shape (n_samples, n_variables); a 1-D array is read as
           one column for single-variable equations

    Returns:
        Array of shape (n_samples,); NaN where a domain error occurred
    """
    X = np.asarray(X, dtype=np.float64)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise ValueError("X must be a 1-D or 2-D array")
    if X.shape[1] < equation.n_variables:
        raise ValueError(f"expected {equation.n_variables} columns, got {X.shape[1]}")
    with depth_guard("evaluate_batch"):
        return equation.root.evaluate_batch(np.ascontiguousarray(X))
