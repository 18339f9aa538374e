"""
Algebraic simplification

One post-order pass over the tree: children first, then constant folding of
the node if all of its operands are numbers, otherwise the opcode's identity
rewrite from the operator table. The equation is rewritten in place by
reassigning child slots and the root slot.

Nodes created by a rewrite are not simplified again in the same pass;
``simplify_fully`` repeats passes until one of them changes nothing.
"""

import math
from typing import Optional

from .errors import UnknownOperatorError, depth_guard
from .expression_tree import Equation
from .expression_tree.core.node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode
from .expression_tree.operator_table import get_operator
from .logging_system import log_step, log_warning
from .settings import CalculusSettings, resolve_settings


class _SimplificationPass:
    """One post-order pass; counts how many nodes were replaced"""

    def __init__(self, epsilon: float):
        self.epsilon = epsilon
        self.rewrites = 0

    def run(self, node: Node) -> Node:
        if isinstance(node, (NumberNode, VariableNode)):
            return node

        if isinstance(node, BinaryOpNode):
            node.left_child = self.run(node.left_child)
            node.right_child = self.run(node.right_child)
            operator = get_operator(node.operator)
            if isinstance(node.left_child, NumberNode) and isinstance(node.right_child, NumberNode):
                return self._fold(operator.evaluate(node.left_child.value, node.right_child.value))
        elif isinstance(node, UnaryOpNode):
            node.operand = self.run(node.operand)
            operator = get_operator(node.operator)
            if isinstance(node.operand, NumberNode):
                return self._fold(operator.evaluate(math.nan, node.operand.value))
        else:
            raise UnknownOperatorError(f"cannot simplify node of type {type(node).__name__}")

        replacement = operator.simplify(node, self.epsilon)
        if replacement is not node:
            self.rewrites += 1
        return replacement

    def _fold(self, value: float) -> NumberNode:
        self.rewrites += 1
        return NumberNode(value)


def simplify_node(node: Node, settings: Optional[CalculusSettings] = None) -> Node:
    """Simplify a bare tree; returns the node that replaces ``node``"""
    settings = resolve_settings(settings)
    with depth_guard("simplify"):
        return _SimplificationPass(settings.epsilon).run(node)


def _run_pass(equation: Equation, settings: CalculusSettings) -> int:
    simplification = _SimplificationPass(settings.epsilon)
    with depth_guard("simplify"):
        equation.root = simplification.run(equation.root)
    return simplification.rewrites


def simplify(equation: Equation, settings: Optional[CalculusSettings] = None) -> None:
    """
    Simplify an equation in place with a single pass.

    Raises:
        MathDomainError: constant folding or ``x / 0`` hit a domain error
    """
    settings = resolve_settings(settings)
    size_before = equation.size()
    rewrites = _run_pass(equation, settings)
    log_step(f"Simplified {size_before} -> {equation.size()} nodes ({rewrites} rewrites)")


def simplify_fully(equation: Equation, max_passes: Optional[int] = None,
                   settings: Optional[CalculusSettings] = None) -> int:
    """
    Repeat simplification passes until a pass rewrites nothing.

    Returns:
        Number of passes run, including the final pass that changed nothing
    """
    settings = resolve_settings(settings)
    limit = max_passes if max_passes is not None else settings.max_simplify_passes
    if limit <= 0:
        raise ValueError("max_passes must be a positive integer")

    for passes in range(1, limit + 1):
        if _run_pass(equation, settings) == 0:
            log_step(f"Simplification reached a fixed point after {passes} passes")
            return passes

    log_warning(f"Simplification stopped after {limit} passes without reaching a fixed point")
    return limit
