"""
Symbolic differentiation

Structural recursion over the tree: leaves are handled here, operator nodes
are dispatched to their operator table rule. The result is always a brand
new tree and is not simplified.
"""

from .errors import EquationError, UnknownOperatorError, depth_guard
from .expression_tree import Equation
from .expression_tree.core.node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode
from .expression_tree.operator_table import get_operator
from .logging_system import log_step


def differentiate_node(node: Node, target: int) -> Node:
    """Derivative of ``node`` with respect to the variable with index ``target``"""

    def diff(current: Node) -> Node:
        if isinstance(current, NumberNode):
            return NumberNode(0)
        if isinstance(current, VariableNode):
            return NumberNode(1 if current.index == target else 0)
        if isinstance(current, (BinaryOpNode, UnaryOpNode)):
            return get_operator(current.operator).differentiate(current, target, diff)
        raise UnknownOperatorError(f"cannot differentiate node of type {type(current).__name__}")

    return diff(node)


def differentiate(equation: Equation, var_index: int = 0) -> Equation:
    """
    Differentiate an equation with respect to one of its variables.

    Args:
        equation: Equation to differentiate; it is left untouched
        var_index: Index into ``equation.variable_names``

    Returns:
        New Equation with a copy of the same variable table
    """
    if not 0 <= var_index < max(equation.n_variables, 1):
        raise EquationError(f"variable index {var_index} outside the variable table "
                            f"{equation.variable_names}")

    with depth_guard("differentiate"):
        root = differentiate_node(equation.root, var_index)

    name = equation.variable_names[var_index] if equation.n_variables else '<none>'
    log_step(f"Differentiated {equation.size()} nodes with respect to {name}: "
             f"{root.size()} nodes")
    return equation.with_root(root)
