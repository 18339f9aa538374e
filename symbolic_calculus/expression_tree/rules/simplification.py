"""
Local identity rewrites, one per opcode.

A rule looks only at an operator node whose children are already
simplified and returns the node that should occupy its slot: the node
itself when nothing applies, one of its children ("lift up") or a fresh
number leaf ("collapse to constant"). Discarded subtrees are simply
dropped.
"""

from ..core.node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode
from ..core.operators import OpType
from ...errors import MathDomainError


def lift_up(node: BinaryOpNode, side: str) -> Node:
    """Replace ``node`` by one of its children; the sibling is discarded"""
    return node.left if side == 'left' else node.right


def collapse_to_constant(node: Node, value: float) -> NumberNode:
    """Replace ``node`` and everything below it by a number leaf"""
    return NumberNode(value)


def is_number(node: Node, value: float, epsilon: float = 0.0) -> bool:
    if not isinstance(node, NumberNode):
        return False
    if epsilon == 0.0:
        return node.value == value
    return abs(node.value - value) < epsilon


def same_variable(left: Node, right: Node) -> bool:
    return (isinstance(left, VariableNode) and isinstance(right, VariableNode)
            and left.index == right.index)


def simplify_add(node: BinaryOpNode, epsilon: float) -> Node:
    if is_number(node.left, 0.0, epsilon):
        return lift_up(node, 'right')
    if is_number(node.right, 0.0, epsilon):
        return lift_up(node, 'left')
    if same_variable(node.left, node.right):
        # x + x -> 2 * x
        return BinaryOpNode(OpType.MUL, NumberNode(2), node.left)
    return node


def simplify_sub(node: BinaryOpNode, epsilon: float) -> Node:
    if is_number(node.left, 0.0, epsilon):
        # 0 - x -> (-1) * x
        return BinaryOpNode(OpType.MUL, NumberNode(-1), node.right)
    if is_number(node.right, 0.0, epsilon):
        return lift_up(node, 'left')
    if same_variable(node.left, node.right):
        return collapse_to_constant(node, 0)
    return node


def simplify_mul(node: BinaryOpNode, epsilon: float) -> Node:
    if is_number(node.left, 0.0, epsilon) or is_number(node.right, 0.0, epsilon):
        return collapse_to_constant(node, 0)
    if is_number(node.left, 1.0, epsilon):
        return lift_up(node, 'right')
    if is_number(node.right, 1.0, epsilon):
        return lift_up(node, 'left')
    if same_variable(node.left, node.right):
        # x * x -> x ^ 2
        return BinaryOpNode(OpType.POW, node.left, NumberNode(2))
    return node


def simplify_div(node: BinaryOpNode, epsilon: float) -> Node:
    if is_number(node.right, 0.0, epsilon):
        raise MathDomainError("/: division by zero", '/')
    if is_number(node.left, 0.0, epsilon):
        return collapse_to_constant(node, 0)
    if is_number(node.right, 1.0, epsilon):
        return lift_up(node, 'left')
    if same_variable(node.left, node.right):
        return collapse_to_constant(node, 1)
    return node


def simplify_pow(node: BinaryOpNode, epsilon: float) -> Node:
    # exact literals only
    if is_number(node.right, 1.0):
        return lift_up(node, 'left')
    if is_number(node.left, 1.0):
        return collapse_to_constant(node, 1)
    if is_number(node.left, 0.0):
        return collapse_to_constant(node, 0)
    return node


def simplify_function(node: UnaryOpNode, epsilon: float) -> Node:
    """Functions have no identity rewrites; only constant folding applies"""
    return node
