"""
Differentiation rules, one per opcode.

Every rule receives the operator node, the index of the variable being
differentiated against and the recursive ``diff`` callable, and returns a
freshly built tree. Operands that appear in the result are always copied so
the input tree is never shared with, or modified by, the derivative.
"""

from typing import Callable

from ..core.node import Node, NumberNode, BinaryOpNode, UnaryOpNode
from ..core.operators import OpType
from ..utils.tree_utils import depends_on_variable

DiffFn = Callable[[Node], Node]


# Builders
def num(value: float) -> NumberNode:
    return NumberNode(value)


def add(left: Node, right: Node) -> BinaryOpNode:
    return BinaryOpNode(OpType.ADD, left, right)


def sub(left: Node, right: Node) -> BinaryOpNode:
    return BinaryOpNode(OpType.SUB, left, right)


def mul(left: Node, right: Node) -> BinaryOpNode:
    return BinaryOpNode(OpType.MUL, left, right)


def div(left: Node, right: Node) -> BinaryOpNode:
    return BinaryOpNode(OpType.DIV, left, right)


def power(left: Node, right: Node) -> BinaryOpNode:
    return BinaryOpNode(OpType.POW, left, right)


def func(op: OpType, operand: Node) -> UnaryOpNode:
    return UnaryOpNode(op, operand)


def square(node: Node) -> BinaryOpNode:
    return power(node.copy(), num(2))


# Arithmetic
def diff_add(node: BinaryOpNode, target: int, diff: DiffFn) -> Node:
    return add(diff(node.left), diff(node.right))


def diff_sub(node: BinaryOpNode, target: int, diff: DiffFn) -> Node:
    return sub(diff(node.left), diff(node.right))


def diff_mul(node: BinaryOpNode, target: int, diff: DiffFn) -> Node:
    """Product rule: d(l)*r + l*d(r)"""
    return add(mul(diff(node.left), node.right.copy()),
               mul(node.left.copy(), diff(node.right)))


def diff_div(node: BinaryOpNode, target: int, diff: DiffFn) -> Node:
    """Quotient rule: (d(l)*r - l*d(r)) / r^2"""
    numerator = sub(mul(diff(node.left), node.right.copy()),
                    mul(node.left.copy(), diff(node.right)))
    return div(numerator, square(node.right))


def diff_pow(node: BinaryOpNode, target: int, diff: DiffFn) -> Node:
    base, exponent = node.left, node.right

    if not depends_on_variable(exponent, target):
        # r * l^(r-1) * d(l)
        return mul(mul(exponent.copy(),
                       power(base.copy(), sub(exponent.copy(), num(1)))),
                   diff(base))

    if not depends_on_variable(base, target):
        # l^r * ln(l) * d(r)
        return mul(mul(node.copy(), func(OpType.LN, base.copy())),
                   diff(exponent))

    # l^r = e^(r*ln(l))  =>  l^r * (d(r)*ln(l) + r*d(l)/l)
    inner = add(mul(diff(exponent), func(OpType.LN, base.copy())),
                div(mul(exponent.copy(), diff(base)), base.copy()))
    return mul(node.copy(), inner)


# Functions; the argument is the right operand
def diff_ln(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(diff(node.operand), node.operand.copy())


def diff_sqrt(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(diff(node.operand), mul(num(2), node.copy()))


def diff_sin(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return mul(func(OpType.COS, node.operand.copy()), diff(node.operand))


def diff_cos(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return mul(mul(num(-1), func(OpType.SIN, node.operand.copy())),
               diff(node.operand))


def diff_tg(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(diff(node.operand), square(func(OpType.COS, node.operand.copy())))


def diff_ctg(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(mul(num(-1), diff(node.operand)),
               square(func(OpType.SIN, node.operand.copy())))


def _sqrt_one_minus_square(operand: Node) -> Node:
    return func(OpType.SQRT, sub(num(1), square(operand)))


def diff_arcsin(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(diff(node.operand), _sqrt_one_minus_square(node.operand))


def diff_arccos(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(mul(num(-1), diff(node.operand)),
               _sqrt_one_minus_square(node.operand))


def diff_arctg(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(diff(node.operand), add(num(1), square(node.operand)))


def diff_arcctg(node: UnaryOpNode, target: int, diff: DiffFn) -> Node:
    return div(mul(num(-1), diff(node.operand)),
               add(num(1), square(node.operand)))
