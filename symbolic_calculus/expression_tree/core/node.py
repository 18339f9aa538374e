import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple
from .operators import (
  NodeType, OpType, BINARY_OPS, UNARY_OPS, OP_SYMBOLS,
  evaluate_variable_batch, evaluate_number_batch,
  evaluate_binary_op_batch, evaluate_unary_op_batch
)
from ...errors import ArityError


def format_number(value: float, precision: Optional[int] = None) -> str:
  """Positional (never scientific) text that the parser reads back"""
  if precision is None:
    return np.format_float_positional(value, trim='-')
  return np.format_float_positional(value, precision=precision, unique=True, trim='-')


class Node(ABC):
  """Base node class for expression trees"""

  __slots__ = ()

  @property
  @abstractmethod
  def node_type(self) -> NodeType:
    pass

  @property
  def left(self) -> Optional['Node']:
    return None

  @property
  def right(self) -> Optional['Node']:
    return None

  def children(self) -> Tuple['Node', ...]:
    return ()

  def is_leaf(self) -> bool:
    return not self.children()

  @abstractmethod
  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self, symbols: Sequence[sp.Symbol]) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    return 1 + sum(child.size() for child in self.children())

  def depth(self) -> int:
    """Leaf nodes have depth 1"""
    children = self.children()
    if not children:
      return 1
    return 1 + max(child.depth() for child in children)

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if self.node_type != other.node_type:
      return False
    return self._key() == other._key()

  def __hash__(self) -> int:
    return hash(self._key())

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class NumberNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    self.value = float(value)

  @property
  def node_type(self) -> NodeType:
    return NodeType.NUMBER

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    return evaluate_number_batch(X.shape[0], self.value)

  def to_string(self) -> str:
    return format_number(self.value)

  def copy(self) -> 'NumberNode':
    return NumberNode(self.value)

  def _key(self) -> tuple:
    return (NodeType.NUMBER, self.value)

  def to_sympy(self, symbols):
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)


class VariableNode(Node):
  __slots__ = ('index',)

  def __init__(self, index: int):
    if index < 0:
      raise ArityError(f"variable index must be non-negative, got {index}")
    self.index = index

  @property
  def node_type(self) -> NodeType:
    return NodeType.VARIABLE

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    return evaluate_variable_batch(X, self.index)

  def to_string(self) -> str:
    return f"X{self.index}"

  def copy(self) -> 'VariableNode':
    return VariableNode(self.index)

  def _key(self) -> tuple:
    return (NodeType.VARIABLE, self.index)

  def to_sympy(self, symbols):
    return symbols[self.index]


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left_child', 'right_child')

  def __init__(self, operator: OpType, left: Node, right: Node):
    if operator not in BINARY_OPS:
      raise ArityError(f"{operator!r} is not a binary operator")
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise ArityError(f"binary operator '{OP_SYMBOLS[operator]}' needs two operands")
    self.operator = OpType(operator)
    self.left_child = left
    self.right_child = right

  @property
  def node_type(self) -> NodeType:
    return NodeType.BINARY_OP

  @property
  def left(self) -> Node:
    return self.left_child

  @property
  def right(self) -> Node:
    return self.right_child

  def children(self) -> Tuple[Node, ...]:
    return (self.left_child, self.right_child)

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    left_val = self.left_child.evaluate_batch(X)
    right_val = self.right_child.evaluate_batch(X)
    return evaluate_binary_op_batch(left_val, right_val, int(self.operator))

  def to_string(self) -> str:
    return f"({self.left_child.to_string()} {OP_SYMBOLS[self.operator]} {self.right_child.to_string()})"

  def copy(self) -> 'BinaryOpNode':
    return BinaryOpNode(self.operator, self.left_child.copy(), self.right_child.copy())

  def _key(self) -> tuple:
    return (NodeType.BINARY_OP, self.operator, self.left_child._key(), self.right_child._key())

  def to_sympy(self, symbols):
    left = self.left_child.to_sympy(symbols)
    right = self.right_child.to_sympy(symbols)
    if self.operator == OpType.ADD:
      return sp.Add(left, right)
    elif self.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif self.operator == OpType.MUL:
      return sp.Mul(left, right)
    elif self.operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    elif self.operator == OpType.POW:
      return sp.Pow(left, right)
    raise ArityError(f"to_sympy reached unexpected binary operation {self.operator!r}")


_SYMPY_FUNCTIONS = {
  OpType.LN: sp.log,
  OpType.SQRT: sp.sqrt,
  OpType.COS: sp.cos,
  OpType.SIN: sp.sin,
  OpType.TG: sp.tan,
  OpType.CTG: sp.cot,
  OpType.ARCSIN: sp.asin,
  OpType.ARCCOS: sp.acos,
  OpType.ARCTG: sp.atan,
  OpType.ARCCTG: sp.acot,
}


class UnaryOpNode(Node):
  """Function application; the argument sits in the right slot"""

  __slots__ = ('operator', 'operand')

  def __init__(self, operator: OpType, operand: Node):
    if operator not in UNARY_OPS:
      raise ArityError(f"{operator!r} is not a unary operator")
    if not isinstance(operand, Node):
      raise ArityError(f"function '{OP_SYMBOLS[operator]}' needs an argument")
    self.operator = OpType(operator)
    self.operand = operand

  @property
  def node_type(self) -> NodeType:
    return NodeType.UNARY_OP

  @property
  def right(self) -> Node:
    return self.operand

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    operand_val = self.operand.evaluate_batch(X)
    return evaluate_unary_op_batch(operand_val, int(self.operator))

  def to_string(self) -> str:
    return f"{OP_SYMBOLS[self.operator]}({self.operand.to_string()})"

  def copy(self) -> 'UnaryOpNode':
    return UnaryOpNode(self.operator, self.operand.copy())

  def _key(self) -> tuple:
    return (NodeType.UNARY_OP, self.operator, self.operand._key())

  def to_sympy(self, symbols):
    return _SYMPY_FUNCTIONS[self.operator](self.operand.to_sympy(symbols))
