import numpy as np
from typing import Optional
from ..core.node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode
from ..core.operators import BINARY_OPS, UNARY_OPS
from ...errors import ArityError, UnknownOperatorError, CalculusError


class ExpressionValidator:

  @staticmethod
  def validate(node: Node, n_variables: Optional[int] = None):
    """Raise if the tree breaks the arity invariant or uses unknown variables"""
    stack = [node]
    while stack:
      current = stack.pop()
      if isinstance(current, NumberNode):
        continue
      elif isinstance(current, VariableNode):
        if n_variables is not None and current.index >= n_variables:
          raise ArityError(f"variable index {current.index} outside the variable table "
                           f"of size {n_variables}")
      elif isinstance(current, BinaryOpNode):
        if current.operator not in BINARY_OPS:
          raise UnknownOperatorError(f"binary node carries {current.operator!r}")
        if not isinstance(current.left_child, Node) or not isinstance(current.right_child, Node):
          raise ArityError("binary node is missing an operand")
        stack.append(current.left_child)
        stack.append(current.right_child)
      elif isinstance(current, UnaryOpNode):
        if current.operator not in UNARY_OPS:
          raise UnknownOperatorError(f"function node carries {current.operator!r}")
        if not isinstance(current.operand, Node):
          raise ArityError("function node is missing its argument")
        stack.append(current.operand)
      else:
        raise UnknownOperatorError(f"unknown node type {type(current).__name__}")

  @staticmethod
  def is_valid_expression(node: Node, n_variables: Optional[int] = None,
                          X: Optional[np.ndarray] = None) -> bool:
    try:
      ExpressionValidator.validate(node, n_variables)
    except CalculusError:
      return False

    if X is not None:
      return ExpressionValidator._test_evaluation(node, X)

    return True

  @staticmethod
  def _test_evaluation(node: Node, X: np.ndarray) -> bool:
    result = node.evaluate_batch(np.asarray(X, dtype=np.float64))
    return bool(np.all(np.isfinite(result)))
