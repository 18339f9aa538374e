import numpy as np
import sympy as sp
from typing import List, Optional, Sequence
from .core.node import Node
from .utils.sympy_utils import SymPyConverter


class Equation:
  """Expression tree together with the table of variable names it indexes"""

  __slots__ = ('root', 'variable_names')

  def __init__(self, root: Node, variable_names: Optional[Sequence[str]] = None):
    self.root = root
    self.variable_names: List[str] = list(variable_names or [])
    if len(set(self.variable_names)) != len(self.variable_names):
      raise ValueError("variable names must be unique")

  @property
  def n_variables(self) -> int:
    return len(self.variable_names)

  def variable_name(self, index: int) -> str:
    return self.variable_names[index]

  def variable_index(self, name: str) -> int:
    try:
      return self.variable_names.index(name)
    except ValueError:
      raise KeyError(f"Variable '{name}' is not part of this equation") from None

  def copy(self) -> 'Equation':
    """Deep copy; the variable table keeps its exact index-to-name mapping"""
    return Equation(self.root.copy(), self.variable_names)

  def with_root(self, root: Node) -> 'Equation':
    """New equation over ``root`` sharing a copy of this variable table"""
    return Equation(root, self.variable_names)

  def evaluate(self, values: Sequence[float] = ()) -> float:
    from ..evaluator import evaluate
    return evaluate(self, values)

  def evaluate_batch(self, X: np.ndarray) -> np.ndarray:
    from ..evaluator import evaluate_batch
    return evaluate_batch(self, X)

  def to_string(self) -> str:
    from ..printer import to_infix
    return to_infix(self)

  def to_latex(self) -> str:
    from ..printer import to_latex
    return to_latex(self)

  def to_sympy(self) -> sp.Expr:
    return SymPyConverter(self.variable_names).to_sympy(self.root)

  def size(self) -> int:
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def __eq__(self, other) -> bool:
    if not isinstance(other, Equation):
      return NotImplemented
    return self.variable_names == other.variable_names and self.root == other.root

  def __hash__(self) -> int:
    return hash((tuple(self.variable_names), self.root))

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Equation({self.to_string()!r}, variables={self.variable_names!r})"
