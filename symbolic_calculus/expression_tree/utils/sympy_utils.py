import sympy as sp
from typing import List, Sequence

from ..core.node import Node


class SymPyConverter:
  """Bridge between expression trees and SymPy expressions"""

  def __init__(self, variable_names: Sequence[str]):
    self.variable_names = list(variable_names)
    self.symbols: List[sp.Symbol] = [sp.Symbol(name) for name in self.variable_names]

  def to_sympy(self, node: Node) -> sp.Expr:
    return node.to_sympy(self.symbols)

  def derivative(self, node: Node, var_index: int) -> sp.Expr:
    """Reference derivative computed by SymPy"""
    return sp.diff(self.to_sympy(node), self.symbols[var_index])

  def numeric(self, expr: sp.Expr, values: Sequence[float]) -> float:
    substitutions = dict(zip(self.symbols, values))
    return float(sp.N(expr.subs(substitutions)))

  def equivalent(self, left: Node, right: Node) -> bool:
    """Symbolic equivalence check; trees may differ in shape"""
    difference = sp.simplify(self.to_sympy(left) - self.to_sympy(right))
    return difference == 0

  def latex(self, node: Node) -> str:
    return sp.latex(self.to_sympy(node))
