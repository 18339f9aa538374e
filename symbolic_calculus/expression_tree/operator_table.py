"""
Operator table

The single registry mapping every opcode to its display symbol, print
precedence, arity and its differentiation, evaluation and local
simplification rules. Adding a function means adding an ``OpType`` member,
its name in ``UNARY_OP_MAP`` and one row below; the completeness check at
the bottom refuses to import a table with a missing row.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from .core.node import Node
from .core.operators import (
  OpType, OP_SYMBOLS, OP_PRECEDENCE, arity,
  eval_add, eval_sub, eval_mul, eval_div, eval_pow,
  eval_ln, eval_sqrt, eval_cos, eval_sin, eval_tg, eval_ctg,
  eval_arcsin, eval_arccos, eval_arctg, eval_arcctg
)
from .rules import derivatives as d
from .rules import simplification as s
from ..errors import EquationError, UnknownOperatorError


@dataclass(frozen=True)
class OperatorDef:
  symbol: str
  precedence: int
  arity: int
  differentiate: Callable[[Node, int, Callable[[Node], Node]], Node]
  evaluate: Callable[[float, float], float]
  simplify: Callable[[Node, float], Node]


def _row(op: OpType, diff_rule, eval_rule, simplify_rule) -> OperatorDef:
  return OperatorDef(
    symbol=OP_SYMBOLS[op],
    precedence=OP_PRECEDENCE[op],
    arity=arity(op),
    differentiate=diff_rule,
    evaluate=eval_rule,
    simplify=simplify_rule,
  )


OPERATOR_TABLE: Dict[OpType, OperatorDef] = {
  OpType.ADD:    _row(OpType.ADD,    d.diff_add,    eval_add,    s.simplify_add),
  OpType.SUB:    _row(OpType.SUB,    d.diff_sub,    eval_sub,    s.simplify_sub),
  OpType.MUL:    _row(OpType.MUL,    d.diff_mul,    eval_mul,    s.simplify_mul),
  OpType.DIV:    _row(OpType.DIV,    d.diff_div,    eval_div,    s.simplify_div),
  OpType.POW:    _row(OpType.POW,    d.diff_pow,    eval_pow,    s.simplify_pow),
  OpType.LN:     _row(OpType.LN,     d.diff_ln,     eval_ln,     s.simplify_function),
  OpType.SQRT:   _row(OpType.SQRT,   d.diff_sqrt,   eval_sqrt,   s.simplify_function),
  OpType.COS:    _row(OpType.COS,    d.diff_cos,    eval_cos,    s.simplify_function),
  OpType.SIN:    _row(OpType.SIN,    d.diff_sin,    eval_sin,    s.simplify_function),
  OpType.TG:     _row(OpType.TG,     d.diff_tg,     eval_tg,     s.simplify_function),
  OpType.CTG:    _row(OpType.CTG,    d.diff_ctg,    eval_ctg,    s.simplify_function),
  OpType.ARCSIN: _row(OpType.ARCSIN, d.diff_arcsin, eval_arcsin, s.simplify_function),
  OpType.ARCCOS: _row(OpType.ARCCOS, d.diff_arccos, eval_arccos, s.simplify_function),
  OpType.ARCTG:  _row(OpType.ARCTG,  d.diff_arctg,  eval_arctg,  s.simplify_function),
  OpType.ARCCTG: _row(OpType.ARCCTG, d.diff_arcctg, eval_arcctg, s.simplify_function),
}


def get_operator(op) -> OperatorDef:
  try:
    return OPERATOR_TABLE[op]
  except (KeyError, TypeError):
    raise UnknownOperatorError(f"no operator table entry for {op!r}") from None


def _check_complete():
  missing = [op.name for op in OpType if op not in OPERATOR_TABLE]
  if missing:
    raise EquationError(f"operator table is missing rows for: {', '.join(missing)}")


_check_complete()
