"""Symbolic Calculus Package

Parse formulas into expression trees, differentiate, simplify, evaluate and
expand them into Taylor polynomials.
"""

from .errors import (
  CalculusError, EquationSyntaxError, EquationError, UnknownOperatorError,
  ArityError, VariableCountError, DepthLimitError, MathDomainError
)
from .expression_tree import (
  Equation, Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode,
  NodeType, OpType, OperatorDef, OPERATOR_TABLE, get_operator
)
from .parser import parse, Parser, Tokenizer
from .differentiator import differentiate, differentiate_node
from .simplifier import simplify, simplify_fully, simplify_node
from .evaluator import evaluate, evaluate_batch, evaluate_node
from .taylor import expand_taylor
from .printer import (
  to_infix, to_infix_minimal, to_latex, latex_equation, latex_document,
  graph_records, to_dot, dump_tree, log_tree
)
from .settings import CalculusSettings, get_settings, configure_settings, reset_settings
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "CalculusError", "EquationSyntaxError", "EquationError", "UnknownOperatorError",
  "ArityError", "VariableCountError", "DepthLimitError", "MathDomainError",
  "Equation", "Node", "NumberNode", "VariableNode", "BinaryOpNode", "UnaryOpNode",
  "NodeType", "OpType", "OperatorDef", "OPERATOR_TABLE", "get_operator",
  "parse", "Parser", "Tokenizer",
  "differentiate", "differentiate_node",
  "simplify", "simplify_fully", "simplify_node",
  "evaluate", "evaluate_batch", "evaluate_node",
  "expand_taylor",
  "to_infix", "to_infix_minimal", "to_latex", "latex_equation", "latex_document",
  "graph_records", "to_dot", "dump_tree", "log_tree",
  "CalculusSettings", "get_settings", "configure_settings", "reset_settings",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
