"""Expression Tree Module

Node types, the operator table and the Equation container.
"""

from .equation import Equation
from .core.node import (
    Node,
    NumberNode,
    VariableNode,
    BinaryOpNode,
    UnaryOpNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    OP_SYMBOLS,
    OP_PRECEDENCE
)
from .operator_table import OperatorDef, OPERATOR_TABLE, get_operator
from .utils import SymPyConverter, ExpressionValidator

__all__ = [
    "Equation",
    "Node", "NumberNode", "VariableNode", "BinaryOpNode", "UnaryOpNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "OP_SYMBOLS", "OP_PRECEDENCE",
    "OperatorDef", "OPERATOR_TABLE", "get_operator",
    "SymPyConverter", "ExpressionValidator"
]
