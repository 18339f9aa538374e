"""Core expression tree components."""

from .node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode, format_number
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, BINARY_OPS, UNARY_OPS,
    OP_SYMBOLS, OP_PRECEDENCE, LEAF_PRECEDENCE, arity, is_function_name,
    evaluate_binary_op_batch, evaluate_unary_op_batch
)

__all__ = [
    'Node', 'NumberNode', 'VariableNode', 'BinaryOpNode', 'UnaryOpNode', 'format_number',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'BINARY_OPS', 'UNARY_OPS',
    'OP_SYMBOLS', 'OP_PRECEDENCE', 'LEAF_PRECEDENCE', 'arity', 'is_function_name',
    'evaluate_binary_op_batch', 'evaluate_unary_op_batch'
]
