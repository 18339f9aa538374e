"""Utilities for expression trees."""

from .sympy_utils import SymPyConverter
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, walk, calculate_tree_depth, depends_on_variable,
    get_variables, get_numbers, get_variable_usage_counts,
    find_nodes_by_operator, max_variable_index,
    GraphNode, graph_records, edge_list
)

__all__ = [
    'SymPyConverter', 'ExpressionValidator',
    'get_all_nodes', 'walk', 'calculate_tree_depth', 'depends_on_variable',
    'get_variables', 'get_numbers', 'get_variable_usage_counts',
    'find_nodes_by_operator', 'max_variable_index',
    'GraphNode', 'graph_records', 'edge_list'
]
