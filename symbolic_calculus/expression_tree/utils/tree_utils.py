"""
Tree Utility Functions

Traversal and analysis helpers shared by the differentiator, the printers
and the graph export. Everything here reads trees; nothing mutates them.
"""

from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..core.node import Node, BinaryOpNode, UnaryOpNode, NumberNode, VariableNode
from ..core.operators import NodeType, OpType


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return list(walk(node, 'pre'))
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def walk(node: Optional[Node], order: str = 'pre') -> Iterator[Node]:
    """
    Yield the nodes of a tree in 'pre', 'in' or 'post' order.

    For in-order walks a function node is yielded before its argument,
    since its left slot is empty.
    """
    if order not in ('pre', 'in', 'post'):
        raise ValueError(f"Invalid order: {order}")
    if node is None:
        return
    if order == 'pre':
        yield node
    yield from walk(node.left, order)
    if order == 'in':
        yield node
    yield from walk(node.right, order)
    if order == 'post':
        yield node


def calculate_tree_depth(node: Node) -> int:
    """Maximum depth of the tree (leaf nodes have depth 1)"""
    return node.depth()


def depends_on_variable(node: Node, index: int) -> bool:
    """True when a VariableNode with ``index`` occurs anywhere below ``node``"""
    return any(isinstance(n, VariableNode) and n.index == index for n in walk(node))


def get_variables(node: Node) -> List[VariableNode]:
    return [n for n in walk(node) if isinstance(n, VariableNode)]


def get_numbers(node: Node) -> List[NumberNode]:
    return [n for n in walk(node) if isinstance(n, NumberNode)]


def get_variable_usage_counts(node: Node) -> Dict[int, int]:
    """Occurrences of each variable index"""
    return dict(Counter(n.index for n in get_variables(node)))


def find_nodes_by_operator(node: Node, operator: OpType) -> List[Node]:
    return [n for n in walk(node)
            if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator]


def max_variable_index(node: Node) -> int:
    """Largest variable index used by the tree, -1 when there is none"""
    return max((n.index for n in get_variables(node)), default=-1)


@dataclass
class GraphNode:
    """One vertex of the graph-structure walk"""
    id: int
    node_type: NodeType
    label: str
    children: List[int] = field(default_factory=list)
    is_leaf: bool = True


def graph_records(node: Node, label_for) -> List[GraphNode]:
    """
    Flatten a tree into pre-order GraphNode records.

    Args:
        node: Root node of the tree
        label_for: callable producing the display label of a single node

    Returns:
        Records whose ids are pre-order positions; children refer to ids.
    """
    records: List[GraphNode] = []

    def _visit(current: Node) -> int:
        record = GraphNode(id=len(records), node_type=current.node_type,
                           label=label_for(current))
        records.append(record)
        for child in current.children():
            record.children.append(_visit(child))
        record.is_leaf = not record.children
        return record.id

    _visit(node)
    return records


def edge_list(records: List[GraphNode]) -> List[Tuple[int, int]]:
    return [(record.id, child) for record in records for child in record.children]
