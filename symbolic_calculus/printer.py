"""
Printers and tree export

Read-only presentations of an Equation:

- to_infix: fully parenthesized text, ``(x + (2 * y))``
- to_infix_minimal: only the brackets the parser needs, ``x + 2 * y``
- to_latex / latex_equation / latex_document: LaTeX source
- graph_records / to_dot: graph-structure walk and Graphviz DOT text
- dump_tree / log_tree: indented debug dump routed through the logger

Both infix forms parse back to a structurally equal tree.
"""

from typing import Iterable, List, Optional, Sequence, Union

from .expression_tree import Equation
from .expression_tree.core.node import (
    Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode, format_number
)
from .expression_tree.core.operators import OpType, OP_SYMBOLS, OP_PRECEDENCE, LEAF_PRECEDENCE
from .expression_tree.utils.tree_utils import GraphNode, graph_records as _graph_records
from .logging_system import get_logger
from .settings import CalculusSettings, resolve_settings

EquationLike = Union[Equation, Node]


class _Names:
    """Variable index -> display name, falling back to X<i> outside the table"""

    def __init__(self, names: Sequence[str]):
        self.names = list(names)

    def __call__(self, index: int) -> str:
        if 0 <= index < len(self.names):
            return self.names[index]
        return f"X{index}"


def _unpack(target: EquationLike, variable_names: Optional[Sequence[str]]):
    if isinstance(target, Equation):
        return target.root, _Names(variable_names or target.variable_names)
    return target, _Names(variable_names or [])


def node_label(node: Node, names=None, precision: Optional[int] = None) -> str:
    """Text for a single node without its children"""
    if isinstance(node, NumberNode):
        return format_number(node.value, precision)
    if isinstance(node, VariableNode):
        return names(node.index) if names else f"X{node.index}"
    return OP_SYMBOLS[node.operator]


def _binding(node: Node) -> int:
    """How tightly a subtree binds when printed as an operand"""
    if isinstance(node, BinaryOpNode):
        return OP_PRECEDENCE[node.operator]
    return LEAF_PRECEDENCE


# Infix

def to_infix(target: EquationLike, variable_names: Optional[Sequence[str]] = None,
             settings: Optional[CalculusSettings] = None) -> str:
    root, names = _unpack(target, variable_names)
    precision = resolve_settings(settings).number_precision

    def _print(node: Node) -> str:
        if isinstance(node, BinaryOpNode):
            return f"({_print(node.left_child)} {OP_SYMBOLS[node.operator]} {_print(node.right_child)})"
        if isinstance(node, UnaryOpNode):
            return f"{OP_SYMBOLS[node.operator]}({_print(node.operand)})"
        return node_label(node, names, precision)

    return _print(root)


def to_infix_minimal(target: EquationLike, variable_names: Optional[Sequence[str]] = None,
                     settings: Optional[CalculusSettings] = None) -> str:
    """
    Infix text with brackets only where the tree shape requires them.

    A left operand is bracketed when it binds more loosely than its parent;
    a right operand also when it binds equally, since every binary operator
    associates to the left.
    """
    root, names = _unpack(target, variable_names)
    precision = resolve_settings(settings).number_precision

    def _print(node: Node) -> str:
        if isinstance(node, BinaryOpNode):
            precedence = OP_PRECEDENCE[node.operator]
            left = _print(node.left_child)
            right = _print(node.right_child)
            if _binding(node.left_child) < precedence:
                left = f"({left})"
            if _binding(node.right_child) <= precedence:
                right = f"({right})"
            return f"{left} {OP_SYMBOLS[node.operator]} {right}"
        if isinstance(node, UnaryOpNode):
            return f"{OP_SYMBOLS[node.operator]}({_print(node.operand)})"
        return node_label(node, names, precision)

    return _print(root)


# LaTeX

_LATEX_FUNCTIONS = {
    OpType.LN: r'\ln',
    OpType.COS: r'\cos',
    OpType.SIN: r'\sin',
    OpType.TG: r'\operatorname{tg}',
    OpType.CTG: r'\operatorname{ctg}',
    OpType.ARCSIN: r'\arcsin',
    OpType.ARCCOS: r'\arccos',
    OpType.ARCTG: r'\operatorname{arctg}',
    OpType.ARCCTG: r'\operatorname{arcctg}',
}


def _latex_name(name: str) -> str:
    escaped = name.replace('_', r'\_')
    return escaped if len(name) == 1 else rf'\mathit{{{escaped}}}'


def _latex_binding(node: Node) -> int:
    # \frac{}{} is self-delimiting
    if isinstance(node, BinaryOpNode) and node.operator == OpType.DIV:
        return LEAF_PRECEDENCE
    return _binding(node)


def _paren(text: str) -> str:
    return rf'\left({text}\right)'


def to_latex(target: EquationLike, variable_names: Optional[Sequence[str]] = None,
             settings: Optional[CalculusSettings] = None) -> str:
    """Precedence-aware LaTeX for the formula body (no math delimiters)"""
    root, names = _unpack(target, variable_names)
    precision = resolve_settings(settings).number_precision

    def _operand(node: Node, parent_precedence: int, is_right: bool) -> str:
        text = _print(node)
        if isinstance(node, NumberNode) and node.value < 0 and is_right:
            return _paren(text)
        binding = _latex_binding(node)
        if binding < parent_precedence or (is_right and binding == parent_precedence):
            return _paren(text)
        return text

    def _print(node: Node) -> str:
        if isinstance(node, NumberNode):
            return format_number(node.value, precision)
        if isinstance(node, VariableNode):
            return _latex_name(names(node.index))
        if isinstance(node, UnaryOpNode):
            argument = _print(node.operand)
            if node.operator == OpType.SQRT:
                return rf'\sqrt{{{argument}}}'
            return f"{_LATEX_FUNCTIONS[node.operator]}{_paren(argument)}"

        op = node.operator
        if op == OpType.DIV:
            return rf'\frac{{{_print(node.left_child)}}}{{{_print(node.right_child)}}}'
        if op == OpType.POW:
            base = _print(node.left_child)
            if not isinstance(node.left_child, (VariableNode, NumberNode)) or \
                    (isinstance(node.left_child, NumberNode) and node.left_child.value < 0):
                base = _paren(base)
            return f"{base}^{{{_print(node.right_child)}}}"

        precedence = OP_PRECEDENCE[op]
        left = _operand(node.left_child, precedence, is_right=False)
        right = _operand(node.right_child, precedence, is_right=True)
        symbol = r'\cdot' if op == OpType.MUL else OP_SYMBOLS[op]
        return f"{left} {symbol} {right}"

    return _print(root)


def latex_equation(target: EquationLike, variable_names: Optional[Sequence[str]] = None) -> str:
    return "\\begin{equation}\n" + to_latex(target, variable_names) + "\n\\end{equation}\n"


def latex_document(bodies: Iterable[str], title: Optional[str] = None) -> str:
    """Standalone article wrapping already rendered LaTeX fragments"""
    lines = ["\\documentclass[a4paper,12pt]{article}",
             "\\usepackage[utf8]{inputenc}",
             "\\usepackage{amsmath}"]
    if title:
        lines.append(f"\\title{{{title}}}")
    lines.append("\\begin{document}")
    if title:
        lines.append("\\maketitle")
    lines.extend(bodies)
    lines.append("\\end{document}")
    return "\n".join(lines) + "\n"


# Graph walk

def graph_records(target: EquationLike, variable_names: Optional[Sequence[str]] = None) -> List[GraphNode]:
    root, names = _unpack(target, variable_names)
    return _graph_records(root, lambda node: node_label(node, names))


def to_dot(target: EquationLike, variable_names: Optional[Sequence[str]] = None,
           graph_name: str = "Equation") -> str:
    """Graphviz DOT source; leaves are boxes, operators are ellipses"""
    records = graph_records(target, variable_names)
    lines = [f"digraph {graph_name} {{", "    rankdir=TB;"]
    for record in records:
        label = record.label.replace('\\', '\\\\').replace('"', '\\"')
        if record.is_leaf:
            style = 'shape=box, style=filled, fillcolor="#d5e8d4"'
        else:
            style = 'shape=ellipse, style=filled, fillcolor="#dae8fc"'
        lines.append(f'    n{record.id} [label="{label}", {style}];')
    for record in records:
        for child in record.children:
            lines.append(f"    n{record.id} -> n{child};")
    lines.append("}")
    return "\n".join(lines) + "\n"


# Debug dump

def dump_tree(target: EquationLike, variable_names: Optional[Sequence[str]] = None) -> str:
    """Indented dump; function nodes show their empty left slot as 'nil'"""
    root, names = _unpack(target, variable_names)
    lines: List[str] = []

    def _dump(node: Optional[Node], level: int):
        indent = "   " * level
        if node is None:
            lines.append(f"{indent}nil")
            return
        lines.append(f"{indent}{node_label(node, names)}")
        if node.is_leaf():
            return
        _dump(node.left, level + 1)
        _dump(node.right, level + 1)

    _dump(root, 0)
    return "\n".join(lines)


def log_tree(target: EquationLike, name: str = "equation"):
    get_logger().tree(name, dump_tree(target))
