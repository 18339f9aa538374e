"""
Formula parser

Recursive-descent reader for the formula grammar (lowest precedence first):

    Expr     := Add
    Add      := Mult (('+' | '-') Mult)*
    Mult     := Pow (('*' | '/') Pow)*
    Pow      := Primary ('^' Primary)*          left-associative
    Primary  := '(' Expr ')' | FuncCall | Number | Variable
    FuncCall := FuncName '(' Expr ')'
    Number   := '-'? digit+ ('.' digit+)?
    Variable := [A-Za-z_][A-Za-z0-9_]*          not a function name

A '-' is a sign only when it sits in operand position and is immediately
followed by a digit; everywhere else it is subtraction.
"""

import re
from typing import List, Optional

from .errors import EquationSyntaxError
from .expression_tree import Equation
from .expression_tree.core.node import Node, NumberNode, VariableNode, BinaryOpNode, UnaryOpNode
from .expression_tree.core.operators import BINARY_OP_MAP, UNARY_OP_MAP, is_function_name
from .logging_system import LogLevel, log_step, get_logger
from .settings import CalculusSettings, resolve_settings

TOKEN_NUMBER = 'NUMBER'
TOKEN_IDENT = 'IDENT'
TOKEN_OPERATOR = 'OPERATOR'
TOKEN_LPAREN = 'LPAREN'
TOKEN_RPAREN = 'RPAREN'
TOKEN_EOF = 'EOF'


class Token:
    def __init__(self, type, value, position):
        self.type = type
        self.value = value
        self.position = position

    def __repr__(self):
        return f"Token({self.type}, '{self.value}', {self.position})"


class Tokenizer:
    TOKEN_SPECS = [
        (r'\d+(?:\.\d+)?', TOKEN_NUMBER),
        (r'[A-Za-z_][A-Za-z0-9_]*', TOKEN_IDENT),
        (r'[\+\-\*\/\^]', TOKEN_OPERATOR),
        (r'\(', TOKEN_LPAREN),
        (r'\)', TOKEN_RPAREN),
        (r'\s+', None),  # Skip whitespace
    ]
    _COMPILED_SPECS = [(re.compile(pattern), ttype) for pattern, ttype in TOKEN_SPECS]

    def __init__(self, text: str):
        self.text = text
        self.tokens = self._tokenize()

    def _tokenize(self) -> List[Token]:
        tokens = []
        pos = 0
        while pos < len(self.text):
            for regex, ttype in self._COMPILED_SPECS:
                match = regex.match(self.text, pos)
                if match:
                    if ttype:
                        tokens.append(Token(ttype, match.group(0), pos))
                    pos = match.end()
                    break
            else:
                raise EquationSyntaxError(f"Unexpected character '{self.text[pos]}'", pos)
        tokens.append(Token(TOKEN_EOF, "", len(self.text)))
        return tokens


class Parser:
    """Builds one Equation from one formula; an instance is single use"""

    def __init__(self, text: str, settings: Optional[CalculusSettings] = None):
        self.text = text
        self.settings = resolve_settings(settings)
        self.tokens = Tokenizer(text).tokens
        self.index = 0
        self.depth = 0
        self.variable_names: List[str] = []

    @property
    def current_token(self) -> Token:
        return self.tokens[self.index]

    def _peek(self, offset: int = 1) -> Token:
        return self.tokens[min(self.index + offset, len(self.tokens) - 1)]

    def _advance(self) -> Token:
        token = self.current_token
        if token.type != TOKEN_EOF:
            self.index += 1
        return token

    def _is_operator(self, *symbols: str) -> bool:
        token = self.current_token
        return token.type == TOKEN_OPERATOR and token.value in symbols

    def _expect_rparen(self, opened_at: int):
        if self.current_token.type != TOKEN_RPAREN:
            raise EquationSyntaxError(
                f"Unmatched '(' opened at position {opened_at}", self.current_token.position)
        self._advance()

    def _enter(self, position: int):
        self.depth += 1
        if self.depth > self.settings.max_nesting_depth:
            raise EquationSyntaxError(
                f"Nesting deeper than {self.settings.max_nesting_depth} levels", position)

    def _leave(self):
        self.depth -= 1

    def parse(self) -> Equation:
        if self.current_token.type == TOKEN_EOF:
            raise EquationSyntaxError("Empty formula", 0)

        root = self._expr()

        token = self.current_token
        if token.type == TOKEN_RPAREN:
            raise EquationSyntaxError("Unmatched ')'", token.position)
        if token.type != TOKEN_EOF:
            raise EquationSyntaxError(f"Unexpected '{token.value}' after complete expression",
                                      token.position)

        equation = Equation(root, self.variable_names)
        log_step(f"Parsed formula into {equation.size()} nodes, "
                 f"variables: {self.variable_names}")
        if get_logger().is_enabled(LogLevel.VERBOSE):
            from .printer import dump_tree
            get_logger().tree('parsed equation', dump_tree(equation))
        return equation

    def _expr(self) -> Node:
        return self._add()

    def _add(self) -> Node:
        node = self._mult()
        while self._is_operator('+', '-'):
            op = BINARY_OP_MAP[self._advance().value]
            right = self._mult()
            node = BinaryOpNode(op, node, right)
        return node

    def _mult(self) -> Node:
        node = self._pow()
        while self._is_operator('*', '/'):
            op = BINARY_OP_MAP[self._advance().value]
            right = self._pow()
            node = BinaryOpNode(op, node, right)
        return node

    def _pow(self) -> Node:
        node = self._primary()
        while self._is_operator('^'):
            op = BINARY_OP_MAP[self._advance().value]
            right = self._primary()
            node = BinaryOpNode(op, node, right)
        return node

    def _primary(self) -> Node:
        token = self.current_token

        if token.type == TOKEN_LPAREN:
            self._enter(token.position)
            self._advance()
            node = self._expr()
            self._expect_rparen(token.position)
            self._leave()
            return node

        if token.type == TOKEN_NUMBER:
            self._advance()
            return NumberNode(float(token.value))

        if token.type == TOKEN_OPERATOR and token.value == '-':
            following = self._peek()
            if following.type == TOKEN_NUMBER and following.position == token.position + 1:
                self._advance()
                self._advance()
                return NumberNode(-float(following.value))
            raise EquationSyntaxError("Missing operand before '-'", token.position)

        if token.type == TOKEN_IDENT:
            if is_function_name(token.value):
                return self._function_call()
            if self._peek().type == TOKEN_LPAREN:
                raise EquationSyntaxError(f"Unknown function '{token.value}'", token.position)
            self._advance()
            return VariableNode(self._variable_index(token.value))

        if token.type == TOKEN_EOF:
            raise EquationSyntaxError("Missing operand at end of formula", token.position)
        if token.type == TOKEN_RPAREN:
            raise EquationSyntaxError("Missing operand before ')'", token.position)
        raise EquationSyntaxError(f"Missing operand before '{token.value}'", token.position)

    def _function_call(self) -> Node:
        name_token = self._advance()
        if self.current_token.type != TOKEN_LPAREN:
            raise EquationSyntaxError(
                f"'{name_token.value}' is a function name and must be followed by '('",
                name_token.position)
        opened = self._advance()
        self._enter(opened.position)
        argument = self._expr()
        self._expect_rparen(opened.position)
        self._leave()
        return UnaryOpNode(UNARY_OP_MAP[name_token.value], argument)

    def _variable_index(self, name: str) -> int:
        if name not in self.variable_names:
            self.variable_names.append(name)
        return self.variable_names.index(name)


def parse(text: str, settings: Optional[CalculusSettings] = None) -> Equation:
    """Parse a formula into an Equation; raises EquationSyntaxError"""
    if not isinstance(text, str):
        raise TypeError("formula must be a string")
    return Parser(text, settings).parse()
