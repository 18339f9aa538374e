"""
Exception families for symbolic calculus

Three disjoint families share a common base so callers can catch everything
the package raises with a single clause:

- EquationSyntaxError: the parser rejected the input text
- EquationError: structural problems with a tree or an unsupported request
- MathDomainError: a numeric rule was applied outside its domain
"""

from contextlib import contextmanager
from typing import Optional


class CalculusError(Exception):
    """Base class for every error raised by symbolic_calculus"""


class EquationSyntaxError(CalculusError):
    """Raised by the parser; carries the character offset of the failure"""

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class EquationError(CalculusError):
    """Structural or resource failure while building or walking a tree"""


class UnknownOperatorError(EquationError):
    """A node refers to an opcode the operator table does not know"""


class ArityError(EquationError):
    """A node's child pattern does not match its opcode's arity"""


class VariableCountError(EquationError):
    """The operation supports fewer variables than the equation has"""

    def __init__(self, message: str, n_variables: int):
        self.n_variables = n_variables
        super().__init__(message)


class DepthLimitError(EquationError):
    """Tree nesting exceeded what the recursive walkers can handle"""


class MathDomainError(CalculusError):
    """Numeric evaluation left the domain of an operator"""

    def __init__(self, message: str, operator: Optional[str] = None):
        self.operator = operator
        super().__init__(message)


@contextmanager
def depth_guard(operation: str):
    """Report interpreter stack exhaustion on very deep trees as DepthLimitError"""
    try:
        yield
    except RecursionError:
        raise DepthLimitError(f"{operation}: expression is nested too deeply") from None
