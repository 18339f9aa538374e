"""Per-opcode differentiation and simplification rules."""

from . import derivatives, simplification

__all__ = ['derivatives', 'simplification']
