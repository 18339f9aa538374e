"""
Runtime settings for symbolic calculus

A single validated dataclass holds the tunables shared by the parser,
simplifier and printers. A process-wide instance is used unless a caller
passes its own settings object to an operation.
"""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class CalculusSettings:
    """Tunables for parsing, simplification and printing"""
    epsilon: float = 1e-9               # zero/one comparisons in identity rewrites
    max_nesting_depth: int = 100        # parser bracket/function nesting bound
    max_simplify_passes: int = 32       # upper bound for simplify_fully
    number_precision: Optional[int] = None  # None keeps shortest round-trip digits

    def __post_init__(self):
        """Validate fields after initialization"""
        if not isinstance(self.epsilon, (int, float)):
            raise TypeError("epsilon must be numeric")
        if self.epsilon < 0:
            raise ValueError("epsilon must be non-negative")
        if not isinstance(self.max_nesting_depth, int) or self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be a positive integer")
        if not isinstance(self.max_simplify_passes, int) or self.max_simplify_passes <= 0:
            raise ValueError("max_simplify_passes must be a positive integer")
        if self.number_precision is not None:
            if not isinstance(self.number_precision, int) or self.number_precision < 0:
                raise ValueError("number_precision must be None or a non-negative integer")


# Global instance
_global_settings: Optional[CalculusSettings] = None


def get_settings() -> CalculusSettings:
    """Get or create the global settings instance"""
    global _global_settings
    if _global_settings is None:
        _global_settings = CalculusSettings()
    return _global_settings


def configure_settings(**overrides) -> CalculusSettings:
    """Replace selected fields of the global settings"""
    global _global_settings
    _global_settings = replace(get_settings(), **overrides)
    return _global_settings


def reset_settings() -> CalculusSettings:
    """Restore the default settings"""
    global _global_settings
    _global_settings = CalculusSettings()
    return _global_settings


def resolve_settings(settings: Optional[CalculusSettings]) -> CalculusSettings:
    return settings if settings is not None else get_settings()
