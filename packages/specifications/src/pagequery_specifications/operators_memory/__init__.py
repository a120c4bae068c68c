"""
In-memory operator implementations.

Usage::

    from pagequery_specifications.operators_memory import build_default_registry

    registry = build_default_registry()
    registry.evaluate(ConditionOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in comparison operators.

    Returns a fresh instance on every call so callers can extend it without
    affecting anyone else.
    """
    return MemoryOperatorRegistry(
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
    )


__all__ = [
    "EqualOperator",
    "GreaterEqualOperator",
    "GreaterThanOperator",
    "LessEqualOperator",
    "LessThanOperator",
    "MemoryOperatorRegistry",
    "NotEqualOperator",
    "build_default_registry",
]
