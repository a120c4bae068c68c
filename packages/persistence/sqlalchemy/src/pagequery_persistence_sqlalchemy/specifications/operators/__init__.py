"""
SQLAlchemy operator implementations and default registry.

Usage::

    from pagequery_persistence_sqlalchemy.specifications.operators import (
        DEFAULT_SQLA_REGISTRY,
    )

    expr = DEFAULT_SQLA_REGISTRY.apply(ConditionOperator.GE, MemberModel.age, 18)
"""

from __future__ import annotations

from ..strategy import SQLAlchemyOperatorRegistry
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    return SQLAlchemyOperatorRegistry(
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
    )


DEFAULT_SQLA_REGISTRY: SQLAlchemyOperatorRegistry = build_default_sqla_registry()

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "EqualOperator",
    "GreaterEqualOperator",
    "GreaterThanOperator",
    "LessEqualOperator",
    "LessThanOperator",
    "NotEqualOperator",
    "SQLAlchemyOperatorRegistry",
    "build_default_sqla_registry",
]
