"""SQLAlchemy Persistence Adapter."""

from __future__ import annotations

from .core.uow import SQLAlchemyUnitOfWork
from .data_source import SQLAlchemyDataSource
from .exceptions import (
    CompilationError,
    MappingError,
    SessionManagementError,
    SQLAlchemyPersistenceError,
    UnitOfWorkError,
)
from .specifications import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperator,
    SQLAlchemyOperatorRegistry,
    apply_ordering,
    apply_window,
    build_default_sqla_registry,
    build_sqla_filter,
)

__all__ = [
    # Core
    "SQLAlchemyDataSource",
    "SQLAlchemyUnitOfWork",
    # Exceptions
    "CompilationError",
    "MappingError",
    "SessionManagementError",
    "SQLAlchemyPersistenceError",
    "UnitOfWorkError",
    # Specifications
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "apply_ordering",
    "apply_window",
    "build_default_sqla_registry",
    "build_sqla_filter",
]
