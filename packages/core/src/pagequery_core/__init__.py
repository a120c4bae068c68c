"""pagequery-core — Foundation package for the pagequery toolkit.

Paging types, query shape primitives, the data-source port and the error
hierarchy. No store dependencies; pydantic for projected rows.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryDataSource

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    ICondition,
    JoinKind,
    JoinSpec,
    NullPlacement,
    Page,
    PageRequest,
    Projection,
    QueryOptions,
    ResultRow,
    SortDirection,
    SortKey,
    SourceSchema,
    check_range,
    entity_of,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IDataSource, UnitOfWork

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    DataSourceError,
    DeadlineExceededError,
    InfrastructureError,
    InvalidRangeError,
    NonUniqueResultError,
    PageQueryError,
    ProjectionMismatchError,
    ValidationError,
)

__all__ = [
    # Adapters
    "InMemoryDataSource",
    # Domain
    "ICondition",
    "JoinKind",
    "JoinSpec",
    "NullPlacement",
    "Page",
    "PageRequest",
    "Projection",
    "QueryOptions",
    "ResultRow",
    "SortDirection",
    "SortKey",
    "SourceSchema",
    "check_range",
    "entity_of",
    # Ports
    "IDataSource",
    "UnitOfWork",
    # Primitives
    "DataSourceError",
    "DeadlineExceededError",
    "InfrastructureError",
    "InvalidRangeError",
    "NonUniqueResultError",
    "PageQueryError",
    "ProjectionMismatchError",
    "ValidationError",
]
