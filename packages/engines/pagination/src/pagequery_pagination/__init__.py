"""pagequery-pagination — query execution and page assembly."""

from .coordinator import (
    CountPolicy,
    PaginationConfig,
    PaginationCoordinator,
    count_joins,
    infer_total,
)
from .executor import QueryExecutor, referenced_relations

__all__ = [
    "CountPolicy",
    "PaginationConfig",
    "PaginationCoordinator",
    "QueryExecutor",
    "count_joins",
    "infer_total",
    "referenced_relations",
]
