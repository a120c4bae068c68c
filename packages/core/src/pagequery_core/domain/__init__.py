from .paging import (
    NullPlacement,
    Page,
    PageRequest,
    SortDirection,
    SortKey,
    check_range,
)
from .projection import (
    JoinKind,
    JoinSpec,
    Projection,
    ResultRow,
    SourceSchema,
    entity_of,
)
from .query_options import QueryOptions
from .specification import ICondition

__all__ = [
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
]
