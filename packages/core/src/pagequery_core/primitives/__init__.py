from .exceptions import (
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
    "DataSourceError",
    "DeadlineExceededError",
    "InfrastructureError",
    "InvalidRangeError",
    "NonUniqueResultError",
    "PageQueryError",
    "ProjectionMismatchError",
    "ValidationError",
]
