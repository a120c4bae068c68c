"""Error hierarchy shared by every pagequery package."""

from __future__ import annotations

from typing import Any


class PageQueryError(Exception):
    """Root exception for the entire pagequery toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidRangeError(PageQueryError):
    """Raised when an offset/limit pair cannot describe a page."""

    def __init__(self, offset: object, limit: object) -> None:
        self.offset = offset
        self.limit = limit
        super().__init__(
            f"Invalid page range: offset={offset!r} (must be >= 0), "
            f"limit={limit!r} (must be > 0)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_RANGE",
            "offset": self.offset,
            "limit": self.limit,
        }


class ProjectionMismatchError(PageQueryError):
    """Raised when requested fields are not reachable through the joined shape.

    ``missing`` lists the offending field paths, ``available`` the paths the
    data source can serve for the requested join set.
    """

    def __init__(
        self,
        missing: list[str],
        available: list[str],
        *,
        context: str = "projection",
    ) -> None:
        self.missing = sorted(missing)
        self.available = sorted(available)
        self.context = context
        preview = ", ".join(self.available[:15])
        if len(self.available) > 15:
            preview += ", ..."
        super().__init__(
            f"The {context} references unavailable fields: "
            f"{', '.join(self.missing)}. Available fields: {preview}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PROJECTION_MISMATCH",
            "context": self.context,
            "missing": self.missing,
            "available": self.available,
        }


class NonUniqueResultError(PageQueryError):
    """Raised when a single-row fetch matched more than one row."""


class ValidationError(PageQueryError):
    """Raised when request input fails validation.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "errors": self.errors,
        }


class InfrastructureError(PageQueryError):
    """Base class for all infrastructure-related errors."""


class DataSourceError(InfrastructureError):
    """Wraps any failure surfaced by an injected data source.

    The original exception is always available as ``__cause__``.
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "DATA_SOURCE_ERROR",
            "operation": self.operation,
            "message": str(self),
        }


class DeadlineExceededError(DataSourceError):
    """Raised when a caller-supplied deadline passed before the next query."""
