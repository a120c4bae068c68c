"""
Page requests and page envelopes.

``PageRequest`` describes *which* slice of a result set the caller wants;
``Page`` carries the slice back together with the (optional) total count.
Both are immutable and live only for the duration of one request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..primitives.exceptions import InvalidRangeError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")
R = TypeVar("R")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class NullPlacement(str, Enum):
    """Where rows with a NULL sort value go.

    ``DEFAULT`` defers to the store (nulls compare lowest).
    """

    DEFAULT = "default"
    FIRST = "first"
    LAST = "last"


@dataclass(frozen=True)
class SortKey:
    """A single ``ORDER BY`` term over a field path such as ``member.age``."""

    field: str
    direction: SortDirection = SortDirection.ASC
    nulls: NullPlacement = NullPlacement.DEFAULT

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @classmethod
    def parse(cls, expr: str) -> SortKey:
        """Parse ``"-member.age"`` / ``"member.age"`` into a ``SortKey``."""
        if expr.startswith("-"):
            return cls(expr[1:], SortDirection.DESC)
        return cls(expr)

    @classmethod
    def asc(cls, field: str, nulls: NullPlacement = NullPlacement.DEFAULT) -> SortKey:
        return cls(field, SortDirection.ASC, nulls)

    @classmethod
    def desc(cls, field: str, nulls: NullPlacement = NullPlacement.DEFAULT) -> SortKey:
        return cls(field, SortDirection.DESC, nulls)

    def __str__(self) -> str:
        text = f"-{self.field}" if self.descending else self.field
        if self.nulls is not NullPlacement.DEFAULT:
            text += f" nulls {self.nulls.value}"
        return text


def check_range(offset: Any, limit: Any) -> None:
    """Raise :class:`InvalidRangeError` unless ``offset >= 0`` and ``limit > 0``."""
    if (
        isinstance(offset, bool)
        or isinstance(limit, bool)
        or not isinstance(offset, int)
        or not isinstance(limit, int)
        or offset < 0
        or limit <= 0
    ):
        raise InvalidRangeError(offset, limit)


@dataclass(frozen=True)
class PageRequest:
    """
    Immutable offset/limit window plus ordering.

    Attributes:
        offset: Number of rows to skip (``>= 0``).
        limit: Maximum number of rows to return (``> 0``).
        sort: Ordered sort keys; ties are broken by the data source identity.
    """

    offset: int = 0
    limit: int = 20
    sort: tuple[SortKey, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        check_range(self.offset, self.limit)
        if not isinstance(self.sort, tuple):
            object.__setattr__(self, "sort", tuple(self.sort))

    @classmethod
    def of_page(
        cls,
        page: int,
        size: int,
        sort: Iterable[SortKey] = (),
    ) -> PageRequest:
        """Build a request from a zero-based page number and page size."""
        if page < 0 or size <= 0:
            raise InvalidRangeError(page * size, size)
        return cls(offset=page * size, limit=size, sort=tuple(sort))

    @property
    def page_number(self) -> int:
        return self.offset // self.limit

    def next(self) -> PageRequest:
        return PageRequest(self.offset + self.limit, self.limit, self.sort)

    def with_sort(self, *keys: SortKey) -> PageRequest:
        return PageRequest(self.offset, self.limit, keys)


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    One page of results.

    ``total`` is ``None`` when the count was skipped and the page alone
    cannot prove how many rows exist.
    """

    content: tuple[T, ...]
    offset: int
    limit: int
    total: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, tuple):
            object.__setattr__(self, "content", tuple(self.content))
        if len(self.content) > self.limit:
            raise ValueError(
                f"Page holds {len(self.content)} rows but limit is {self.limit}"
            )
        if self.total is not None and self.content:
            if self.total < self.offset + len(self.content):
                raise ValueError(
                    f"total={self.total} is smaller than the rows already seen "
                    f"({self.offset + len(self.content)})"
                )

    def __len__(self) -> int:
        return len(self.content)

    @property
    def has_next(self) -> bool | None:
        """``True``/``False`` when known, ``None`` when the total is unknown."""
        if self.total is not None:
            return self.offset + len(self.content) < self.total
        if len(self.content) < self.limit:
            return False
        return None

    def map(self, fn: Callable[[T], R]) -> Page[R]:
        return Page(
            content=tuple(fn(item) for item in self.content),
            offset=self.offset,
            limit=self.limit,
            total=self.total,
        )

    def to_dict(
        self,
        serialize: Callable[[T], Any] | None = None,
    ) -> dict[str, Any]:
        """Serialise to the JSON page envelope used by the HTTP layer."""
        if serialize is None:
            serialize = _default_serialize
        return {
            "content": [serialize(item) for item in self.content],
            "totalElements": self.total,
            "offset": self.offset,
            "limit": self.limit,
        }


def _default_serialize(item: Any) -> Any:
    if hasattr(item, "model_dump"):
        return item.model_dump(mode="json")
    return item
