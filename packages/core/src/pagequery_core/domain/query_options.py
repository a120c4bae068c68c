"""
Query options: condition, projection, joins, ordering and window.

``QueryOptions`` is the complete, store-independent description of one
query.  The condition defines *what* to filter; the remaining attributes
define *how* rows are joined, shaped and sliced.  Data sources consume it;
nothing in it executes anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from .projection import JoinKind, JoinSpec, Projection

if TYPE_CHECKING:
    from .paging import SortKey
    from .specification import ICondition


@dataclass(frozen=True)
class QueryOptions:
    """
    Immutable query description.

    Attributes:
        condition: Filter tree; ``None`` means no filter.
        projection: Output shape; required for ``fetch``, ignored by ``count``.
        joins: Relations to join before filtering.
        order_by: Sort keys, applied in order.
        offset: Rows to skip (``None`` = from the start).
        limit: Maximum rows (``None`` = unbounded).
    """

    condition: ICondition | None = None
    projection: Projection[Any] | None = None
    joins: frozenset[JoinSpec] = field(default_factory=frozenset)
    order_by: tuple[SortKey, ...] = field(default_factory=tuple)
    offset: int | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.joins, frozenset):
            object.__setattr__(self, "joins", frozenset(self.joins))
        if not isinstance(self.order_by, tuple):
            object.__setattr__(self, "order_by", tuple(self.order_by))

    def with_pagination(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> QueryOptions:
        """Return a copy with updated window parameters."""
        return replace(
            self,
            limit=limit if limit is not None else self.limit,
            offset=offset if offset is not None else self.offset,
        )

    def with_ordering(self, *keys: SortKey) -> QueryOptions:
        """Return a copy with updated ordering."""
        return replace(self, order_by=tuple(keys))

    def for_count(self) -> QueryOptions:
        """Strip everything a count query ignores."""
        return QueryOptions(condition=self.condition, joins=self.joins)

    def join_kind(self, relation: str) -> JoinKind | None:
        """Return how ``relation`` is joined, or ``None`` if it is not.

        INNER wins when a relation is listed with both kinds.
        """
        kinds = {j.kind for j in self.joins if j.relation == relation}
        if not kinds:
            return None
        return JoinKind.INNER if JoinKind.INNER in kinds else JoinKind.LEFT

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dictionary (for logs and debugging)."""
        result: dict[str, Any] = {}
        if self.condition is not None:
            result["condition"] = self.condition.to_dict()
        if self.projection is not None:
            result["projection"] = dict(self.projection.fields)
        if self.joins:
            result["joins"] = sorted(
                f"{j.kind.value}:{j.relation}" for j in self.joins
            )
        if self.order_by:
            result["order_by"] = [str(key) for key in self.order_by]
        if self.offset is not None:
            result["offset"] = self.offset
        if self.limit is not None:
            result["limit"] = self.limit
        return result
