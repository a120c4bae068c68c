"""IDataSource — the store seam the pagination engine runs against."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.projection import SourceSchema
    from ..domain.query_options import QueryOptions


@runtime_checkable
class IDataSource(Protocol):
    """
    A capability to run a described query against a store.

    Implementations exist for relational stores (SQLAlchemy) and plain
    Python collections; anything else (a remote service, a cache) only has
    to honour the same three members.  A data source instance is scoped to
    one request: every call made through it should observe the same
    snapshot of the store.
    """

    @property
    def schema(self) -> SourceSchema:
        """Entities and attributes this source can serve."""
        ...

    async def fetch(self, options: QueryOptions) -> list[dict[str, Any]]:
        """
        Return rows keyed by ``options.projection`` output names.

        Joins are applied before filtering; ordering, offset and limit are
        applied exactly as given (the caller adds tie-breakers).
        """
        ...

    async def count(self, options: QueryOptions) -> int:
        """
        Count root rows matching ``options.condition`` under ``options.joins``.

        Projection, ordering and window are ignored.
        """
        ...
