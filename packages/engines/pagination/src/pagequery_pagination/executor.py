"""QueryExecutor — validated, deterministic fetch/count over an ``IDataSource``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pagequery_core.domain.paging import SortKey, check_range
from pagequery_core.domain.projection import entity_of
from pagequery_core.domain.query_options import QueryOptions
from pagequery_core.primitives.exceptions import (
    DataSourceError,
    InvalidRangeError,
    NonUniqueResultError,
    PageQueryError,
    ProjectionMismatchError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from pagequery_core.domain.projection import JoinSpec, Projection, SourceSchema
    from pagequery_core.domain.specification import ICondition
    from pagequery_core.ports.data_source import IDataSource

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger("pagequery.pagination")


class QueryExecutor:
    """
    Runs one content or count query against an injected data source.

    Before anything reaches the store the executor checks the window, checks
    that every projected, filtered and sorted path is reachable through the
    requested joins, and appends the schema identity as a final ascending
    sort key.  Store failures surface as :class:`DataSourceError` with the
    original exception chained; nothing is retried.
    """

    def __init__(self, data_source: IDataSource) -> None:
        self._data_source = data_source

    @property
    def data_source(self) -> IDataSource:
        return self._data_source

    @property
    def schema(self) -> SourceSchema:
        return self._data_source.schema

    async def fetch(
        self,
        condition: ICondition | None,
        projection: Projection[T],
        joins: Iterable[JoinSpec] = (),
        order: Iterable[SortKey] = (),
        offset: int = 0,
        limit: int | None = None,
    ) -> list[T]:
        """
        Return the projected rows in the window ``[offset, offset + limit)``.

        ``limit=None`` fetches every matching row.

        Raises:
            InvalidRangeError: ``offset < 0`` or ``limit <= 0``.
            ProjectionMismatchError: a path is not reachable through ``joins``.
            DataSourceError: the store failed.
        """
        _check_window(offset, limit)
        options = QueryOptions(
            condition=condition,
            projection=projection,
            joins=frozenset(joins),
            order_by=tuple(order),
            offset=offset,
            limit=limit,
        )
        self._validate(options)
        options = options.with_ordering(*self._with_tie_breaker(options.order_by))

        logger.debug("Fetching %s", options.to_dict())
        rows = await self._call("fetch", self._data_source.fetch, options)
        return [projection.build_row(row) for row in rows]

    async def count(
        self,
        condition: ICondition | None,
        joins: Iterable[JoinSpec] = (),
    ) -> int:
        """Count root rows matching ``condition`` under ``joins``."""
        options = QueryOptions(condition=condition, joins=frozenset(joins))
        self._validate(options)

        logger.debug("Counting %s", options.to_dict())
        return await self._call("count", self._data_source.count, options)

    async def fetch_one(
        self,
        condition: ICondition | None,
        projection: Projection[T],
        joins: Iterable[JoinSpec] = (),
    ) -> T | None:
        """Return the single matching row, or ``None``.

        Raises:
            NonUniqueResultError: more than one row matched.
        """
        rows = await self.fetch(condition, projection, joins, limit=2)
        if len(rows) > 1:
            raise NonUniqueResultError(
                "Expected at most one row but the query matched several"
            )
        return rows[0] if rows else None

    async def fetch_first(
        self,
        condition: ICondition | None,
        projection: Projection[T],
        joins: Iterable[JoinSpec] = (),
        order: Iterable[SortKey] = (),
    ) -> T | None:
        """Return the first row under ``order`` (identity breaks ties), or ``None``."""
        rows = await self.fetch(condition, projection, joins, order, limit=1)
        return rows[0] if rows else None

    # -- internals -----------------------------------------------------------

    def _validate(self, options: QueryOptions) -> None:
        schema = self.schema

        unknown = [j.relation for j in options.joins if j.relation not in schema.relations]
        if unknown:
            raise ProjectionMismatchError(
                unknown, list(schema.relations), context="join set"
            )

        available = schema.available_fields(options.joins)
        checks: list[tuple[str, Iterable[str]]] = [
            ("condition", referenced_paths(options.condition)),
            ("order", (key.field for key in options.order_by)),
        ]
        if options.projection is not None:
            checks.insert(0, ("projection", options.projection.paths))

        for context, paths in checks:
            missing = [path for path in paths if path not in available]
            if missing:
                raise ProjectionMismatchError(
                    missing, list(available), context=context
                )

    def _with_tie_breaker(self, order: tuple[SortKey, ...]) -> tuple[SortKey, ...]:
        identity = self.schema.identity_path
        if any(key.field == identity for key in order):
            return order
        return (*order, SortKey.asc(identity))

    async def _call(
        self,
        operation: str,
        fn: Callable[[QueryOptions], Awaitable[R]],
        options: QueryOptions,
    ) -> R:
        try:
            return await fn(options)
        except PageQueryError:
            raise
        except Exception as exc:
            logger.warning("Data source %s failed: %s", operation, exc)
            raise DataSourceError(
                f"Data source {operation} failed: {exc}", operation=operation
            ) from exc


def _check_window(offset: Any, limit: Any) -> None:
    if limit is not None:
        check_range(offset, limit)
    elif isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        raise InvalidRangeError(offset, limit)


def referenced_paths(condition: ICondition | None) -> frozenset[str]:
    if condition is None:
        return frozenset()
    return condition.referenced_fields()


def referenced_relations(condition: ICondition | None) -> frozenset[str]:
    """Entities a condition reads, e.g. ``{"member", "team"}``."""
    return frozenset(entity_of(path) for path in referenced_paths(condition))
