"""SQLAlchemyDataSource — ``IDataSource`` over an ``AsyncSession``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import RelationshipProperty, aliased

from pagequery_core.domain.projection import JoinKind, SourceSchema
from pagequery_core.ports.data_source import IDataSource
from pagequery_core.primitives.exceptions import DataSourceError, ProjectionMismatchError

from .exceptions import MappingError
from .specifications.compiler import (
    apply_ordering,
    apply_window,
    build_sqla_filter,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from pagequery_core.domain.query_options import QueryOptions

    from .specifications.strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger("pagequery.sqlalchemy")


class SQLAlchemyDataSource(IDataSource):
    """
    Runs ``QueryOptions`` as ``SELECT`` statements on one session.

    ``relations`` maps a relation name to a to-one relationship attribute
    on the root model, e.g. ``{"team": MemberModel.team}``.  Each joined
    relation gets its own alias, so field paths ``"team.name"`` resolve to
    that alias' columns.  The root entity is named after the root table
    unless ``root_name`` is given.

    Example::

        source = SQLAlchemyDataSource(
            session, MemberModel, {"team": MemberModel.team}
        )
        rows = await source.fetch(options)
    """

    def __init__(
        self,
        session: AsyncSession,
        root: type[Any],
        relations: Mapping[str, Any] | None = None,
        *,
        root_name: str | None = None,
        identity: str = "id",
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self._session = session
        self._root = root
        self._registry = registry
        self._root_name = root_name or inspect(root).local_table.name

        self._relations: dict[str, tuple[Any, Any]] = {}
        fields: dict[str, frozenset[str]] = {
            self._root_name: _column_keys(root),
        }
        for name, attr in (relations or {}).items():
            prop = getattr(attr, "property", None)
            if not isinstance(prop, RelationshipProperty):
                raise MappingError(f"Relation {name!r} is not a relationship attribute")
            if prop.uselist:
                raise MappingError(f"Relation {name!r} must be to-one")
            target = prop.mapper.class_
            self._relations[name] = (attr, aliased(target, name=name))
            fields[name] = _column_keys(target)

        if identity not in fields[self._root_name]:
            raise MappingError(
                f"{root.__name__} has no column {identity!r} to order ties by"
            )
        self._schema = SourceSchema(root=self._root_name, fields=fields, identity=identity)
        self._columns: dict[str, Any] = {
            f"{self._root_name}.{key}": getattr(root, key)
            for key in fields[self._root_name]
        }
        for name, (_, alias) in self._relations.items():
            self._columns.update(
                {f"{name}.{key}": getattr(alias, key) for key in fields[name]}
            )

    @property
    def schema(self) -> SourceSchema:
        return self._schema

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def fetch(self, options: QueryOptions) -> list[dict[str, Any]]:
        if options.projection is None:
            raise ValueError("fetch() requires a projection")
        self._check_reachable(options)
        stmt = select(
            *[
                self._columns[path].label(name)
                for name, path in options.projection.fields
            ]
        ).select_from(self._root)
        stmt = self._filtered(stmt, options)
        stmt = apply_ordering(stmt, options.order_by, self._columns)
        stmt = apply_window(stmt, options.offset, options.limit)

        logger.debug("Executing fetch: %s", stmt)
        try:
            result = await self._session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as exc:
            raise DataSourceError(f"Fetch failed: {exc}", operation="fetch") from exc

    async def count(self, options: QueryOptions) -> int:
        self._check_reachable(options)
        identity = self._columns[self._schema.identity_path]
        stmt = select(func.count(identity)).select_from(self._root)
        stmt = self._filtered(stmt, options)

        logger.debug("Executing count: %s", stmt)
        try:
            result = await self._session.execute(stmt)
            return int(result.scalar_one())
        except SQLAlchemyError as exc:
            raise DataSourceError(f"Count failed: {exc}", operation="count") from exc

    def _check_reachable(self, options: QueryOptions) -> None:
        """Reject paths of relations that are not joined.

        Selecting an unjoined alias would add it to FROM as a cross join.
        """
        available = self._schema.available_fields(options.joins)
        paths = [key.field for key in options.order_by]
        if options.projection is not None:
            paths.extend(options.projection.paths)
        if options.condition is not None:
            paths.extend(options.condition.referenced_fields())
        missing = sorted({path for path in paths if path not in available})
        if missing:
            raise ProjectionMismatchError(missing, list(available))

    def _filtered(self, stmt: Select[Any], options: QueryOptions) -> Select[Any]:
        for name, (attr, alias) in self._relations.items():
            kind = options.join_kind(name)
            if kind is JoinKind.INNER:
                stmt = stmt.join(attr.of_type(alias))
            elif kind is JoinKind.LEFT:
                stmt = stmt.outerjoin(attr.of_type(alias))
        if options.condition is not None:
            stmt = stmt.where(
                build_sqla_filter(
                    options.condition.to_dict(), self._columns, registry=self._registry
                )
            )
        return stmt


def _column_keys(model: type[Any]) -> frozenset[str]:
    return frozenset(attr.key for attr in inspect(model).column_attrs)
