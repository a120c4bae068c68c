"""InMemoryDataSource — list-of-dicts store for unit tests and demos."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from pagequery_core.domain.paging import NullPlacement, SortKey
from pagequery_core.domain.projection import JoinKind, SourceSchema
from pagequery_core.ports.data_source import IDataSource

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pagequery_core.domain.query_options import QueryOptions


class InMemoryDataSource(IDataSource):
    """In-memory implementation of :class:`IDataSource`.

    ``tables`` maps each entity name to its rows (plain dicts).  ``relations``
    maps a relation name to the foreign-key attribute on root rows, e.g.
    ``{"team": "team_id"}``; related rows are matched on their ``id``.

    Joined candidates are nested dicts (``{"member": {...}, "team": {...}}``)
    so that conditions resolve ``team.name`` the same way they resolve an
    attribute path on an object.  A LEFT-joined candidate without a related
    row carries ``None`` for that entity.

    ``fields`` declares the attribute names of an entity up front.  Entities
    it leaves out take their attributes from the rows they hold, so an
    empty table without declared fields exposes none.
    """

    def __init__(
        self,
        root: str,
        tables: Mapping[str, Iterable[Mapping[str, Any]]],
        relations: Mapping[str, str] | None = None,
        *,
        fields: Mapping[str, Iterable[str]] | None = None,
        identity: str = "id",
    ) -> None:
        self._root = root
        self._relations = dict(relations or {})
        self._tables: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in tables.items()
        }
        self._tables.setdefault(root, [])
        for relation in self._relations:
            self._tables.setdefault(relation, [])
        self._index: dict[str, dict[Any, dict[str, Any]]] = {
            relation: {row.get("id"): row for row in self._tables[relation]}
            for relation in self._relations
        }
        declared = dict(fields or {})
        self._schema = SourceSchema(
            root=root,
            fields={
                name: frozenset(declared[name])
                if name in declared
                else frozenset(key for row in rows for key in row)
                for name, rows in self._tables.items()
                if name == root or name in self._relations
            },
            identity=identity,
        )

    @property
    def schema(self) -> SourceSchema:
        return self._schema

    async def fetch(self, options: QueryOptions) -> list[dict[str, Any]]:
        if options.projection is None:
            raise ValueError("fetch() requires a projection")
        candidates = self._matching(options)
        candidates = _sort(candidates, options.order_by)
        start = options.offset or 0
        end = start + options.limit if options.limit is not None else None
        return [
            {
                name: copy.deepcopy(_resolve(candidate, path))
                for name, path in options.projection.fields
            }
            for candidate in candidates[start:end]
        ]

    async def count(self, options: QueryOptions) -> int:
        return len(self._matching(options))

    # -- internals -----------------------------------------------------------

    def _matching(self, options: QueryOptions) -> list[dict[str, Any]]:
        condition = options.condition
        result: list[dict[str, Any]] = []
        for candidate in self._joined(options):
            if condition is None or condition.is_satisfied_by(candidate):
                result.append(candidate)
        return result

    def _joined(self, options: QueryOptions) -> Iterable[dict[str, Any]]:
        for row in self._tables[self._root]:
            candidate: dict[str, Any] = {self._root: row}
            keep = True
            for relation, fk in self._relations.items():
                kind = options.join_kind(relation)
                if kind is None:
                    continue
                related = self._index[relation].get(row.get(fk))
                if related is None and kind is JoinKind.INNER:
                    keep = False
                    break
                candidate[relation] = related
            if keep:
                yield candidate

    # ── Test helpers ─────────────────────────────────────────────

    def add(self, entity: str, row: Mapping[str, Any]) -> None:
        stored = dict(row)
        self._tables[entity].append(stored)
        if entity in self._index:
            self._index[entity][stored.get("id")] = stored

    def __len__(self) -> int:
        return len(self._tables[self._root])


def _resolve(candidate: Mapping[str, Any], path: str) -> Any:
    obj: Any = candidate
    for part in path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj


def _sort(
    candidates: list[dict[str, Any]],
    order_by: tuple[SortKey, ...],
) -> list[dict[str, Any]]:
    """Multi-key stable sort; nulls compare lowest unless placed explicitly."""
    result = list(candidates)
    for key in reversed(order_by):
        nulls_first = key.nulls is NullPlacement.FIRST or (
            key.nulls is NullPlacement.DEFAULT and not key.descending
        )
        # reverse=True flips the rank order, so invert it for descending keys
        null_rank = 0 if nulls_first != key.descending else 2

        def sort_key(
            candidate: dict[str, Any],
            _k: SortKey = key,
            _n: int = null_rank,
        ) -> tuple[int, Any]:
            value = _resolve(candidate, _k.field)
            if value is None:
                return (_n, None)
            return (1, value)

        result.sort(key=sort_key, reverse=key.descending)
    return result
