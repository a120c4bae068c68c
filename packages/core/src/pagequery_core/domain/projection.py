"""
Query shape primitives: joins, projections, and the schema a data source serves.

Field paths are always ``"<entity>.<attribute>"``.  The schema's *root*
entity is always reachable; any other entity is reachable only when the
query joins the relation of the same name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

T = TypeVar("T")


class JoinKind(str, Enum):
    """LEFT keeps root rows lacking the relation; INNER drops them."""

    LEFT = "left"
    INNER = "inner"


@dataclass(frozen=True)
class JoinSpec:
    relation: str
    kind: JoinKind = JoinKind.LEFT

    @classmethod
    def left(cls, relation: str) -> JoinSpec:
        return cls(relation, JoinKind.LEFT)

    @classmethod
    def inner(cls, relation: str) -> JoinSpec:
        return cls(relation, JoinKind.INNER)


def entity_of(path: str) -> str:
    """Return the entity part of ``"entity.attr"``."""
    return path.split(".", 1)[0]


class ResultRow(BaseModel):
    """Base class for flat, read-only projection DTOs."""

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class Projection(Generic[T]):
    """
    A flat DTO shape: ordered ``(output_name, source_path)`` pairs plus the
    type that each fetched row is turned into.

    Example::

        MEMBER = Projection.of(
            MemberRow,
            username="member.username",
            age="member.age",
        )
    """

    fields: tuple[tuple[str, str], ...]
    row_type: Callable[..., T] | None = None

    @classmethod
    def of(cls, row_type: Callable[..., T] | None = None, **paths: str) -> Projection[T]:
        if not paths:
            raise ValueError("A projection needs at least one field")
        return cls(tuple(paths.items()), row_type)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.fields)

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(path for _, path in self.fields)

    @property
    def entities(self) -> frozenset[str]:
        return frozenset(entity_of(path) for path in self.paths)

    def build_row(self, values: Mapping[str, Any]) -> T:
        """Construct one row from a mapping keyed by output name."""
        data = {name: values.get(name) for name in self.names}
        if self.row_type is None:
            return data  # type: ignore[return-value]
        return self.row_type(**data)


@dataclass(frozen=True)
class SourceSchema:
    """
    What a data source can serve.

    Attributes:
        root: The base entity every query starts from.
        fields: Attribute names per entity (root included).
        identity: Root attribute used as the stable pagination tie-breaker.
    """

    root: str
    fields: Mapping[str, frozenset[str]] = field(default_factory=dict)
    identity: str = "id"

    @property
    def identity_path(self) -> str:
        return f"{self.root}.{self.identity}"

    @property
    def relations(self) -> frozenset[str]:
        return frozenset(name for name in self.fields if name != self.root)

    def available_fields(self, joins: Iterable[JoinSpec] = ()) -> frozenset[str]:
        """Field paths reachable from the root plus the given joins."""
        entities = {self.root} | {j.relation for j in joins}
        return frozenset(
            f"{entity}.{attr}"
            for entity in entities
            for attr in self.fields.get(entity, ())
        )

    def all_fields(self) -> frozenset[str]:
        return frozenset(
            f"{entity}.{attr}"
            for entity, attrs in self.fields.items()
            for attr in attrs
        )
