"""SQL compilation of comparison leaves, one strategy per operator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from pagequery_specifications.registry import OperatorRegistry

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

    from pagequery_specifications.operators import ConditionOperator


class SQLAlchemyOperator(ABC):
    """Turns ``(column, value)`` into a boolean clause for one operator."""

    operator: ClassVar[ConditionOperator]

    @abstractmethod
    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        """``column`` is a mapped attribute, possibly on an aliased entity."""


class SQLAlchemyOperatorRegistry(OperatorRegistry[SQLAlchemyOperator]):
    """Registry consulted by :func:`build_sqla_filter` for every leaf."""

    backend = "SQLAlchemy"

    def apply(
        self,
        op: ConditionOperator,
        column: Any,
        value: Any,
    ) -> ColumnElement[bool]:
        return self.lookup(op).apply(column, value)
