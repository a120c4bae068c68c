"""
Compile a serialized condition tree into a SQLAlchemy filter expression.

Uses the strategy pattern: each operator is an isolated class in
``operators/``, registered in a ``SQLAlchemyOperatorRegistry``.
``build_sqla_filter`` walks the tree and delegates leaf compilation to the
registry.

Field paths (``"team.name"``) are resolved through a *columns* mapping
built by the data source from the joined entities, so relationship
traversal never produces a correlated subquery: the join is already in
the ``FROM`` clause.

Query Options
-------------
``apply_ordering`` and ``apply_window`` take a ``Select`` statement and the
matching parts of a ``QueryOptions`` instance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, asc, desc, true

from pagequery_core.domain.paging import NullPlacement
from pagequery_specifications.exceptions import UnsupportedOperatorError
from pagequery_specifications.operators import COMPARISON_OPERATORS, ConditionOperator

from ..exceptions import CompilationError
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from pagequery_core.domain.paging import SortKey

    from .strategy import SQLAlchemyOperatorRegistry

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    data: dict[str, Any],
    columns: Mapping[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a condition dictionary.

    Args:
        data: Condition dictionary (produced by ``condition.to_dict()``).
        columns: Field path → column expression, e.g.
            ``{"member.age": MemberModel.age, "team.name": team_alias.name}``.
        registry: Optional custom operator registry.  Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        SQLAlchemy Boolean expression; ``always`` compiles to ``true()``.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    return _compile_node(data, columns, reg)


def apply_ordering(
    stmt: Select[Any],
    order_by: Iterable[SortKey],
    columns: Mapping[str, Any],
) -> Select[Any]:
    """Apply sort keys, honouring explicit null placement."""
    clauses: list[Any] = []
    for key in order_by:
        column = _column(columns, key.field)
        clause = desc(column) if key.descending else asc(column)
        if key.nulls is NullPlacement.FIRST:
            clause = clause.nulls_first()
        elif key.nulls is NullPlacement.LAST:
            clause = clause.nulls_last()
        clauses.append(clause)
    if clauses:
        return stmt.order_by(*clauses)
    return stmt


def apply_window(
    stmt: Select[Any],
    offset: int | None,
    limit: int | None,
) -> Select[Any]:
    """Apply limit and offset to statement."""
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset:
        stmt = stmt.offset(offset)
    return stmt


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _compile_node(
    data: dict[str, Any],
    columns: Mapping[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    op_str = str(data.get("op", "")).lower()

    if op_str == ConditionOperator.ALWAYS:
        return true()
    if op_str == ConditionOperator.AND:
        conditions = data.get("conditions") or []
        if not conditions:
            raise CompilationError("'and' node without conditions")
        return and_(*[_compile_node(c, columns, registry) for c in conditions])

    try:
        op = ConditionOperator(op_str)
    except ValueError as exc:
        raise CompilationError(f"Unknown operator: {op_str!r}") from exc
    if op not in COMPARISON_OPERATORS:
        raise CompilationError(f"Operator {op_str!r} is not a comparison")

    attr = data.get("attr")
    if not attr:
        raise CompilationError(f"Condition missing 'attr': {data}")
    column = _column(columns, attr)
    try:
        return registry.apply(op, column, data.get("val"))
    except UnsupportedOperatorError as exc:
        raise CompilationError(str(exc)) from exc


def _column(columns: Mapping[str, Any], path: str) -> Any:
    try:
        return columns[path]
    except KeyError:
        raise CompilationError(f"Unknown field path: {path!r}") from None
