"""Composable member predicates.

Each helper returns ``Always()`` for an absent argument so helpers can be
combined freely with ``&``::

    condition = team_name_eq("teamA") & age_between(20, 40)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pagequery_specifications import BaseCondition, ConditionBuilder, build_default_registry

if TYPE_CHECKING:
    from pagequery_specifications import MemoryOperatorRegistry

    from .criteria import MemberSearchCriteria

USERNAME = "member.username"
TEAM_NAME = "team.name"
AGE = "member.age"

_DEFAULT_REGISTRY = build_default_registry()


def _single(
    field: str,
    op: str,
    value: object,
    registry: MemoryOperatorRegistry | None,
) -> BaseCondition:
    return (
        ConditionBuilder(registry or _DEFAULT_REGISTRY)
        .where_present(field, op, value)
        .build()
    )


def username_eq(
    username: str | None, registry: MemoryOperatorRegistry | None = None
) -> BaseCondition:
    return _single(USERNAME, "=", username, registry)


def team_name_eq(
    team_name: str | None, registry: MemoryOperatorRegistry | None = None
) -> BaseCondition:
    return _single(TEAM_NAME, "=", team_name, registry)


def age_goe(
    age: int | None, registry: MemoryOperatorRegistry | None = None
) -> BaseCondition:
    return _single(AGE, ">=", age, registry)


def age_loe(
    age: int | None, registry: MemoryOperatorRegistry | None = None
) -> BaseCondition:
    return _single(AGE, "<=", age, registry)


def age_between(
    low: int | None,
    high: int | None,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseCondition:
    """Inclusive range; either bound may be absent."""
    return age_goe(low, registry) & age_loe(high, registry)


def build_member_condition(
    criteria: MemberSearchCriteria,
    registry: MemoryOperatorRegistry | None = None,
) -> BaseCondition:
    """
    Build the filter for a member search.

    Present fields are added in a fixed order (username, team name, lower
    age bound, upper age bound), so equal criteria always produce equal
    trees.  No present field yields ``Always()``.  Contradictory bounds are
    kept and simply match nothing.
    """
    return (
        ConditionBuilder(registry or _DEFAULT_REGISTRY)
        .where_present(USERNAME, "=", criteria.username)
        .where_present(TEAM_NAME, "=", criteria.team_name)
        .where_present(AGE, ">=", criteria.age_goe)
        .where_present(AGE, "<=", criteria.age_loe)
        .build()
    )


__all__ = [
    "age_between",
    "age_goe",
    "age_loe",
    "build_member_condition",
    "team_name_eq",
    "username_eq",
]
