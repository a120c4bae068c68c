"""Condition tree nodes: the base class, ``Always`` and binary ``And``."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from pagequery_core.domain.specification import ICondition

from .operators import ConditionOperator


class BaseCondition(ICondition):
    """Base class for condition nodes with ``&`` composition.

    Two conditions are equal when their serialized trees are equal.
    """

    def __and__(self, other: BaseCondition) -> BaseCondition:
        return conjoin(self, other)

    @property
    def is_always(self) -> bool:
        return False

    @abstractmethod
    def is_satisfied_by(self, candidate: Any) -> bool: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    @abstractmethod
    def referenced_fields(self) -> frozenset[str]: ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseCondition):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class Always(BaseCondition):
    """Matches every row; the identity element of AND."""

    @property
    def is_always(self) -> bool:
        return True

    def is_satisfied_by(self, candidate: Any) -> bool:  # noqa: ARG002
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"op": ConditionOperator.ALWAYS.value}

    def referenced_fields(self) -> frozenset[str]:
        return frozenset()


class And(BaseCondition):
    """Logical AND of exactly two conditions."""

    def __init__(self, left: BaseCondition, right: BaseCondition) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: Any) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(
            candidate
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": ConditionOperator.AND.value,
            "conditions": [self.left.to_dict(), self.right.to_dict()],
        }

    def referenced_fields(self) -> frozenset[str]:
        return self.left.referenced_fields() | self.right.referenced_fields()


def conjoin(left: BaseCondition, right: BaseCondition) -> BaseCondition:
    """AND two conditions, treating ``Always`` as identity."""
    if left.is_always:
        return right
    if right.is_always:
        return left
    return And(left, right)
