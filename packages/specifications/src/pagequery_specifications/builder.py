"""
Fluent builder for condition trees.

Example::

    condition = (
        ConditionBuilder()
        .where_present("member.username", "=", criteria.username)
        .where_present("member.age", ">=", criteria.min_age)
        .build()
    )
    # → And(member.username = ..., member.age >= ...)
    # absent values are skipped; nothing added → Always()

Conditions are folded left-to-right in the order they were added, so the
same inputs always yield the same tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .ast import Comparison
from .base import Always, BaseCondition, conjoin
from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry
    from .operators import ConditionOperator


def is_absent(value: Any) -> bool:
    """``None``, the empty string and whitespace-only strings count as absent."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class ConditionBuilder:
    """Accumulates comparisons and ANDs them together on ``build()``."""

    def __init__(
        self,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._conditions: list[BaseCondition] = []

    @property
    def registry(self) -> MemoryOperatorRegistry:
        return self._registry

    def where(
        self,
        field: str,
        op: ConditionOperator | str,
        value: Any,
    ) -> ConditionBuilder:
        """Add a comparison unconditionally."""
        self._conditions.append(
            Comparison(field, op, value, registry=self._registry)
        )
        return self

    def where_present(
        self,
        field: str,
        op: ConditionOperator | str,
        value: Any,
    ) -> ConditionBuilder:
        """Add a comparison only when *value* is present."""
        if is_absent(value):
            return self
        return self.where(field, op, value)

    def add(self, condition: BaseCondition | None) -> ConditionBuilder:
        """Add an already-constructed condition; ``None`` is ignored."""
        if condition is not None:
            self._conditions.append(condition)
        return self

    def build(self) -> BaseCondition:
        result: BaseCondition = Always()
        for condition in self._conditions:
            result = conjoin(result, condition)
        return result

    def reset(self) -> ConditionBuilder:
        self._conditions.clear()
        return self

    def __len__(self) -> int:
        return len(self._conditions)
