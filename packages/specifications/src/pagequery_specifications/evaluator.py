"""In-memory evaluation of comparison leaves against candidate rows."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from .registry import OperatorRegistry

if TYPE_CHECKING:
    from .operators import ConditionOperator


class MemoryOperator(ABC):
    """Decides one comparison for a resolved field value."""

    operator: ClassVar[ConditionOperator]

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """``field_value`` comes from the candidate, ``condition_value`` from the leaf."""


class MemoryOperatorRegistry(OperatorRegistry[MemoryOperator]):
    """
    Registry used by ``Comparison.is_satisfied_by``.

    Usage::

        registry = MemoryOperatorRegistry(EqualOperator(), GreaterEqualOperator())
        registry.evaluate(ConditionOperator.GE, 50, 18)  # True
    """

    backend = "in-memory"

    def evaluate(
        self,
        op: ConditionOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """
        Raises:
            UnsupportedOperatorError: nothing is registered for ``op``.
        """
        return self.lookup(op).evaluate(field_value, condition_value)
