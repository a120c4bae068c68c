"""Comparison operators: =, !=, >, <, >=, <=.

A missing value (``None``, e.g. a left-joined row without a team) never
satisfies an ordering comparison.
"""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, ClassVar

from ..evaluator import MemoryOperator
from ..operators import ConditionOperator

if TYPE_CHECKING:
    from collections.abc import Callable


class _ComparisonOperator(MemoryOperator):
    compare: ClassVar[Callable[[Any, Any], Any]]

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        return bool(type(self).compare(field_value, condition_value))


class EqualOperator(_ComparisonOperator):
    """``= None`` matches null fields, like ``IS NULL``."""

    operator = ConditionOperator.EQ
    compare = op_module.eq

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if condition_value is None:
            return field_value is None
        return super().evaluate(field_value, condition_value)


class NotEqualOperator(_ComparisonOperator):
    """``!= None`` means "is not null"; a null field never differs."""

    operator = ConditionOperator.NE
    compare = op_module.ne

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if condition_value is None:
            return field_value is not None
        return super().evaluate(field_value, condition_value)


class GreaterThanOperator(_ComparisonOperator):
    operator = ConditionOperator.GT
    compare = op_module.gt


class LessThanOperator(_ComparisonOperator):
    operator = ConditionOperator.LT
    compare = op_module.lt


class GreaterEqualOperator(_ComparisonOperator):
    operator = ConditionOperator.GE
    compare = op_module.ge


class LessEqualOperator(_ComparisonOperator):
    operator = ConditionOperator.LE
    compare = op_module.le
