"""Comparison operators for SQLAlchemy.

``column == None`` and ``column != None`` render as ``IS NULL`` and
``IS NOT NULL``; any other comparison against NULL is never true.
"""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, ClassVar, cast

from pagequery_specifications.operators import ConditionOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.sql.elements import ColumnElement


class _BinaryOperator(SQLAlchemyOperator):
    compare: ClassVar[Callable[[Any, Any], Any]]

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", type(self).compare(column, value))


class EqualOperator(_BinaryOperator):
    operator = ConditionOperator.EQ
    compare = op_module.eq


class NotEqualOperator(_BinaryOperator):
    operator = ConditionOperator.NE
    compare = op_module.ne


class GreaterThanOperator(_BinaryOperator):
    operator = ConditionOperator.GT
    compare = op_module.gt


class LessThanOperator(_BinaryOperator):
    operator = ConditionOperator.LT
    compare = op_module.lt


class GreaterEqualOperator(_BinaryOperator):
    operator = ConditionOperator.GE
    compare = op_module.ge


class LessEqualOperator(_BinaryOperator):
    operator = ConditionOperator.LE
    compare = op_module.le
