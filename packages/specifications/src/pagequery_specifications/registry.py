"""
Operator-to-strategy lookup shared by every backend.

A condition tree only names its operators.  Each backend (in-memory
evaluation, SQL compilation) supplies one strategy object per operator and
collects them in a subclass of :class:`OperatorRegistry`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, Protocol, TypeVar

from .exceptions import UnsupportedOperatorError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .operators import ConditionOperator


class OperatorStrategy(Protocol):
    operator: ClassVar[ConditionOperator]


S = TypeVar("S", bound=OperatorStrategy)


class OperatorRegistry(Generic[S]):
    """Strategies keyed by the :class:`ConditionOperator` they handle.

    Registering a second strategy for the same operator replaces the first.
    """

    backend: ClassVar[str] = "generic"

    def __init__(self, *strategies: S) -> None:
        self._strategies: dict[ConditionOperator, S] = {}
        for strategy in strategies:
            self.register(strategy)

    def register(self, strategy: S) -> None:
        self._strategies[strategy.operator] = strategy

    def lookup(self, op: ConditionOperator) -> S:
        try:
            return self._strategies[op]
        except KeyError:
            raise UnsupportedOperatorError(
                op.value, self.backend, sorted(o.value for o in self._strategies)
            ) from None

    @property
    def operators(self) -> frozenset[ConditionOperator]:
        return frozenset(self._strategies)

    def __contains__(self, op: object) -> bool:
        return op in self._strategies

    def __iter__(self) -> Iterator[S]:
        return iter(self._strategies.values())

    def __len__(self) -> int:
        return len(self._strategies)
