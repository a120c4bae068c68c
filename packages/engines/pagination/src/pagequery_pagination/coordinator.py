"""
PaginationCoordinator — one page of content plus its total, per count policy.

Three policies decide how the total is obtained:

- ``SIMPLE``: always run a count query with the same joins as the fetch.
- ``OPTIMISTIC_SKIP``: never count; derive the total from a short page.
- ``DECOUPLED_COUNT``: count with only the joins that can change it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from pagequery_core.domain.paging import Page
from pagequery_core.domain.projection import JoinKind, JoinSpec
from pagequery_core.primitives.exceptions import DeadlineExceededError, ValidationError

from .executor import referenced_relations

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pagequery_core.domain.paging import PageRequest
    from pagequery_core.domain.projection import Projection
    from pagequery_core.domain.specification import ICondition

    from .executor import QueryExecutor

T = TypeVar("T")

logger = logging.getLogger("pagequery.pagination")


class CountPolicy(str, Enum):
    SIMPLE = "simple"
    OPTIMISTIC_SKIP = "optimistic_skip"
    DECOUPLED_COUNT = "decoupled_count"


@dataclass(frozen=True)
class PaginationConfig:
    """
    Attributes:
        default_policy: Policy used when ``paginate`` is not given one.
        clock: Monotonic time source that deadlines are compared against.
    """

    default_policy: CountPolicy = CountPolicy.SIMPLE
    clock: Callable[[], float] = field(default=time.monotonic)


def infer_total(offset: int, limit: int, size: int) -> int | None:
    """Total implied by a page of ``size`` rows, or ``None`` if unknowable.

    A short, non-empty page is the last one.  An empty first page means
    nothing matched.  An empty page past the start says nothing.
    """
    if 0 < size < limit:
        return offset + size
    if size == 0 and offset == 0:
        return 0
    return None


def count_joins(
    condition: ICondition | None,
    joins: Iterable[JoinSpec],
) -> frozenset[JoinSpec]:
    """Joins a count query still needs.

    INNER joins drop root rows, so they stay.  A LEFT join to a to-one
    relation never changes the number of root rows; it stays only when the
    condition reads the joined entity.
    """
    needed = referenced_relations(condition)
    return frozenset(
        j for j in joins if j.kind is JoinKind.INNER or j.relation in needed
    )


class PaginationCoordinator:
    """Produces :class:`Page` results through a :class:`QueryExecutor`.

    Stateless: the same request against an unchanged store yields the same
    page.  Both queries of one call run through the same executor, so they
    observe the same snapshot when it is scoped to one transaction.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        config: PaginationConfig | None = None,
    ) -> None:
        self._executor = executor
        self._config = config or PaginationConfig()

    @property
    def config(self) -> PaginationConfig:
        return self._config

    async def paginate(
        self,
        condition: ICondition | None,
        page_request: PageRequest,
        *,
        projection: Projection[T],
        joins: Iterable[JoinSpec] = (),
        policy: CountPolicy | str | None = None,
        deadline: float | None = None,
    ) -> Page[T]:
        """
        Fetch one page and resolve its total.

        Args:
            condition: Filter tree; ``None`` matches everything.
            page_request: Window and ordering.
            projection: Output shape of each row.
            joins: Relations joined before filtering.
            policy: Overrides ``config.default_policy`` for this call.
            deadline: Absolute time on ``config.clock``; once passed, no
                count query is issued.

        Raises:
            ValidationError: ``policy`` names no known count policy.
            DeadlineExceededError: The deadline passed before the count.
        """
        if policy is None:
            resolved = self._config.default_policy
        else:
            try:
                resolved = CountPolicy(policy)
            except ValueError as e:
                valid = ", ".join(p.value for p in CountPolicy)
                message = f"Unknown count policy {policy!r}; expected one of: {valid}"
                raise ValidationError({"policy": [message]}) from e
        join_set = frozenset(joins)
        offset, limit = page_request.offset, page_request.limit

        content = await self._executor.fetch(
            condition,
            projection,
            join_set,
            page_request.sort,
            offset,
            limit,
        )

        if resolved is CountPolicy.OPTIMISTIC_SKIP:
            total = infer_total(offset, limit, len(content))
            logger.debug(
                "Count skipped (offset=%d, limit=%d, rows=%d, total=%s)",
                offset,
                limit,
                len(content),
                total,
            )
            return Page(tuple(content), offset, limit, total)

        if resolved is CountPolicy.DECOUPLED_COUNT:
            count_join_set = count_joins(condition, join_set)
        else:
            count_join_set = join_set

        self._check_deadline(deadline)
        total = await self._executor.count(condition, count_join_set)

        seen = offset + len(content)
        if content and total < seen:
            # store changed between the two queries
            logger.debug("Count %d below rows already seen %d", total, seen)
            total = seen
        return Page(tuple(content), offset, limit, total)

    def _check_deadline(self, deadline: float | None) -> None:
        if deadline is None:
            return
        now = self._config.clock()
        if now >= deadline:
            logger.warning(
                "Deadline passed %.3fs ago; count query not issued", now - deadline
            )
            raise DeadlineExceededError(
                "Deadline exceeded before the count query", operation="count"
            )
