"""MemberSearchRepository — member/team search over any data source."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pagequery_core.domain.projection import JoinSpec
from pagequery_pagination import PaginationCoordinator, QueryExecutor

from .predicates import build_member_condition
from .projections import MEMBER_TEAM, MemberTeamRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pagequery_core.domain.paging import Page, PageRequest, SortKey
    from pagequery_core.ports.data_source import IDataSource
    from pagequery_pagination import CountPolicy, PaginationConfig

    from .criteria import MemberSearchCriteria

logger = logging.getLogger("pagequery.members")

# members without a team must still be listed
MEMBER_JOINS: tuple[JoinSpec, ...] = (JoinSpec.left("team"),)


class MemberSearchRepository:
    """
    Member search, unpaged or one page at a time.

    Example::

        repository = MemberSearchRepository.for_data_source(source)
        page = await repository.search_page(
            MemberSearchCriteria(team_name="teamA", age_goe=50),
            PageRequest(0, 10, (SortKey.desc("member.age"),)),
        )
    """

    def __init__(
        self,
        executor: QueryExecutor,
        coordinator: PaginationCoordinator | None = None,
    ) -> None:
        self._executor = executor
        self._coordinator = coordinator or PaginationCoordinator(executor)

    @classmethod
    def for_data_source(
        cls,
        data_source: IDataSource,
        config: PaginationConfig | None = None,
    ) -> MemberSearchRepository:
        executor = QueryExecutor(data_source)
        return cls(executor, PaginationCoordinator(executor, config))

    async def search(
        self,
        criteria: MemberSearchCriteria,
        order: Iterable[SortKey] = (),
    ) -> list[MemberTeamRow]:
        """Every matching member, ordered by ``order`` then by id."""
        condition = build_member_condition(criteria)
        return await self._executor.fetch(condition, MEMBER_TEAM, MEMBER_JOINS, order)

    async def search_page(
        self,
        criteria: MemberSearchCriteria,
        page_request: PageRequest,
        *,
        policy: CountPolicy | str | None = None,
        deadline: float | None = None,
    ) -> Page[MemberTeamRow]:
        condition = build_member_condition(criteria)
        logger.debug(
            "Member search page offset=%d limit=%d policy=%s",
            page_request.offset,
            page_request.limit,
            policy,
        )
        return await self._coordinator.paginate(
            condition,
            page_request,
            projection=MEMBER_TEAM,
            joins=MEMBER_JOINS,
            policy=policy,
            deadline=deadline,
        )
