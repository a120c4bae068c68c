"""UnitOfWork: one transaction per search request."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger("pagequery.uow")


class UnitOfWork(ABC):
    """
    Base class for request-scoped transactions.

    One unit of work wraps one top-level request: the content query and
    the optional count query of a paginated search run inside it, so both
    observe the same snapshot under concurrent writers.

    Example:
        ```python
        async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
            source = uow.data_source(MemberModel, MEMBER_RELATIONS)
            page = await coordinator.paginate(...)
        ```
    """

    @abstractmethod
    async def commit(self) -> None:
        """End the transaction successfully."""
        ...

    @abstractmethod
    async def rollback(self) -> None:
        """Abandon the transaction; a no-op when none is open."""
        ...

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Commit when the block succeeded, rollback otherwise."""
        if exc_type is None:
            await self.commit()
        else:
            logger.debug("Rolling back unit of work after %s", exc_type.__name__)
            await self.rollback()
