"""
Request-scoped transaction for paginated searches.

A search never writes, but its content query and its count query must run
in the same transaction so the total describes the rows that were fetched.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, Any

from pagequery_core.ports.unit_of_work import UnitOfWork

from ..data_source import SQLAlchemyDataSource
from ..exceptions import SessionManagementError, UnitOfWorkError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger("pagequery.uow")


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Holds one ``AsyncSession`` transaction for the duration of a request.

    Give it either an existing ``session`` (the caller keeps ownership) or
    a ``session_factory`` such as an ``async_sessionmaker``; a session made
    from the factory is closed when the block exits::

        async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
            source = uow.data_source(MemberModel, MEMBER_RELATIONS)
            page = await MemberSearchRepository.for_data_source(source).search_page(
                criteria, request
            )
    """

    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: Callable[[], AsyncSession] | None = None,
    ) -> None:
        if (session is None) == (session_factory is None):
            raise SessionManagementError(
                "Provide exactly one of 'session' or 'session_factory'."
            )
        self._session = session
        self._factory = session_factory

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise UnitOfWorkError("No session yet; enter the unit with __aenter__ first.")
        return self._session

    def data_source(
        self,
        root: type[Any],
        relations: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> SQLAlchemyDataSource:
        """Build a data source bound to this unit's session."""
        return SQLAlchemyDataSource(self.session, root, relations, **kwargs)

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        try:
            if self._factory is not None:
                self._session = self._factory()
            if not self.session.in_transaction():
                await self.session.begin()
        except UnitOfWorkError:
            raise
        except Exception as e:  # noqa: BLE001
            if self._factory is not None and self._session is not None:
                logger.warning("Closing the new session after a failed begin: %s", e)
                with contextlib.suppress(SessionManagementError):
                    await self._close_owned()
            raise SessionManagementError(f"Could not open a session: {e}") from e
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc_val, exc_tb)
        finally:
            if self._factory is not None and self._session is not None:
                await self._close_owned()

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except Exception as e:  # noqa: BLE001
            logger.warning("Commit failed, rolling back: %s", e)
            with contextlib.suppress(Exception):
                await self.rollback()
            raise UnitOfWorkError(f"Commit failed: {e}") from e

    async def rollback(self) -> None:
        if not self.session.in_transaction():
            return
        try:
            await self.session.rollback()
        except Exception as e:  # noqa: BLE001
            raise UnitOfWorkError(f"Rollback failed: {e}") from e

    async def _close_owned(self) -> None:
        session, self._session = self._session, None
        try:
            await session.close()  # type: ignore[union-attr]
        except Exception as e:  # noqa: BLE001
            raise SessionManagementError(f"Could not close the session: {e}") from e
