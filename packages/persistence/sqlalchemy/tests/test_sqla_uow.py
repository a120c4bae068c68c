"""Tests for SQLAlchemyUnitOfWork."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from pagequery_core.domain.paging import PageRequest, SortKey
from pagequery_core.domain.projection import Projection
from pagequery_pagination import PaginationCoordinator, QueryExecutor
from pagequery_persistence_sqlalchemy import (
    SessionManagementError,
    SQLAlchemyDataSource,
    SQLAlchemyUnitOfWork,
    UnitOfWorkError,
)


def _mock_session(*, in_transaction: bool) -> AsyncMock:
    session = AsyncMock(spec=AsyncSession)
    session.in_transaction.return_value = in_transaction
    session.begin = AsyncMock()
    return session


def test_requires_exactly_one_session_source():
    with pytest.raises(SessionManagementError):
        SQLAlchemyUnitOfWork()
    with pytest.raises(SessionManagementError):
        SQLAlchemyUnitOfWork(session=MagicMock(), session_factory=MagicMock())


def test_session_before_enter():
    uow = SQLAlchemyUnitOfWork(session_factory=MagicMock())
    with pytest.raises(UnitOfWorkError, match="__aenter__"):
        _ = uow.session


@pytest.mark.asyncio()
async def test_commit_on_success():
    session = _mock_session(in_transaction=False)

    async with SQLAlchemyUnitOfWork(session=session):
        session.begin.assert_awaited_once()

    session.commit.assert_awaited_once()
    session.close.assert_not_awaited()


@pytest.mark.asyncio()
async def test_rollback_on_exception():
    session = _mock_session(in_transaction=True)

    with pytest.raises(ValueError, match="Boom"):
        async with SQLAlchemyUnitOfWork(session=session):
            raise ValueError("Boom")

    session.commit.assert_not_awaited()
    session.rollback.assert_awaited_once()


@pytest.mark.asyncio()
async def test_commit_failure_rolls_back():
    session = _mock_session(in_transaction=True)
    session.commit.side_effect = Exception("Commit failed")

    with pytest.raises(UnitOfWorkError):
        async with SQLAlchemyUnitOfWork(session=session):
            pass

    session.rollback.assert_awaited_once()


@pytest.mark.asyncio()
async def test_factory_session_is_closed():
    session = _mock_session(in_transaction=False)
    factory = MagicMock(return_value=session)

    async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
        assert uow.session is session

    session.commit.assert_awaited_once()
    session.close.assert_awaited_once()


@pytest.mark.asyncio()
async def test_factory_failure_is_wrapped():
    factory = MagicMock(side_effect=RuntimeError("no engine"))

    with pytest.raises(SessionManagementError, match="no engine"):
        async with SQLAlchemyUnitOfWork(session_factory=factory):
            pass


@pytest.mark.asyncio()
async def test_owned_session_closed_when_begin_fails():
    session = _mock_session(in_transaction=False)
    session.begin.side_effect = RuntimeError("database is locked")
    uow = SQLAlchemyUnitOfWork(session_factory=MagicMock(return_value=session))

    with pytest.raises(SessionManagementError, match="database is locked"):
        async with uow:
            pass

    session.close.assert_awaited_once()
    with pytest.raises(UnitOfWorkError):
        uow.session  # noqa: B018


@pytest.mark.asyncio()
async def test_borrowed_session_left_open_when_begin_fails():
    session = _mock_session(in_transaction=False)
    session.begin.side_effect = RuntimeError("database is locked")

    with pytest.raises(SessionManagementError):
        async with SQLAlchemyUnitOfWork(session=session):
            pass

    session.close.assert_not_awaited()


@pytest.mark.asyncio()
async def test_paginate_inside_unit_of_work(session_factory, session, member_model):
    projection = Projection.of(username="member.username", age="member.age")

    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
        source = uow.data_source(member_model, {"team": member_model.team})
        assert isinstance(source, SQLAlchemyDataSource)
        coordinator = PaginationCoordinator(QueryExecutor(source))
        page = await coordinator.paginate(
            None, PageRequest(10, 5, (SortKey.asc("member.age"),)), projection=projection
        )

    assert [row["age"] for row in page.content] == [10, 11, 12, 13, 14]
    assert page.total == 100
