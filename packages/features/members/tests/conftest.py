"""Member search fixtures: the demo data in memory and on SQLite."""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from pagequery_members import (
    MEMBER_RELATIONS,
    Base,
    MemberModel,
    MemberSearchRepository,
    member_data_source,
    seed_session,
)
from pagequery_persistence_sqlalchemy import SQLAlchemyDataSource


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine):
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        await seed_session(sess)
        await sess.commit()
        yield sess


@pytest.fixture(params=["memory", "sqlite"])
def data_source(request, session):
    if request.param == "memory":
        return member_data_source()
    return SQLAlchemyDataSource(session, MemberModel, MEMBER_RELATIONS)


@pytest.fixture
def repository(data_source) -> MemberSearchRepository:
    return MemberSearchRepository.for_data_source(data_source)
