"""Shared fixtures: a member/team schema on in-memory SQLite."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from pagequery_persistence_sqlalchemy import SQLAlchemyDataSource


class Base(DeclarativeBase):
    pass


class TeamRecord(Base):
    __tablename__ = "team"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50))


class MemberRecord(Base):
    __tablename__ = "member"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str | None] = mapped_column(String(50), nullable=True)
    age: Mapped[int] = mapped_column(Integer)
    team_id: Mapped[int | None] = mapped_column(ForeignKey("team.id"), nullable=True)
    team: Mapped[TeamRecord | None] = relationship()


@pytest.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as sess:
        sess.add_all([TeamRecord(id=1, name="teamA"), TeamRecord(id=2, name="teamB")])
        sess.add_all(
            MemberRecord(
                id=i + 1,
                username=f"member{i}",
                age=i,
                team_id=1 if i % 2 == 0 else 2,
            )
            for i in range(100)
        )
        await sess.commit()
        yield sess


@pytest.fixture
def data_source(session: AsyncSession) -> SQLAlchemyDataSource:
    return SQLAlchemyDataSource(session, MemberRecord, {"team": MemberRecord.team})


@pytest.fixture
def member_model() -> type[MemberRecord]:
    return MemberRecord


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False)
