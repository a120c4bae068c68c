"""Demo data: two teams and a hundred members.

Member ``i`` is named ``"member i"``, is ``i`` years old and belongs to
``teamA`` when ``i`` is even, ``teamB`` otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect

from pagequery_core.adapters.memory import InMemoryDataSource

from .models import MemberModel, TeamModel

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

TEAM_A_ID = 1
TEAM_B_ID = 2

# column names per entity, so an empty table still exposes its fields
MEMBER_FIELDS: dict[str, frozenset[str]] = {
    "member": frozenset(attr.key for attr in inspect(MemberModel).column_attrs),
    "team": frozenset(attr.key for attr in inspect(TeamModel).column_attrs),
}


def member_tables(count: int = 100) -> dict[str, list[dict[str, Any]]]:
    """Rows keyed by entity, shaped like the ``member`` and ``team`` tables."""
    return {
        "team": [
            {"id": TEAM_A_ID, "name": "teamA"},
            {"id": TEAM_B_ID, "name": "teamB"},
        ],
        "member": [
            {
                "id": i + 1,
                "username": f"member {i}",
                "age": i,
                "team_id": TEAM_A_ID if i % 2 == 0 else TEAM_B_ID,
            }
            for i in range(count)
        ],
    }


def member_data_source(
    count: int = 100,
    tables: dict[str, list[dict[str, Any]]] | None = None,
) -> InMemoryDataSource:
    """An in-memory source holding ``tables`` (default :func:`member_tables`)."""
    return InMemoryDataSource(
        "member",
        tables if tables is not None else member_tables(count),
        {"team": "team_id"},
        fields=MEMBER_FIELDS,
    )


def seed_members(count: int = 100) -> tuple[list[TeamModel], list[MemberModel]]:
    """Build (unsaved) model instances for :func:`member_tables`."""
    tables = member_tables(count)
    teams = [TeamModel(**row) for row in tables["team"]]
    members = [MemberModel(**row) for row in tables["member"]]
    return teams, members


async def seed_session(session: AsyncSession, count: int = 100) -> None:
    """Insert the demo data and flush; committing is left to the caller."""
    teams, members = seed_members(count)
    session.add_all(teams)
    await session.flush()
    session.add_all(members)
    await session.flush()
