"""Shared fixtures: 100 members, even ones in teamA, age == index."""

from __future__ import annotations

from typing import Any

import pytest

from pagequery_core.adapters.memory import InMemoryDataSource
from pagequery_core.domain.projection import Projection
from pagequery_pagination import PaginationCoordinator, QueryExecutor
from pagequery_specifications.operators_memory import build_default_registry


class RecordingDataSource(InMemoryDataSource):
    """Keeps every ``QueryOptions`` it was asked to run."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.fetched: list[Any] = []
        self.counted: list[Any] = []

    async def fetch(self, options):
        self.fetched.append(options)
        return await super().fetch(options)

    async def count(self, options):
        self.counted.append(options)
        return await super().count(options)


def make_tables(n: int = 100) -> dict[str, list[dict[str, Any]]]:
    return {
        "team": [{"id": 1, "name": "teamA"}, {"id": 2, "name": "teamB"}],
        "member": [
            {
                "id": i + 1,
                "username": f"member{i}",
                "age": i,
                "team_id": 1 if i % 2 == 0 else 2,
            }
            for i in range(n)
        ],
    }


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def data_source() -> RecordingDataSource:
    return RecordingDataSource("member", make_tables(), {"team": "team_id"})


@pytest.fixture
def executor(data_source: RecordingDataSource) -> QueryExecutor:
    return QueryExecutor(data_source)


@pytest.fixture
def coordinator(executor: QueryExecutor) -> PaginationCoordinator:
    return PaginationCoordinator(executor)


@pytest.fixture
def member_team() -> Projection[dict[str, Any]]:
    return Projection.of(
        member_id="member.id",
        username="member.username",
        age="member.age",
        team_id="team.id",
        team_name="team.name",
    )


@pytest.fixture
def member_only() -> Projection[dict[str, Any]]:
    return Projection.of(username="member.username", age="member.age")
