"""Shared fixtures for condition tests."""

from __future__ import annotations

import pytest

from pagequery_specifications.operators_memory import build_default_registry


@pytest.fixture
def registry():
    """Default in-memory operator registry for building conditions."""
    return build_default_registry()


@pytest.fixture
def alice() -> dict:
    """A joined candidate shaped like the in-memory data source produces."""
    return {
        "member": {"id": 1, "username": "alice", "age": 28, "team_id": 1},
        "team": {"id": 1, "name": "teamA"},
    }


@pytest.fixture
def loner() -> dict:
    """A member without a team (left join produced no related row)."""
    return {
        "member": {"id": 2, "username": "loner", "age": 61, "team_id": None},
        "team": None,
    }
