"""Tests for the shared error hierarchy."""

import pytest

from pagequery_core import (
    DataSourceError,
    DeadlineExceededError,
    InfrastructureError,
    PageQueryError,
    ProjectionMismatchError,
    ValidationError,
)


def test_projection_mismatch_sorts_and_truncates() -> None:
    available = [f"member.f{i:02d}" for i in range(20)]
    error = ProjectionMismatchError(["team.name", "office.city"], available)

    assert error.missing == ["office.city", "team.name"]
    assert "office.city, team.name" in str(error)
    assert str(error).endswith(", ...")
    assert error.to_dict()["context"] == "projection"


def test_validation_error_shapes() -> None:
    assert ValidationError("bad").errors == {"__root__": ["bad"]}
    assert ValidationError().errors == {}
    assert ValidationError({"age": ["too low"]}).to_dict() == {
        "error": "VALIDATION_ERROR",
        "errors": {"age": ["too low"]},
    }


def test_data_source_error_hierarchy() -> None:
    error = DeadlineExceededError("late", operation="count")

    assert isinstance(error, DataSourceError)
    assert isinstance(error, InfrastructureError)
    assert isinstance(error, PageQueryError)
    assert error.to_dict() == {
        "error": "DATA_SOURCE_ERROR",
        "operation": "count",
        "message": "late",
    }


def test_base_to_dict() -> None:
    with pytest.raises(PageQueryError) as info:
        raise PageQueryError("boom")
    assert info.value.to_dict() == {"error": "PageQueryError", "message": "boom"}
