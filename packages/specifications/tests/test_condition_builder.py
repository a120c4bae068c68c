"""Tests for the ConditionBuilder fluent API."""

from __future__ import annotations

import pytest

from pagequery_specifications import (
    Always,
    And,
    Comparison,
    ConditionBuilder,
    is_absent,
)


@pytest.fixture
def builder(registry) -> ConditionBuilder:
    return ConditionBuilder(registry=registry)


def test_empty_builder_yields_always(builder: ConditionBuilder):
    assert isinstance(builder.build(), Always)


def test_single_where(builder: ConditionBuilder, alice):
    cond = builder.where("member.username", "=", "alice").build()
    assert isinstance(cond, Comparison)
    assert cond.is_satisfied_by(alice)


def test_where_present_skips_absent_values(builder: ConditionBuilder):
    cond = (
        builder.where_present("member.username", "=", None)
        .where_present("team.name", "=", "")
        .where_present("team.name", "=", "   ")
        .build()
    )
    assert isinstance(cond, Always)


def test_where_present_keeps_zero(builder: ConditionBuilder):
    cond = builder.where_present("member.age", ">=", 0).build()
    assert cond.to_dict() == {"op": ">=", "attr": "member.age", "val": 0}


def test_build_folds_in_insertion_order(builder: ConditionBuilder):
    cond = (
        builder.where("member.username", "=", "a")
        .where("team.name", "=", "teamA")
        .where("member.age", ">=", 10)
        .build()
    )
    assert isinstance(cond, And)
    assert cond.right.to_dict()["attr"] == "member.age"
    assert cond.left.to_dict() == {
        "op": "and",
        "conditions": [
            {"op": "=", "attr": "member.username", "val": "a"},
            {"op": "=", "attr": "team.name", "val": "teamA"},
        ],
    }


def test_build_is_repeatable(builder: ConditionBuilder):
    builder.where("member.age", "<=", 5)
    assert builder.build() == builder.build()


def test_add_ignores_none(builder: ConditionBuilder):
    builder.add(None).add(Always())
    assert len(builder) == 1
    assert isinstance(builder.build(), Always)


def test_reset(builder: ConditionBuilder):
    builder.where("member.age", "<=", 5).reset()
    assert len(builder) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, True), ("", True), (" \t", True), ("x", False), (0, False), (False, False)],
)
def test_is_absent(value, expected):
    assert is_absent(value) is expected
