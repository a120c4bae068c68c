"""Tests for ConditionFactory (from_dict, from_json, validation)."""

from __future__ import annotations

import json

import pytest

from pagequery_specifications import (
    Always,
    And,
    ConditionFactory,
    FieldNotAllowedError,
    OperatorNotFoundError,
    ValidationError,
)

# -- from_dict ----------------------------------------------------------------


def test_from_dict_leaf(registry, alice):
    cond = ConditionFactory.from_dict(
        {"op": "=", "attr": "member.username", "val": "alice"}, registry=registry
    )
    assert cond.is_satisfied_by(alice) is True


def test_from_dict_always(registry):
    assert isinstance(ConditionFactory.from_dict({"op": "always"}, registry=registry), Always)


def test_from_dict_folds_and_left_to_right(registry):
    data = {
        "op": "and",
        "conditions": [
            {"op": "=", "attr": "member.username", "val": "a"},
            {"op": ">=", "attr": "member.age", "val": 1},
            {"op": "<=", "attr": "member.age", "val": 9},
        ],
    }
    cond = ConditionFactory.from_dict(data, registry=registry)
    assert isinstance(cond, And)
    assert isinstance(cond.left, And)
    assert cond.right.to_dict() == {"op": "<=", "attr": "member.age", "val": 9}


def test_round_trip_through_to_dict(registry):
    data = {
        "op": "and",
        "conditions": [
            {"op": "=", "attr": "team.name", "val": "teamA"},
            {"op": ">=", "attr": "member.age", "val": 50},
        ],
    }
    cond = ConditionFactory.from_dict(data, registry=registry)
    assert cond.to_dict() == data


def test_from_dict_missing_op(registry):
    with pytest.raises(ValidationError, match="op"):
        ConditionFactory.from_dict({}, registry=registry)


def test_from_dict_unknown_operator_suggests(registry):
    with pytest.raises(OperatorNotFoundError) as info:
        ConditionFactory.from_dict(
            {"op": "=>", "attr": "member.age", "val": 1}, registry=registry
        )
    assert info.value.to_dict()["error"] == "OPERATOR_NOT_FOUND"


def test_from_dict_empty_and(registry):
    with pytest.raises(ValidationError, match="conditions"):
        ConditionFactory.from_dict({"op": "and", "conditions": []}, registry=registry)


def test_from_dict_reports_nested_path(registry):
    data = {"op": "and", "conditions": [{"op": "=", "attr": "x", "val": 1}, {"op": "="}]}
    with pytest.raises(ValidationError) as info:
        ConditionFactory.from_dict(data, registry=registry)
    assert info.value.path == "<root>.conditions[1]"


def test_from_dict_field_whitelist(registry):
    with pytest.raises(FieldNotAllowedError) as info:
        ConditionFactory.from_dict(
            {"op": "=", "attr": "member.usrname", "val": "x"},
            allowed_fields=["member.username", "member.age"],
            registry=registry,
        )
    assert "member.username" in info.value.suggestions


# -- from_json ----------------------------------------------------------------


def test_from_json_basic(registry, alice):
    payload = json.dumps({"op": ">=", "attr": "member.age", "val": 18})
    assert ConditionFactory.from_json(payload, registry=registry).is_satisfied_by(alice)


def test_from_json_invalid_json(registry):
    with pytest.raises(ValidationError, match="Invalid JSON"):
        ConditionFactory.from_json("not json {", registry=registry)


def test_from_json_non_object(registry):
    with pytest.raises(ValidationError, match="object"):
        ConditionFactory.from_json("[1, 2]", registry=registry)


# -- validate -----------------------------------------------------------------


def test_validate_valid_tree():
    data = {"op": "and", "conditions": [{"op": "=", "attr": "a", "val": 1}]}
    assert ConditionFactory.validate(data) == []


def test_validate_collects_all_errors():
    data = {
        "op": "and",
        "conditions": [
            {"op": "like", "attr": "a", "val": 1},
            {"op": "="},
            "nope",
        ],
    }
    errors = ConditionFactory.validate(data)
    assert len(errors) == 3
    assert any(
        e.startswith("<root>.conditions[0]: Unknown operator: 'like'") for e in errors
    )
    assert any("conditions[2]" in e for e in errors)


def test_validate_whitelist():
    errors = ConditionFactory.validate(
        {"op": "=", "attr": "secret", "val": 1}, allowed_fields=["member.age"]
    )
    assert errors == ["<root>: Field 'secret' is not allowed."]


def test_validate_reports_every_problem_of_a_leaf():
    errors = ConditionFactory.validate(
        {"op": "between", "val": 1}, allowed_fields=["member.age"]
    )
    assert errors[0].startswith("<root>: Unknown operator: 'between'")
    assert errors[1] == "<root>: Comparison is missing 'attr'"
