"""Tests for exceptions module."""

from __future__ import annotations

import pytest

from pagequery_core import PageQueryError
from pagequery_core.primitives.exceptions import ValidationError as CoreValidationError
from pagequery_specifications import (
    ConditionError,
    FieldNotAllowedError,
    OperatorNotFoundError,
    ValidationError,
)

COMPARISONS = ["=", "!=", ">", "<", ">=", "<="]


# -- OperatorNotFoundError ---------------------------------------------------


def test_operator_not_found_fuzzy_suggestion():
    err = OperatorNotFoundError("<==", COMPARISONS)
    assert "'<=='" in str(err)
    assert "<=" in err.suggestions
    assert "Did you mean" in str(err)


def test_operator_not_found_no_matches():
    err = OperatorNotFoundError("between", COMPARISONS)
    d = err.to_dict()
    assert d["error"] == "OPERATOR_NOT_FOUND"
    assert d["suggestions"] == []
    assert d["valid_operators"] == sorted(COMPARISONS)


# -- FieldNotAllowedError ----------------------------------------------------


def test_field_not_allowed_suggests():
    err = FieldNotAllowedError(
        "member.usrname",
        ["member.username", "team.id"],
        path="<root>.conditions[0]",
    )
    assert err.suggestions == ["member.username"]
    assert err.to_dict() == {
        "error": "FIELD_NOT_ALLOWED",
        "field": "member.usrname",
        "path": "<root>.conditions[0]",
        "suggestions": ["member.username"],
    }


# -- Hierarchy ---------------------------------------------------------------


def test_hierarchy():
    assert issubclass(FieldNotAllowedError, ValidationError)
    assert issubclass(ValidationError, ConditionError)
    assert issubclass(OperatorNotFoundError, PageQueryError)


def test_validation_error_to_dict():
    err = ValidationError("Missing or empty 'op' key", path="<root>")
    assert err.to_dict() == {
        "error": "VALIDATION_ERROR",
        "message": "Missing or empty 'op' key",
        "path": "<root>",
    }


def test_validation_error_is_a_core_validation_error():
    err = FieldNotAllowedError("age", ["member.age"], path="<root>.conditions[2]")
    assert isinstance(err, CoreValidationError)
    assert err.errors == {"<root>.conditions[2]": [str(err)]}
    assert ValidationError("Empty tree").errors == {"__root__": ["Empty tree"]}
    assert str(ValidationError("Empty tree")) == "Empty tree"

    with pytest.raises(CoreValidationError):
        raise ValidationError("Missing 'attr'", path="<root>")
