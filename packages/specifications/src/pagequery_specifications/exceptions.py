"""
Errors raised while building, parsing or evaluating condition trees.

All of them derive from ``ConditionError`` (itself a ``PageQueryError``) and
serialize through ``to_dict()``.  Where the input was a near miss, the
error carries ``suggestions`` computed with :func:`difflib.get_close_matches`.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from pagequery_core.primitives.exceptions import PageQueryError
from pagequery_core.primitives.exceptions import ValidationError as CoreValidationError


def _suggest(word: str, candidates: list[str]) -> list[str]:
    return get_close_matches(word, candidates, n=3, cutoff=0.6)


def _did_you_mean(suggestions: list[str]) -> str:
    return f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""


class ConditionError(PageQueryError):
    """Base exception for all condition-tree errors.

    ``path`` locates the offending node in a serialized tree
    (``<root>.conditions[1]``) when there is one.
    """

    path: str | None = None


class ValidationError(ConditionError, CoreValidationError):
    """Serialized condition structure is malformed.

    Also a core ``ValidationError``: ``errors`` holds the message keyed by
    ``path`` (``__root__`` when there is none).
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        self.errors = {path or "__root__": [message]}
        PageQueryError.__init__(self, message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class OperatorNotFoundError(ConditionError):
    """The operator string names no known operator."""

    def __init__(
        self,
        operator: str,
        valid_operators: list[str],
        path: str | None = None,
    ) -> None:
        self.operator = operator
        self.valid_operators = sorted(valid_operators)
        self.suggestions = _suggest(operator, valid_operators)
        self.path = path
        super().__init__(
            f"Unknown operator: '{operator}'.{_did_you_mean(self.suggestions)}"
            f" Valid operators: {', '.join(self.valid_operators)}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": self.valid_operators,
        }


class FieldNotAllowedError(ValidationError):
    """
    Field path outside the caller's whitelist.

    Example message::

        Field 'member.usrname' is not allowed. Did you mean: member.username?
    """

    def __init__(
        self,
        field: str,
        allowed_fields: list[str],
        path: str | None = None,
    ) -> None:
        self.field = field
        self.allowed_fields = allowed_fields
        self.suggestions = _suggest(field, allowed_fields)
        super().__init__(
            f"Field '{field}' is not allowed.{_did_you_mean(self.suggestions)}",
            path=path,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_ALLOWED",
            "field": self.field,
            "path": self.path,
            "suggestions": self.suggestions,
        }


class UnsupportedOperatorError(ConditionError):
    """A valid operator with no strategy registered for the evaluating backend."""

    def __init__(self, operator: str, backend: str, registered: list[str]) -> None:
        self.operator = operator
        self.backend = backend
        self.registered = registered
        super().__init__(
            f"Unsupported operator for {backend} evaluation: '{operator}'. "
            f"Registered: {', '.join(registered) or 'none'}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_OPERATOR",
            "operator": self.operator,
            "backend": self.backend,
            "registered": self.registered,
        }
