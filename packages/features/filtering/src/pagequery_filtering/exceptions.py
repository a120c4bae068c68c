"""Filtering package exceptions."""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING

from pagequery_core.primitives.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable


class FilterParseError(ValidationError):
    """Raised when a query parameter cannot be parsed."""

    def __init__(self, param: str, message: str) -> None:
        self.param = param
        super().__init__({param: [message]})


class FieldNotAllowedError(ValidationError):
    """Raised when a field is not in the whitelist."""

    def __init__(self, field: str, allowed: Iterable[str], *, usage: str = "sortable") -> None:
        self.field = field
        self.allowed = sorted(allowed)
        self.suggestions = get_close_matches(field, self.allowed, n=3, cutoff=0.6)
        message = f"Field {field!r} is not {usage}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__({field: [message]})
