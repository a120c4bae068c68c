"""API query parsing — pagination and sort parameters."""

from __future__ import annotations

from .exceptions import FieldNotAllowedError, FilterParseError
from .pagination import PaginationParser
from .sort import parse_sort
from .whitelist import FieldWhitelist

__all__ = [
    "FieldNotAllowedError",
    "FieldWhitelist",
    "FilterParseError",
    "PaginationParser",
    "parse_sort",
]
