"""PaginationParser — offset/limit or page/size from query params."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pagequery_core.domain.paging import PageRequest

from .sort import parse_sort

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .whitelist import FieldWhitelist


class PaginationParser:
    """
    Parse a window and ordering from query params.

    ``offset``/``limit`` win over ``page``/``size`` (zero-based page).
    Malformed numbers fall back to the defaults; the limit is clamped to
    ``[1, max_limit]`` and the offset to ``>= 0``.
    """

    def __init__(
        self,
        *,
        default_limit: int = 20,
        max_limit: int = 100,
        whitelist: FieldWhitelist | None = None,
    ) -> None:
        if not 0 < default_limit <= max_limit:
            raise ValueError("default_limit must be in [1, max_limit]")
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.whitelist = whitelist

    def parse(
        self,
        query_params: Mapping[str, Any],
        *,
        offset_key: str = "offset",
        limit_key: str = "limit",
        page_key: str = "page",
        size_key: str = "size",
        sort_key: str = "sort",
    ) -> PageRequest:
        raw_limit = query_params.get(limit_key)
        if raw_limit is None:
            raw_limit = query_params.get(size_key)
        limit = self._int_param(raw_limit)
        if limit is None:
            limit = self.default_limit
        limit = min(self.max_limit, max(1, limit))

        offset = self._int_param(query_params.get(offset_key))
        if offset is None:
            page = self._int_param(query_params.get(page_key))
            offset = (page or 0) * limit
        offset = max(0, offset)

        sort = parse_sort(query_params.get(sort_key), self.whitelist, param=sort_key)
        return PageRequest(offset=offset, limit=limit, sort=sort)

    @staticmethod
    def _int_param(value: Any) -> int | None:
        if isinstance(value, list | tuple):
            value = value[0] if value else None
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
