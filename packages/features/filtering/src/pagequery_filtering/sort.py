"""Sort parameter parsing.

Two spellings are accepted, alone or mixed:

- compact: ``sort=-age,username`` (``-`` for descending, ``+`` optional)
- repeated pairs: ``sort=age,desc&sort=username,asc``

A ``nullsFirst`` / ``nullsLast`` token after a field or direction sets the
null placement of that field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pagequery_core.domain.paging import NullPlacement, SortDirection, SortKey

from .exceptions import FilterParseError

if TYPE_CHECKING:
    from .whitelist import FieldWhitelist

_DIRECTIONS = {"asc": SortDirection.ASC, "desc": SortDirection.DESC}
_NULLS = {
    "nullsfirst": NullPlacement.FIRST,
    "nulls_first": NullPlacement.FIRST,
    "nullslast": NullPlacement.LAST,
    "nulls_last": NullPlacement.LAST,
}


def parse_sort(
    raw: Any,
    whitelist: FieldWhitelist | None = None,
    *,
    param: str = "sort",
) -> tuple[SortKey, ...]:
    """Parse one or more raw sort values into sort keys, in order."""
    if raw is None:
        return ()
    values = [raw] if isinstance(raw, str) else list(raw)

    keys: list[SortKey] = []
    for value in values:
        if not isinstance(value, str):
            raise FilterParseError(param, f"Expected a string, got {type(value).__name__}")
        for token in (t.strip() for t in value.split(",")):
            if not token:
                continue
            lowered = token.lower()
            if lowered in _DIRECTIONS or lowered in _NULLS:
                if not keys:
                    raise FilterParseError(param, f"{token!r} must follow a field name")
                last = keys[-1]
                if lowered in _DIRECTIONS:
                    keys[-1] = SortKey(last.field, _DIRECTIONS[lowered], last.nulls)
                else:
                    keys[-1] = SortKey(last.field, last.direction, _NULLS[lowered])
                continue
            keys.append(_parse_field(token, whitelist, param))

    seen: set[str] = set()
    for key in keys:
        if key.field in seen:
            raise FilterParseError(param, f"Field {key.field!r} is sorted twice")
        seen.add(key.field)
    return tuple(keys)


def _parse_field(token: str, whitelist: FieldWhitelist | None, param: str) -> SortKey:
    direction = SortDirection.ASC
    if token[0] in "+-":
        direction = SortDirection.DESC if token[0] == "-" else SortDirection.ASC
        token = token[1:].strip()
    if not token:
        raise FilterParseError(param, "Empty field name")
    path = whitelist.resolve_sort(token) if whitelist is not None else token
    return SortKey(path, direction)
