"""Map HTTP query parameters onto a member search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from pagequery_core.primitives.exceptions import ValidationError
from pagequery_filtering import FieldWhitelist, PaginationParser
from pagequery_specifications import is_absent

from .criteria import MemberSearchCriteria

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pagequery_core.domain.paging import PageRequest

MEMBER_WHITELIST = FieldWhitelist(
    sortable_fields={"member.id", "member.username", "member.age", "team.name"},
    aliases={
        "id": "member.id",
        "memberId": "member.id",
        "username": "member.username",
        "age": "member.age",
        "teamName": "team.name",
    },
)

_CRITERIA_KEYS = ("username", "teamName", "ageGoe", "ageLoe")


def parse_member_search(
    query_params: Mapping[str, Any],
    *,
    parser: PaginationParser | None = None,
) -> tuple[MemberSearchCriteria, PageRequest]:
    """
    Parse ``?username=&teamName=&ageGoe=&ageLoe=`` plus paging params.

    Example::

        criteria, request = parse_member_search(
            {"teamName": "teamA", "ageGoe": "50", "page": "1", "size": "10",
             "sort": "age,desc"}
        )

    Raises:
        ValidationError: a criteria value has the wrong type.
        FieldNotAllowedError: the sort names an unknown field.
    """
    raw = {key: _first(query_params.get(key)) for key in _CRITERIA_KEYS}
    raw = {key: value for key, value in raw.items() if not is_absent(value)}
    try:
        criteria = MemberSearchCriteria.model_validate(raw)
    except PydanticValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            errors.setdefault(field, []).append(error["msg"])
        raise ValidationError(errors) from exc

    parser = parser or PaginationParser(whitelist=MEMBER_WHITELIST)
    return criteria, parser.parse(query_params)


def _first(value: Any) -> Any:
    if isinstance(value, list | tuple):
        return value[0] if value else None
    return value
