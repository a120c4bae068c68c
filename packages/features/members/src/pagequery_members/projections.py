"""Flat result rows for member searches."""

from __future__ import annotations

from pagequery_core.domain.projection import Projection, ResultRow


class MemberTeamRow(ResultRow):
    member_id: int
    username: str | None = None
    age: int
    team_id: int | None = None
    team_name: str | None = None


class MemberRow(ResultRow):
    username: str | None = None
    age: int


class UserRow(ResultRow):
    """Same data as :class:`MemberRow` under the public ``name`` key."""

    name: str | None = None
    age: int


MEMBER_TEAM: Projection[MemberTeamRow] = Projection.of(
    MemberTeamRow,
    member_id="member.id",
    username="member.username",
    age="member.age",
    team_id="team.id",
    team_name="team.name",
)

MEMBER: Projection[MemberRow] = Projection.of(
    MemberRow,
    username="member.username",
    age="member.age",
)

USER: Projection[UserRow] = Projection.of(
    UserRow,
    name="member.username",
    age="member.age",
)
