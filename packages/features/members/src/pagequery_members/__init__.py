"""pagequery-members — member/team search built on the pagination engine."""

from __future__ import annotations

from .criteria import MemberSearchCriteria
from .models import MEMBER_RELATIONS, Base, MemberModel, TeamModel
from .params import MEMBER_WHITELIST, parse_member_search
from .predicates import (
    age_between,
    age_goe,
    age_loe,
    build_member_condition,
    team_name_eq,
    username_eq,
)
from .projections import (
    MEMBER,
    MEMBER_TEAM,
    USER,
    MemberRow,
    MemberTeamRow,
    UserRow,
)
from .repository import MEMBER_JOINS, MemberSearchRepository
from .seed import (
    MEMBER_FIELDS,
    member_data_source,
    member_tables,
    seed_members,
    seed_session,
)

__all__ = [
    # Criteria & predicates
    "MemberSearchCriteria",
    "age_between",
    "age_goe",
    "age_loe",
    "build_member_condition",
    "team_name_eq",
    "username_eq",
    # Projections
    "MEMBER",
    "MEMBER_TEAM",
    "USER",
    "MemberRow",
    "MemberTeamRow",
    "UserRow",
    # Repository
    "MEMBER_JOINS",
    "MemberSearchRepository",
    # Models
    "Base",
    "MEMBER_RELATIONS",
    "MemberModel",
    "TeamModel",
    # HTTP params
    "MEMBER_WHITELIST",
    "parse_member_search",
    # Demo data
    "MEMBER_FIELDS",
    "member_data_source",
    "member_tables",
    "seed_members",
    "seed_session",
]
