"""Search criteria for members."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MemberSearchCriteria(BaseModel):
    """
    Sparse member filter; every field is optional.

    Populated either by attribute name or by the camelCase names the HTTP
    layer uses (``teamName``, ``ageGoe``, ``ageLoe``).  Blank strings are
    kept as given and treated as absent when the condition is built.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str | None = None
    team_name: str | None = Field(default=None, alias="teamName")
    age_goe: int | None = Field(default=None, alias="ageGoe")
    age_loe: int | None = Field(default=None, alias="ageLoe")
