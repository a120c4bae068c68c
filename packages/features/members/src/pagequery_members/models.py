"""SQLAlchemy models backing the member search."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class TeamModel(Base):
    __tablename__ = "team"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"TeamModel(id={self.id!r}, name={self.name!r})"


class MemberModel(Base):
    __tablename__ = "member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str | None] = mapped_column(String(100), nullable=True)
    age: Mapped[int] = mapped_column(Integer, default=0)
    team_id: Mapped[int | None] = mapped_column(
        ForeignKey("team.id"), nullable=True, index=True
    )
    team: Mapped[TeamModel | None] = relationship()

    def __repr__(self) -> str:
        return (
            f"MemberModel(id={self.id!r}, username={self.username!r}, "
            f"age={self.age!r}, team_id={self.team_id!r})"
        )


MEMBER_RELATIONS = {"team": MemberModel.team}
