from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class League(SQLModel, table=True):
    """Mini-league of friends competing on weekly scores."""
    __tablename__ = "leagues"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, max_length=100)
    code: str = Field(unique=True, index=True, max_length=20)  # join code
    start_gw: Optional[int] = Field(default=None)  # None counts every gameweek
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class LeagueMember(SQLModel, table=True):
    """Junction table between users and leagues."""
    __tablename__ = "league_members"
    __table_args__ = (UniqueConstraint("league_id", "user_id", name="unique_league_user"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    league_id: int = Field(foreign_key="leagues.id", index=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    joined_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
