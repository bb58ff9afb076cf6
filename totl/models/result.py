from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class GwResult(SQLModel, table=True):
    __tablename__ = "gw_results"
    __table_args__ = (UniqueConstraint("gw", "fixture_index", name="unique_result_gw_fixture"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    gw: int = Field(index=True)
    fixture_index: int

    # Newer rows store the outcome, legacy rows only carry goals
    outcome: Optional[str] = Field(default=None, max_length=1)  # H, D, A
    home_goals: Optional[int] = Field(default=None)
    away_goals: Optional[int] = Field(default=None)

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
