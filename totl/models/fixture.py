from datetime import datetime
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class Fixture(SQLModel, table=True):
    __tablename__ = "fixtures"
    __table_args__ = (UniqueConstraint("gw", "fixture_index", name="unique_gw_fixture"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    gw: int = Field(index=True)
    fixture_index: int  # 0-based within the gameweek

    # Teams
    home_code: Optional[str] = Field(default=None, max_length=3)
    away_code: Optional[str] = Field(default=None, max_length=3)
    home_name: Optional[str] = Field(default=None, max_length=100)
    away_name: Optional[str] = Field(default=None, max_length=100)

    # Presentation only
    kickoff_time: Optional[datetime] = Field(default=None)
