from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class Pick(SQLModel, table=True):
    __tablename__ = "picks"
    __table_args__ = (
        UniqueConstraint("user_id", "gw", "fixture_index", name="unique_user_gw_fixture"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    gw: int = Field(index=True)
    fixture_index: int
    pick: str = Field(max_length=1)  # H, D, A

    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
