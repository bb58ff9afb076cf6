from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field, UniqueConstraint


class GwSubmission(SQLModel, table=True):
    __tablename__ = "gw_submissions"
    __table_args__ = (UniqueConstraint("user_id", "gw", name="unique_user_gw_submission"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    gw: int = Field(index=True)
    submitted_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
