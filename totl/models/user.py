from datetime import datetime, UTC
from typing import Optional
from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
