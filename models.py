from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(SQLModel, table=True):
    """Task on the shared list"""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    text: str = Field(max_length=500)
    created_at: datetime = Field(default_factory=utcnow, index=True)
    # Identity value from the auth provider; users live outside this database.
    owner: str = Field(index=True)
    username: str
    checked: bool = Field(default=False)
    private: bool = Field(default=False)
