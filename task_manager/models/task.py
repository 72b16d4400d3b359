from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlalchemy.types import TypeDecorator
from sqlmodel import SQLModel, Field


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Stores UTC as a plain timestamp; always hands back aware UTC values.

    Naive values are taken to already be UTC.
    """
    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class Task(SQLModel, table=True):
    """Task model for todo items.

    Rows are only ever inserted and completed; ids are never reused.
    """
    __tablename__ = "task"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    description: str = Field(sa_type=Text, nullable=False)
    is_completed: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime, index=True)
    updated_at: datetime = Field(default_factory=utcnow, sa_type=UTCDateTime)
