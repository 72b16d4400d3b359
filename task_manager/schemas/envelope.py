from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from .task import TaskRead


def iso_timestamp() -> str:
    """UTC now as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


class Envelope(BaseModel):
    """Fields shared by every API response."""
    code: str
    message: str
    timestamp: str = Field(default_factory=iso_timestamp)


class TaskEnvelope(Envelope):
    data: TaskRead


class TaskListEnvelope(Envelope):
    data: List[TaskRead]
    count: int


class ErrorEnvelope(Envelope):
    error: Optional[str] = None
