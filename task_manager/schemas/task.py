from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_pascal
from datetime import datetime

from ..errors import ValidationError


class TaskCreate(BaseModel):
    """Schema for creating new tasks.

    Both fields must be non-blank; values are passed on untrimmed.
    """
    title: str
    description: str

    class Config:
        alias_generator = to_pascal
        populate_by_name = True

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str, info) -> str:
        if not value.strip():
            field = to_pascal(info.field_name)
            raise ValidationError(f"{field} is required", fields={field: "required"})
        return value


class TaskRead(BaseModel):
    """Task as it appears on the wire (PascalCase field names)."""
    id: int
    title: str
    description: str
    is_completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_pascal
        populate_by_name = True
        from_attributes = True
