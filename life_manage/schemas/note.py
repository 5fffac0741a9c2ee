"""Note schemas."""
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional
from uuid import UUID


def strip_content(value: str) -> str:
    if not value.strip():
        raise ValueError("content must not be blank")
    return value.strip()


class NoteCreate(BaseModel):
    """Schema for creating a note."""
    project_id: UUID
    content: str = Field(..., min_length=1)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        return strip_content(value)


class NoteUpdate(BaseModel):
    """Notes only ever have their content replaced."""
    content: Optional[str] = Field(None, min_length=1)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: Optional[str]) -> Optional[str]:
        return None if value is None else strip_content(value)


class NoteBody(BaseModel):
    """Request body for adding a note under a project."""
    content: str = Field(..., min_length=1)


class NoteResponse(BaseModel):
    """Schema for note API responses."""
    id: UUID
    user_id: str
    project_id: UUID
    content: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
