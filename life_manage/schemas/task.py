"""Task schemas."""
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional
from uuid import UUID

from life_manage.models.task import TaskStatus
from life_manage.utils.clock import as_utc


class TaskCreate(BaseModel):
    """Schema for creating a task."""
    project_id: UUID
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    status: TaskStatus = TaskStatus.PENDING
    due_date: Optional[datetime] = None  # ISO date string on the wire

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    class Config:
        use_enum_values = True


class TaskUpdate(BaseModel):
    """Schema for a partial task update."""
    project_id: Optional[UUID] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def due_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    class Config:
        use_enum_values = True


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    id: UUID
    user_id: str
    project_id: UUID
    title: str
    description: Optional[str] = None
    status: str
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
