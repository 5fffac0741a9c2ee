"""Note model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Text
from datetime import datetime
from uuid import UUID, uuid4

from life_manage.utils.clock import utcnow


class Note(SQLModel, table=True):
    """Free-text note attached to a project."""
    __tablename__ = "notes"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(index=True, max_length=255)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
