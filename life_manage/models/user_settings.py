"""UserSettings model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, DateTime, Text
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from life_manage.utils.clock import utcnow


class UserSettings(SQLModel, table=True):
    """Per-user settings row holding the persisted completion credential."""
    __tablename__ = "user_settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(unique=True, index=True, max_length=255)
    # Stored as given; encryption at rest is an open question
    openai_key: Optional[str] = Field(default=None, sa_column=Column(Text))
    has_openai_key: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
