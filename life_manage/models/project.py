"""
Project Model

A user-defined grouping of related conversations, tasks and notes.
Projects are created by hand or by the categorization workflow.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import SQLModel, Field

from life_manage.utils.clock import utcnow


class ProjectCategory(str, Enum):
    """Project category"""
    WORK = "work"
    PERSONAL = "personal"


class ProjectStatus(str, Enum):
    """Project status"""
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class Project(SQLModel, table=True):
    """
    Project entity.

    Tags are kept as a JSON list so the same column works on SQLite and
    PostgreSQL; list order is display order.
    """
    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(index=True, max_length=255)
    title: str = Field(max_length=200, min_length=1)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    category: str = Field(default=ProjectCategory.PERSONAL.value, max_length=20)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    status: str = Field(default=ProjectStatus.ACTIVE.value, max_length=20)
    priority: int = Field(default=0)
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
