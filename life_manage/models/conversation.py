"""
Conversation Model

An imported chat transcript. Rows are created by the import with no
project; the categorization workflow (or a manual assignment) sets
project_id later.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import SQLModel, Field

from life_manage.utils.clock import utcnow


class Conversation(SQLModel, table=True):
    """
    Imported conversation.

    content holds the whole exported entry:
    {id, title, create_time, update_time, mapping}
    """
    __tablename__ = "conversations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(index=True, max_length=255)
    project_id: Optional[UUID] = Field(default=None, foreign_key="projects.id", index=True)
    title: str = Field(max_length=500)
    content: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    conversation_id: str = Field(max_length=255)  # id in the source export
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime(timezone=True), nullable=False))
