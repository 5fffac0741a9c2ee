"""Project schemas."""
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from life_manage.models.project import ProjectCategory, ProjectStatus


def clean_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    """Strip tags, drop blanks and duplicates, keep first-seen order."""
    if tags is None:
        return None
    seen = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class ProjectCreate(BaseModel):
    """Schema for creating a project."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    category: ProjectCategory = ProjectCategory.PERSONAL
    tags: List[str] = Field(default_factory=list)
    status: ProjectStatus = ProjectStatus.ACTIVE
    priority: int = 0

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, value):
        return clean_tags(value)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value.strip()

    class Config:
        use_enum_values = True


class ProjectUpdate(BaseModel):
    """Schema for a partial project update."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    category: Optional[ProjectCategory] = None
    tags: Optional[List[str]] = None
    status: Optional[ProjectStatus] = None
    priority: Optional[int] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, value):
        return clean_tags(value)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        if not value.strip():
            raise ValueError("title must not be blank")
        return value.strip()

    class Config:
        use_enum_values = True


class ProjectResponse(BaseModel):
    """Schema for project API responses."""
    id: UUID
    user_id: str
    title: str
    description: Optional[str] = None
    category: str
    tags: List[str] = []
    status: str
    priority: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
