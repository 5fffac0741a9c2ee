"""Schemas for completion-assisted workflow results."""
from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, List, Optional
from uuid import UUID

from life_manage.models.project import ProjectCategory
from life_manage.schemas.project import ProjectResponse, clean_tags
from life_manage.schemas.task import TaskResponse


class Categorization(BaseModel):
    """Parsed categorization answer."""
    category: ProjectCategory
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def limit_tags(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError("tags must be a list")
        return clean_tags([str(tag) for tag in value])[:5]

    class Config:
        use_enum_values = True


class NextStep(BaseModel):
    """One proposed next step."""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None


class CategorizationStepResponse(BaseModel):
    index: int
    conversation_id: UUID
    project_id: Optional[UUID] = None
    project_created: bool = False
    outcome: str
    category: Optional[str] = None
    tags: List[str] = []
    progress: float
    error: Optional[str] = None


class CategorizationReportResponse(BaseModel):
    processed: int
    projects_created: int
    steps: List[CategorizationStepResponse]
    error: Optional[str] = None
    message: str


class NextStepsResponse(BaseModel):
    project_id: UUID
    outcome: str
    created: List[TaskResponse]
    tasks: List[TaskResponse]
    message: str


class DashboardResponse(BaseModel):
    projects: List[ProjectResponse]
    tasks: List[TaskResponse]
    priority_tasks: List[TaskResponse]
    recent_projects: List[ProjectResponse]
    summary: Optional[str] = None
    summary_outcome: Optional[str] = None
    counts: Dict[str, int]
