"""Project router, with the project's notes and next steps."""
from fastapi import APIRouter, Depends, Query, status
from typing import Any, Dict, List, Optional
from uuid import UUID

from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.models.project import ProjectCategory, ProjectStatus
from life_manage.routers.deps import get_completion_client, get_gateway, get_session_context
from life_manage.agents.next_steps import NextStepsAgent
from life_manage.schemas.conversation import ConversationResponse
from life_manage.schemas.note import NoteBody, NoteResponse
from life_manage.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from life_manage.schemas.task import TaskResponse
from life_manage.schemas.workflow import NextStepsResponse
from life_manage.services.completion_client import CompletionClient
from life_manage.services.gateway import PersistenceGateway
from life_manage.services.next_steps_service import NextStepsService
from life_manage.session import SessionContext

router = APIRouter(tags=["Projects"])


@router.get("/projects", response_model=Dict[str, Any])
async def list_projects(
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
    category: Optional[ProjectCategory] = Query(None, description="Filter by category: work, personal"),
    status_filter: Optional[ProjectStatus] = Query(
        None, alias="status", description="Filter by status: active, completed, archived"
    ),
    search: Optional[str] = Query(None, description="Search title, description and tags"),
):
    """List projects by priority, then most recently updated."""
    projects = gateway.projects.filter(
        current_user.user_id,
        category=category.value if category else None,
        status=status_filter.value if status_filter else None,
        search=search,
    )
    return {
        "projects": [ProjectResponse.model_validate(p) for p in projects],
        "count": len(projects),
    }


@router.post("/projects", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    return gateway.projects.create({**project_data.model_dump(), "user_id": current_user.user_id})


@router.get("/projects/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    return gateway.projects.get(project_id, current_user.user_id)


@router.get("/projects/{project_id}/detail", response_model=Dict[str, Any])
async def get_project_detail(
    project_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """A project with its conversations, tasks and notes."""
    project = gateway.projects.get(project_id, current_user.user_id)
    user_id = current_user.user_id
    return {
        "project": ProjectResponse.model_validate(project),
        "conversations": [
            ConversationResponse.model_validate(c) for c in gateway.conversations.list(user_id, project.id)
        ],
        "tasks": [TaskResponse.model_validate(t) for t in gateway.tasks.list(user_id, project.id)],
        "notes": [NoteResponse.model_validate(n) for n in gateway.notes.list(user_id, project.id)],
    }


@router.patch("/projects/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    project_data: ProjectUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Partial update: status, priority, tags, title, description, category."""
    return gateway.projects.update(project_id, project_data, current_user.user_id)


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    gateway.projects.delete(project_id, current_user.user_id)


@router.get("/projects/{project_id}/notes", response_model=List[NoteResponse])
async def list_notes(
    project_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Notes of a project, newest first."""
    gateway.projects.get(project_id, current_user.user_id)
    return gateway.notes.list(current_user.user_id, project_id)


@router.post("/projects/{project_id}/notes", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    project_id: UUID,
    note_data: NoteBody,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    return gateway.notes.create({
        "user_id": current_user.user_id,
        "project_id": project_id,
        "content": note_data.content,
    })


@router.post("/projects/{project_id}/next-steps", response_model=NextStepsResponse)
async def generate_next_steps(
    project_id: UUID,
    ctx: SessionContext = Depends(get_session_context),
    gateway: PersistenceGateway = Depends(get_gateway),
    client: CompletionClient = Depends(get_completion_client),
):
    """Generate next steps for the project and add them as pending tasks."""
    service = NextStepsService(gateway, NextStepsAgent(client))
    report = await service.generate(ctx, project_id)
    return NextStepsResponse(
        project_id=report.project_id,
        outcome=report.outcome.kind.value,
        created=[TaskResponse.model_validate(t) for t in report.created],
        tasks=[TaskResponse.model_validate(t) for t in report.tasks],
        message=report.message,
    )
