"""Task router."""
from fastapi import APIRouter, Depends, Query, status
from typing import Any, Dict, Optional
from uuid import UUID

from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.routers.deps import get_gateway
from life_manage.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from life_manage.services.gateway import PersistenceGateway

router = APIRouter(tags=["Tasks"])


@router.get("/tasks", response_model=Dict[str, Any])
async def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
    project_id: Optional[UUID] = Query(None, description="Only tasks of this project"),
):
    """List tasks by due date, undated last."""
    tasks = gateway.tasks.list(current_user.user_id, project_id)
    return {
        "tasks": [TaskResponse.model_validate(t) for t in tasks],
        "count": len(tasks),
    }


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    return gateway.tasks.create({**task_data.model_dump(), "user_id": current_user.user_id})


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    return gateway.tasks.get(task_id, current_user.user_id)


@router.patch("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    task_data: TaskUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Partial update; status may move to any value."""
    return gateway.tasks.update(task_id, task_data, current_user.user_id)


@router.post("/tasks/{task_id}/cycle-status", response_model=TaskResponse)
async def cycle_task_status(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Advance pending -> in_progress -> completed -> pending."""
    return gateway.tasks.cycle_status(task_id, current_user.user_id)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    gateway.tasks.delete(task_id, current_user.user_id)
