"""Task service for project tasks."""
from typing import Any, Dict, List, Optional
import logging

from life_manage.errors import ValidationError
from life_manage.models.project import Project
from life_manage.models.task import Task, TaskStatus
from life_manage.schemas.task import TaskCreate, TaskUpdate
from life_manage.services.base import OwnedRecordService

logger = logging.getLogger(__name__)

# One-click toggle order used by the task list
STATUS_CYCLE = {
    TaskStatus.PENDING.value: TaskStatus.IN_PROGRESS.value,
    TaskStatus.IN_PROGRESS.value: TaskStatus.COMPLETED.value,
    TaskStatus.COMPLETED.value: TaskStatus.PENDING.value,
}


def check_project_reference(session, user_id: str, values: Dict[str, Any], label: str) -> None:
    """A task or note must point at an existing project of the same user."""
    if "project_id" not in values:
        return
    project = session.get(Project, values["project_id"])
    if project is None or project.user_id != user_id:
        raise ValidationError(f"Invalid {label}: project_id does not reference an existing project")


class TaskService(OwnedRecordService[Task]):
    """Service class for task CRUD operations."""

    model = Task
    create_schema = TaskCreate
    update_schema = TaskUpdate
    label = "Task"
    nullable_fields = ("description", "due_date")

    def ordering(self) -> List[Any]:
        return [Task.due_date.asc().nullslast(), Task.created_at.asc()]

    def check_references(self, user_id: str, values: Dict[str, Any]) -> None:
        check_project_reference(self.session, user_id, values, "task")

    def set_status(self, task_id, status: str, user_id: Optional[str] = None) -> Task:
        """Move a task to any status; there is no fixed transition order."""
        return self.update(task_id, {"status": status}, user_id)

    def cycle_status(self, task_id, user_id: Optional[str] = None) -> Task:
        """Advance pending -> in_progress -> completed -> pending."""
        task = self.get(task_id, user_id)
        return self.set_status(task.id, STATUS_CYCLE.get(task.status, TaskStatus.PENDING.value), user_id)
