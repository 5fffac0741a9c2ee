"""Project service: CRUD plus list filtering."""
from typing import Any, List, Optional
from uuid import UUID
import logging

from sqlmodel import select

from life_manage.models.conversation import Conversation
from life_manage.models.note import Note
from life_manage.models.project import Project
from life_manage.models.task import Task
from life_manage.schemas.project import ProjectCreate, ProjectUpdate
from life_manage.services.base import OwnedRecordService

logger = logging.getLogger(__name__)


class ProjectService(OwnedRecordService[Project]):
    """Service class for project CRUD operations."""

    model = Project
    create_schema = ProjectCreate
    update_schema = ProjectUpdate
    label = "Project"
    nullable_fields = ("description",)

    def ordering(self) -> List[Any]:
        return [Project.priority.desc(), Project.updated_at.desc()]

    def list(self, user_id: str, project_id=None) -> List[Project]:
        # Projects have no project_id column to narrow by
        return super().list(user_id)

    def filter(
        self,
        user_id: str,
        category: Optional[str] = None,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Project]:
        """Filter the sorted project list by category, status and a search term."""
        projects = self.list(user_id)

        if category:
            projects = [p for p in projects if p.category == category]
        if status:
            projects = [p for p in projects if p.status == status]
        if search:
            term = search.lower()
            projects = [
                p for p in projects
                if term in p.title.lower()
                or (p.description and term in p.description.lower())
                or any(term in tag.lower() for tag in p.tags or [])
            ]
        return projects

    def find_by_title(self, user_id: str, title: str, category: str) -> Optional[Project]:
        """Most recently updated project with this exact title and category."""
        statement = (
            select(Project)
            .where(Project.user_id == user_id)
            .where(Project.title == title)
            .where(Project.category == category)
            .order_by(Project.updated_at.desc())
        )
        return self.session.exec(statement).first()

    def delete(self, record_id, user_id: Optional[str] = None) -> bool:
        """
        Delete a project with its tasks and notes.

        Its conversations are detached and go back to the uncategorized pool.
        """
        project = self.get(record_id, user_id)
        project_id: UUID = project.id

        for task in self.session.exec(select(Task).where(Task.project_id == project_id)).all():
            self.session.delete(task)
        for note in self.session.exec(select(Note).where(Note.project_id == project_id)).all():
            self.session.delete(note)
        for conversation in self.session.exec(
            select(Conversation).where(Conversation.project_id == project_id)
        ).all():
            conversation.project_id = None
            self.session.add(conversation)

        # Children first so the foreign keys never dangle
        self.session.flush()
        self.session.delete(project)
        self.session.commit()
        logger.info("Deleted project %s", project_id)
        return True
