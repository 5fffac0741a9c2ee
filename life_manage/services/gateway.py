"""Persistence gateway: one object giving access to every entity service."""
from sqlmodel import Session

from life_manage.services.conversation_service import ConversationService
from life_manage.services.note_service import NoteService
from life_manage.services.project_service import ProjectService
from life_manage.services.settings_service import SettingsService
from life_manage.services.task_service import TaskService


class PersistenceGateway:
    """Entity services sharing one database session."""

    def __init__(self, session: Session):
        self.session = session
        self.settings = SettingsService(session)
        self.projects = ProjectService(session)
        self.conversations = ConversationService(session)
        self.tasks = TaskService(session)
        self.notes = NoteService(session)
