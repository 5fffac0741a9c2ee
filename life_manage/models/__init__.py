"""SQLModel table classes."""

from .user_settings import UserSettings
from .project import Project, ProjectCategory, ProjectStatus
from .conversation import Conversation
from .task import Task, TaskStatus
from .note import Note

__all__ = [
    "UserSettings",
    "Project",
    "ProjectCategory",
    "ProjectStatus",
    "Conversation",
    "Task",
    "TaskStatus",
    "Note",
]
