"""Routers package for the Life Manage API."""

from .session import router as session_router
from .projects import router as projects_router
from .tasks import router as tasks_router
from .notes import router as notes_router
from .conversations import router as conversations_router
from .workflows import router as workflows_router

__all__ = [
    "session_router",
    "projects_router",
    "tasks_router",
    "notes_router",
    "conversations_router",
    "workflows_router",
]
