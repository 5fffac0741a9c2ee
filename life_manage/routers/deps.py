"""Shared FastAPI dependencies."""
from fastapi import Depends
from sqlmodel import Session

from life_manage.db.config import get_session
from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.services.completion_client import CompletionClient
from life_manage.services.gateway import PersistenceGateway
from life_manage.session import SessionContext, SessionStore, session_store


def get_gateway(session: Session = Depends(get_session)) -> PersistenceGateway:
    """Dependency for getting the persistence gateway."""
    return PersistenceGateway(session)


def get_session_store() -> SessionStore:
    return session_store


def get_completion_client() -> CompletionClient:
    return CompletionClient()


def get_session_context(
    current_user: CurrentUser = Depends(get_current_user),
    store: SessionStore = Depends(get_session_store),
) -> SessionContext:
    """Current user plus the session credential their workflow calls will use."""
    return store.context_for(current_user.user_id, current_user.email)
