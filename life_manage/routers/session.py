"""Session router: sign-in/sign-out boundaries and the completion credential."""
from fastapi import APIRouter, Depends, status

from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.routers.deps import get_gateway, get_session_store
from life_manage.schemas.session import CredentialRequest, SessionResponse
from life_manage.services.gateway import PersistenceGateway
from life_manage.session import SessionStore

router = APIRouter(tags=["Session"])


def _status(user: CurrentUser, store: SessionStore, gateway: PersistenceGateway) -> SessionResponse:
    return SessionResponse(
        user_id=user.user_id,
        email=user.email,
        has_session_key=store.has_credential(user.user_id),
        has_stored_key=gateway.settings.get_credential(user.user_id) is not None,
    )


@router.post("/session", response_model=SessionResponse)
async def open_session(
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
    store: SessionStore = Depends(get_session_store),
):
    """Sign-in: load the stored credential into the session, if any."""
    store.open(current_user.user_id, gateway.settings)
    return _status(current_user, store, gateway)


@router.get("/session", response_model=SessionResponse)
async def get_session_status(
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
    store: SessionStore = Depends(get_session_store),
):
    return _status(current_user, store, gateway)


@router.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(
    current_user: CurrentUser = Depends(get_current_user),
    store: SessionStore = Depends(get_session_store),
):
    """Sign-out: forget the session credential."""
    store.close(current_user.user_id)


@router.put("/session/credential", response_model=SessionResponse)
async def set_credential(
    body: CredentialRequest,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
    store: SessionStore = Depends(get_session_store),
):
    """Set the completion-API key for this session, and store it when asked."""
    store.set_credential(current_user.user_id, body.api_key, gateway.settings if body.store else None)
    return _status(current_user, store, gateway)
