"""Session and credential schemas."""
from pydantic import BaseModel, Field
from typing import Optional


class CredentialRequest(BaseModel):
    """Body for saving a completion-API key."""
    api_key: str = Field(..., min_length=1)
    store: bool = False  # also persist it in user_settings


class SessionResponse(BaseModel):
    """Current session state. Never carries the key itself."""
    user_id: str
    email: Optional[str] = None
    has_session_key: bool
    has_stored_key: bool
