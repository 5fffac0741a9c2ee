"""User settings service: the persisted completion credential."""
from typing import Optional
import logging

from sqlmodel import Session, select

from life_manage.errors import NotFoundError, ValidationError
from life_manage.models.user_settings import UserSettings
from life_manage.utils.clock import utcnow

logger = logging.getLogger(__name__)

CREDENTIAL_PREFIX = "sk-"


def validate_credential(api_key: str) -> str:
    """Trim a completion-API key and check its format."""
    key = (api_key or "").strip()
    if not key.startswith(CREDENTIAL_PREFIX):
        raise ValidationError("Invalid OpenAI API key format")
    return key


class SettingsService:
    """One settings row per user; created on first save, never deleted."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_user(self, user_id: str) -> Optional[UserSettings]:
        statement = select(UserSettings).where(UserSettings.user_id == user_id)
        return self.session.exec(statement).first()

    def get_by_user(self, user_id: str) -> UserSettings:
        settings = self.find_by_user(user_id)
        if settings is None:
            raise NotFoundError("User settings not found")
        return settings

    def save_credential(self, user_id: str, api_key: str) -> UserSettings:
        """Upsert the user's stored key."""
        key = validate_credential(api_key)
        now = utcnow()

        settings = self.find_by_user(user_id)
        if settings is None:
            settings = UserSettings(user_id=user_id, created_at=now)
        settings.openai_key = key
        settings.has_openai_key = True
        settings.updated_at = now

        self.session.add(settings)
        self.session.commit()
        self.session.refresh(settings)
        logger.info("Stored completion credential for user %s", user_id)
        return settings

    def get_credential(self, user_id: str) -> Optional[str]:
        settings = self.find_by_user(user_id)
        if settings is None or not settings.has_openai_key:
            return None
        return settings.openai_key
