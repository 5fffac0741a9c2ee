"""
Session context

SessionStore holds the ephemeral per-session completion credential, keyed
by user id. open() is the sign-in boundary and loads the persisted key if
there is one; close() is sign-out and forgets it.

SessionContext is the explicit object handed to workflows: who is acting
and which credential their outbound calls use.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import logging
import threading

from life_manage.errors import AuthRequiredError
from life_manage.services.settings_service import SettingsService, validate_credential

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Current user plus the credential captured at request start"""
    user_id: str
    email: Optional[str] = None
    credential: Optional[str] = None

    @property
    def has_credential(self) -> bool:
        return bool(self.credential)

    def require_credential(self) -> str:
        if not self.credential:
            raise AuthRequiredError("OpenAI API key is missing")
        return self.credential


class SessionStore:
    """Process-wide ephemeral credential slots"""

    def __init__(self):
        self._keys: Dict[str, str] = {}
        self._lock = threading.Lock()

    def open(self, user_id: str, settings: SettingsService) -> Optional[str]:
        """Sign-in: keep an existing session key, else load the stored one."""
        with self._lock:
            if user_id in self._keys:
                return self._keys[user_id]
        stored = settings.get_credential(user_id)
        if stored:
            with self._lock:
                self._keys.setdefault(user_id, stored)
            logger.info("Loaded stored credential into session for user %s", user_id)
        return stored

    def close(self, user_id: str) -> None:
        """Sign-out: forget the session key."""
        with self._lock:
            self._keys.pop(user_id, None)
        logger.info("Session closed for user %s", user_id)

    def set_credential(
        self,
        user_id: str,
        api_key: str,
        settings: Optional[SettingsService] = None,
    ) -> str:
        """Put a key in the session slot, and persist it when settings is given."""
        key = validate_credential(api_key)
        if settings is not None:
            settings.save_credential(user_id, key)
        with self._lock:
            self._keys[user_id] = key
        return key

    def get_credential(self, user_id: str) -> Optional[str]:
        with self._lock:
            return self._keys.get(user_id)

    def has_credential(self, user_id: str) -> bool:
        return self.get_credential(user_id) is not None

    def context_for(self, user_id: str, email: Optional[str] = None) -> SessionContext:
        """
        Build a context from the session slot only.

        The stored key is loaded by open() at sign-in; after close() no
        credential is available until the next sign-in.
        """
        return SessionContext(user_id=user_id, email=email, credential=self.get_credential(user_id))

    def clear(self) -> None:
        with self._lock:
            self._keys.clear()


session_store = SessionStore()
