"""
Error taxonomy for Life Manage.

Services raise these; routers never build HTTP errors for them by hand.
The handler registered in main.py maps each one to its status code.
"""

from typing import Any, Dict, Optional


class LifeManageError(Exception):
    """Base exception for domain errors"""

    code = "ERROR"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(LifeManageError):
    """Malformed input: bad enum value, missing field, invalid import file"""

    code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(LifeManageError):
    """Unknown id, or a record owned by somebody else"""

    code = "NOT_FOUND"
    status_code = 404


class AuthRequiredError(LifeManageError):
    """No authenticated user, or no completion credential available"""

    code = "AUTH_REQUIRED"
    status_code = 401


class ExternalServiceError(LifeManageError):
    """
    The completion API failed (network error, non-2xx, missing content).

    Workflows catch this and fall back to a static value, so it is not
    expected to reach the HTTP layer.
    """

    code = "EXTERNAL_SERVICE_ERROR"
    status_code = 502

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status = status
        super().__init__(message, details)
