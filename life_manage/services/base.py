"""
Owned record service

Shared list/get/create/update/delete for tables that carry a user_id.
Each entity service sets its model, schemas and fixed sort order.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union
from uuid import UUID
import logging

import pydantic
from pydantic import BaseModel
from sqlmodel import Session, SQLModel, select

from life_manage.errors import NotFoundError, ValidationError
from life_manage.utils.clock import utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def describe_validation_error(exc: pydantic.ValidationError) -> str:
    """Flatten a pydantic error into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "body"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def as_uuid(value: Union[str, UUID], label: str = "id") -> UUID:
    """Accept UUIDs given as strings; a malformed id can never match a row."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise NotFoundError(f"{label} {value} not found")


class OwnedRecordService(Generic[ModelT]):
    """Base service for a table whose rows belong to one user."""

    model: Type[ModelT]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    label = "Record"
    # Fields an update may explicitly clear with None
    nullable_fields: tuple = ()

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    def ordering(self) -> List[Any]:
        return [self.model.updated_at.desc()]

    def check_references(self, user_id: str, values: Dict[str, Any]) -> None:
        """Validate foreign keys of a create/update payload."""

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate(self, schema: Type[BaseModel], data: Union[Dict[str, Any], BaseModel]) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        try:
            parsed = schema.model_validate(data)
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid {self.label.lower()}: {describe_validation_error(e)}",
                details={"errors": e.errors(include_url=False, include_context=False)},
            )
        return parsed.model_dump(exclude_unset=True) if schema is self.update_schema else parsed.model_dump()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def list(self, user_id: str, project_id: Optional[Union[str, UUID]] = None) -> List[ModelT]:
        """List the user's records, optionally narrowed to one project."""
        statement = select(self.model).where(self.model.user_id == user_id)
        if project_id is not None:
            statement = statement.where(self.model.project_id == as_uuid(project_id, "Project"))
        statement = statement.order_by(*self.ordering())
        return list(self.session.exec(statement).all())

    def get(self, record_id: Union[str, UUID], user_id: Optional[str] = None) -> ModelT:
        """Fetch one record; a row of another user counts as missing."""
        record = self.session.get(self.model, as_uuid(record_id, self.label))
        if record is None or (user_id is not None and record.user_id != user_id):
            raise NotFoundError(f"{self.label} not found")
        return record

    def create(self, data: Union[Dict[str, Any], BaseModel]) -> ModelT:
        """Validate and insert a record; id and timestamps are assigned here."""
        payload = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        user_id = payload.pop("user_id", None)
        if not user_id or not isinstance(user_id, str):
            raise ValidationError(f"Invalid {self.label.lower()}: user_id is required")

        values = self._validate(self.create_schema, payload)
        self.check_references(user_id, values)

        now = utcnow()
        record = self.model(user_id=user_id, created_at=now, updated_at=now, **values)
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        logger.debug("Created %s %s for user %s", self.label.lower(), record.id, user_id)
        return record

    def update(
        self,
        record_id: Union[str, UUID],
        data: Union[Dict[str, Any], BaseModel],
        user_id: Optional[str] = None,
    ) -> ModelT:
        """Merge the given fields into the record and refresh updated_at."""
        record = self.get(record_id, user_id)
        values = self._validate(self.update_schema, data)
        values = {k: v for k, v in values.items() if v is not None or k in self.nullable_fields}
        self.check_references(record.user_id, values)

        for field, value in values.items():
            setattr(record, field, value)
        record.updated_at = utcnow()

        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def delete(self, record_id: Union[str, UUID], user_id: Optional[str] = None) -> bool:
        """Delete a record. Deleting a missing record raises NotFoundError."""
        record = self.get(record_id, user_id)
        self.session.delete(record)
        self.session.commit()
        return True
