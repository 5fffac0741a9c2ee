"""
Conversation Service

CRUD operations for imported conversations. Conversations are created
unassigned; only their title and project assignment change afterwards.
"""

from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from sqlmodel import select

from life_manage.errors import ValidationError
from life_manage.models.conversation import Conversation
from life_manage.models.project import Project
from life_manage.schemas.conversation import ConversationCreate, ConversationUpdate
from life_manage.services.base import OwnedRecordService, as_uuid


class ConversationService(OwnedRecordService[Conversation]):
    """Service for managing imported conversations"""

    model = Conversation
    create_schema = ConversationCreate
    update_schema = ConversationUpdate
    label = "Conversation"
    nullable_fields = ("project_id",)

    def ordering(self) -> List[Any]:
        return [Conversation.updated_at.desc()]

    def check_references(self, user_id: str, values: Dict[str, Any]) -> None:
        project_id = values.get("project_id")
        if project_id is None:
            return
        project = self.session.get(Project, project_id)
        if project is None or project.user_id != user_id:
            raise ValidationError("Invalid conversation: project_id does not reference an existing project")

    def list_uncategorized(self, user_id: str) -> List[Conversation]:
        """Conversations not yet assigned to a project, most recent first"""
        statement = (
            select(Conversation)
            .where(Conversation.user_id == user_id)
            .where(Conversation.project_id.is_(None))
            .order_by(*self.ordering())
        )
        return list(self.session.exec(statement).all())

    def assign_project(
        self,
        conversation_id: Union[str, UUID],
        project_id: Optional[Union[str, UUID]],
        user_id: Optional[str] = None,
    ) -> Conversation:
        """Manually (re)assign a conversation to a project, or detach it with None"""
        target = as_uuid(project_id, "Project") if project_id is not None else None
        return self.update(conversation_id, {"project_id": target}, user_id)
