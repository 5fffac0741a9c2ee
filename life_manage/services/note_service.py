"""Note service."""
from typing import Any, Dict, List

from life_manage.models.note import Note
from life_manage.schemas.note import NoteCreate, NoteUpdate
from life_manage.services.base import OwnedRecordService
from life_manage.services.task_service import check_project_reference


class NoteService(OwnedRecordService[Note]):
    """Service class for project notes; newest first."""

    model = Note
    create_schema = NoteCreate
    update_schema = NoteUpdate
    label = "Note"

    def ordering(self) -> List[Any]:
        return [Note.created_at.desc()]

    def check_references(self, user_id: str, values: Dict[str, Any]) -> None:
        check_project_reference(self.session, user_id, values, "note")

    def replace_content(self, note_id, content: str, user_id=None) -> Note:
        return self.update(note_id, {"content": content}, user_id)
