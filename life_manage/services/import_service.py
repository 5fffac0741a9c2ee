"""
Import service for chat-history export files.

parse_export() validates the whole document before anything is written:
a document without a top-level conversations array is rejected outright,
and individual malformed entries are quarantined with a reason.
"""

from typing import Any, Iterable, List, Optional, Tuple, Union
import json
import logging

import pydantic

from life_manage.errors import ValidationError
from life_manage.models.conversation import Conversation
from life_manage.schemas.conversation import (
    ChatExportConversation,
    ImportEntrySummary,
    ImportPreview,
    RejectedEntry,
)
from life_manage.services.base import describe_validation_error
from life_manage.services.conversation_service import ConversationService

logger = logging.getLogger(__name__)

INVALID_EXPORT = "Invalid ChatGPT export format"


def load_document(raw: Union[bytes, str, dict]) -> dict:
    """Decode raw upload bytes/text into the export document."""
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ValidationError(f"{INVALID_EXPORT}: file is not UTF-8 text")
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"{INVALID_EXPORT}: {e.msg}")
    if not isinstance(document, dict):
        raise ValidationError(f"{INVALID_EXPORT}: expected a JSON object")
    return document


def parse_export(raw: Union[bytes, str, dict]) -> Tuple[List[ChatExportConversation], List[RejectedEntry]]:
    """Return (valid entries, rejected entries) of an export document."""
    document = load_document(raw)
    entries = document.get("conversations")
    if not isinstance(entries, list):
        raise ValidationError(INVALID_EXPORT)

    valid: List[ChatExportConversation] = []
    rejected: List[RejectedEntry] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            rejected.append(RejectedEntry(index=index, reason="entry is not an object"))
            continue
        try:
            valid.append(ChatExportConversation.model_validate(entry))
        except pydantic.ValidationError as e:
            rejected.append(RejectedEntry(index=index, reason=describe_validation_error(e)))

    if rejected:
        logger.warning("Quarantined %d malformed export entries", len(rejected))
    return valid, rejected


def preview_export(raw: Union[bytes, str, dict]) -> ImportPreview:
    """Summaries of the importable entries, for selection before import."""
    valid, rejected = parse_export(raw)
    return ImportPreview(
        conversations=[
            ImportEntrySummary(
                id=entry.id,
                title=entry.display_title,
                create_time=entry.create_time,
                update_time=entry.update_time,
                message_count=len(entry.messages()),
            )
            for entry in valid
        ],
        rejected=rejected,
    )


class ImportService:
    """Persist selected export entries as unassigned conversations."""

    def __init__(self, conversations: ConversationService):
        self.conversations = conversations

    def import_entries(
        self,
        user_id: str,
        entries: Iterable[ChatExportConversation],
        selected_ids: Optional[Iterable[str]] = None,
    ) -> List[Conversation]:
        """
        Create one Conversation per selected entry, with no project.

        selected_ids=None imports every entry. An empty selection is an error.
        """
        selected = None if selected_ids is None else set(selected_ids)
        chosen = [e for e in entries if selected is None or e.id in selected]
        if not chosen:
            raise ValidationError("Please select at least one conversation to process")

        created = []
        for entry in chosen:
            created.append(self.conversations.create({
                "user_id": user_id,
                "project_id": None,
                "title": entry.display_title,
                "content": entry.model_dump(),
                "conversation_id": entry.id,
            }))
        logger.info("Imported %d conversations for user %s", len(created), user_id)
        return created

    def import_export(
        self,
        user_id: str,
        raw: Union[bytes, str, dict],
        selected_ids: Optional[Iterable[str]] = None,
    ) -> Tuple[List[Conversation], List[RejectedEntry]]:
        """Parse then import; nothing is written if the document is invalid."""
        valid, rejected = parse_export(raw)
        return self.import_entries(user_id, valid, selected_ids), rejected
