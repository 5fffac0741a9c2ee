"""
Conversation schemas, including the chat-history export format.

The export is untrusted JSON. ChatExportConversation is the validated shape
of one entry; anything that does not fit is quarantined by the importer.
"""
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID


class ChatMessage(BaseModel):
    """One message of an exported conversation."""
    id: str
    role: str = "user"
    content: str = ""

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, value: Any) -> str:
        # Some exports nest the text as {"parts": [...]}
        if isinstance(value, dict) and isinstance(value.get("parts"), list):
            return "\n".join(str(part) for part in value["parts"] if part)
        return "" if value is None else str(value)


class ChatExportConversation(BaseModel):
    """One entry of the export's top-level conversations array."""
    id: str = Field(..., min_length=1, max_length=255)
    title: Optional[str] = Field(None, max_length=500)
    create_time: Optional[float] = None
    update_time: Optional[float] = None
    mapping: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @property
    def display_title(self) -> str:
        return self.title or "Untitled Conversation"

    def messages(self) -> List[ChatMessage]:
        """Messages of the mapping, in mapping order."""
        result = []
        for key, node in self.mapping.items():
            # Full exports wrap the text in {"message": {"author": {...}, "content": {...}}}
            message = node.get("message") if isinstance(node.get("message"), dict) else node
            role = message.get("role") or (message.get("author") or {}).get("role") or "user"
            content = message.get("content")
            if content in (None, "", {}):
                continue
            result.append(ChatMessage(id=str(node.get("id") or key), role=str(role), content=content))
        return result


class ImportEntrySummary(BaseModel):
    """Preview row for one importable entry."""
    id: str
    title: str
    create_time: Optional[float] = None
    update_time: Optional[float] = None
    message_count: int


class RejectedEntry(BaseModel):
    """An export entry that was quarantined instead of imported."""
    index: int
    reason: str


class ImportPreview(BaseModel):
    """Result of parsing an export file."""
    conversations: List[ImportEntrySummary]
    rejected: List[RejectedEntry] = []


class ConversationCreate(BaseModel):
    """Schema for creating a conversation record."""
    project_id: Optional[UUID] = None
    title: str = Field(..., min_length=1, max_length=500)
    content: Dict[str, Any]
    conversation_id: str = Field(..., min_length=1, max_length=255)


class ConversationUpdate(BaseModel):
    """Only the title and the project assignment may change."""
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    project_id: Optional[UUID] = None

    class Config:
        extra = "forbid"


class ConversationResponse(BaseModel):
    """Schema for conversation API responses."""
    id: UUID
    user_id: str
    project_id: Optional[UUID] = None
    title: str
    conversation_id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ConversationDetail(ConversationResponse):
    """A conversation with its transcript."""
    content: Dict[str, Any]
    messages: List[ChatMessage] = []


class ImportResult(BaseModel):
    """Outcome of processing an export file."""
    imported: List[ConversationResponse]
    rejected: List[RejectedEntry] = []
    count: int
