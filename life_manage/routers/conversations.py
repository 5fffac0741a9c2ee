"""Conversation router: browsing, manual assignment and export import."""
from fastapi import APIRouter, Depends, Query, Request, status
from typing import Any, Dict, List, Optional
from uuid import UUID

from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.routers.deps import get_gateway
from life_manage.schemas.conversation import (
    ChatExportConversation,
    ConversationDetail,
    ConversationResponse,
    ConversationUpdate,
    ImportPreview,
    ImportResult,
)
from life_manage.services.gateway import PersistenceGateway
from life_manage.services.import_service import ImportService, preview_export

router = APIRouter(tags=["Conversations"])


@router.get("/conversations", response_model=Dict[str, Any])
async def list_conversations(
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
    project_id: Optional[UUID] = Query(None, description="Only conversations of this project"),
    uncategorized: bool = Query(False, description="Only conversations without a project"),
):
    if uncategorized:
        conversations = gateway.conversations.list_uncategorized(current_user.user_id)
    else:
        conversations = gateway.conversations.list(current_user.user_id, project_id)
    return {
        "conversations": [ConversationResponse.model_validate(c) for c in conversations],
        "count": len(conversations),
    }


@router.post("/conversations/import/preview", response_model=ImportPreview)
async def preview_import(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
):
    """Parse an uploaded export and list its entries without saving anything."""
    return preview_export(await request.body())


@router.post("/conversations/import", response_model=ImportResult, status_code=status.HTTP_201_CREATED)
async def import_conversations(
    request: Request,
    selected: Optional[List[str]] = Query(None, description="Export ids to import; all when omitted"),
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Import the selected export entries as unassigned conversations."""
    service = ImportService(gateway.conversations)
    created, rejected = service.import_export(current_user.user_id, await request.body(), selected)
    return ImportResult(
        imported=[ConversationResponse.model_validate(c) for c in created],
        rejected=rejected,
        count=len(created),
    )


@router.get("/conversations/{conversation_id}", response_model=ConversationDetail)
async def get_conversation(
    conversation_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """A conversation with its transcript, in mapping order."""
    conversation = gateway.conversations.get(conversation_id, current_user.user_id)
    try:
        messages = ChatExportConversation.model_validate(conversation.content).messages()
    except ValueError:
        messages = []
    return ConversationDetail(
        **ConversationResponse.model_validate(conversation).model_dump(),
        content=conversation.content,
        messages=messages,
    )


@router.patch("/conversations/{conversation_id}", response_model=ConversationResponse)
async def update_conversation(
    conversation_id: UUID,
    conversation_data: ConversationUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    """Rename a conversation, or assign it to a project (null detaches it)."""
    return gateway.conversations.update(conversation_id, conversation_data, current_user.user_id)


@router.delete("/conversations/{conversation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_conversation(
    conversation_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    gateway.conversations.delete(conversation_id, current_user.user_id)
