"""Note router for single notes; listing and creation live under projects."""
from fastapi import APIRouter, Depends, status
from uuid import UUID

from life_manage.middleware.auth import CurrentUser, get_current_user
from life_manage.routers.deps import get_gateway
from life_manage.schemas.note import NoteResponse, NoteUpdate
from life_manage.services.gateway import PersistenceGateway

router = APIRouter(tags=["Notes"])


@router.patch("/notes/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    note_data: NoteUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    return gateway.notes.update(note_id, note_data, current_user.user_id)


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    current_user: CurrentUser = Depends(get_current_user),
    gateway: PersistenceGateway = Depends(get_gateway),
):
    gateway.notes.delete(note_id, current_user.user_id)
