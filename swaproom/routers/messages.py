from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import db_session
from swaproom.models.api.messages import (
    MessageResponse,
    SendMessageRequest,
    SendMessageResponse,
)
from swaproom.services.message_service import MessageService

router = APIRouter()


@router.post(
    "/{room_id}/messages", response_model=SendMessageResponse, status_code=201
)
async def send_message(
    room_id: int, request: SendMessageRequest, db: AsyncSession = Depends(db_session)
) -> SendMessageResponse:
    """Post a chat message to a room."""
    service = MessageService(db)
    return await service.send_message(
        room_id, request.participant_id, request.sender_name, request.content
    )


@router.get("/{room_id}/messages", response_model=List[MessageResponse])
async def list_messages(
    room_id: int,
    limit: int = Query(
        config.MESSAGE_LIST_DEFAULT_LIMIT,
        description="Maximum number of messages to return",
        ge=1,
        le=config.MESSAGE_LIST_MAX_LIMIT,
    ),
    db: AsyncSession = Depends(db_session),
) -> List[MessageResponse]:
    """Get the latest chat messages of a room, newest first."""
    try:
        service = MessageService(db)
        return await service.list_messages(room_id, limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
