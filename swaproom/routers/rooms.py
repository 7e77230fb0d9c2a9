from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import db_session
from swaproom.models.api.participants import ParticipantResponse
from swaproom.models.api.rooms import (
    CreateRoomRequest,
    CreateRoomResponse,
    JoinRoomRequest,
    JoinRoomResponse,
    RoomSessionResponse,
    SuccessResponse,
)
from swaproom.services.participant_registry_service import ParticipantRegistryService
from swaproom.services.room_lifecycle_service import RoomLifecycleService
from swaproom.services.session_aggregator_service import SessionAggregatorService

router = APIRouter()


@router.post("", response_model=CreateRoomResponse, status_code=201)
async def create_room(
    request: CreateRoomRequest, db: AsyncSession = Depends(db_session)
) -> CreateRoomResponse:
    """Create a room; the creator becomes its host participant."""
    service = RoomLifecycleService(db)
    return await service.create_room(
        name=request.name,
        host_guest_name=request.guest_name,
        max_participants=request.max_participants,
        host_user_id=request.host_user_id,
    )


@router.post("/join", response_model=JoinRoomResponse)
async def join_room(
    request: JoinRoomRequest, db: AsyncSession = Depends(db_session)
) -> JoinRoomResponse:
    """Join a room by its six-character code."""
    service = ParticipantRegistryService(db)
    return await service.join(
        code=request.code, guest_name=request.guest_name, user_id=request.user_id
    )


@router.get("/{room_id}", response_model=RoomSessionResponse)
async def get_room(
    room_id: int,
    include_history: bool = Query(
        False, description="Include the most recent swaps in the snapshot"
    ),
    history_limit: int = Query(
        config.SWAP_HISTORY_DEFAULT_LIMIT,
        description="Maximum number of swaps to include",
        ge=1,
        le=config.SWAP_HISTORY_MAX_LIMIT,
    ),
    db: AsyncSession = Depends(db_session),
) -> RoomSessionResponse:
    """
    Get the current state of a room, as polled by clients.

    Query parameters:
    - include_history: Include recent swap history (default: false)
    - history_limit: Number of swaps to include (default: 20, max: 100)
    """
    try:
        service = SessionAggregatorService(db)
        return await service.get_session(
            room_id, include_history=include_history, history_limit=history_limit
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/{room_id}/end", response_model=SuccessResponse)
async def end_room(
    room_id: int, db: AsyncSession = Depends(db_session)
) -> SuccessResponse:
    """End a room. Ending an already ended room succeeds."""
    service = RoomLifecycleService(db)
    await service.end_room(room_id)
    return SuccessResponse()


@router.get("/{room_id}/participants", response_model=List[ParticipantResponse])
async def list_participants(
    room_id: int, db: AsyncSession = Depends(db_session)
) -> List[ParticipantResponse]:
    """List the participants currently in a room."""
    service = ParticipantRegistryService(db)
    return await service.list_participants(room_id)
