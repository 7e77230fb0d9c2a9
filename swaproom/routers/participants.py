from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom.database import db_session
from swaproom.models.api.participants import (
    ParticipantResponse,
    SetPlatformRequest,
    SetReadyRequest,
)
from swaproom.models.api.rooms import SuccessResponse
from swaproom.services.participant_registry_service import ParticipantRegistryService

router = APIRouter()


@router.post("/{participant_id}/leave", response_model=SuccessResponse)
async def leave_room(
    participant_id: int, db: AsyncSession = Depends(db_session)
) -> SuccessResponse:
    """Leave a room. Leaving twice is not an error."""
    service = ParticipantRegistryService(db)
    await service.leave(participant_id)
    return SuccessResponse()


@router.put("/{participant_id}/ready", response_model=ParticipantResponse)
async def set_ready(
    participant_id: int,
    request: SetReadyRequest,
    db: AsyncSession = Depends(db_session),
) -> ParticipantResponse:
    """Update ready status."""
    service = ParticipantRegistryService(db)
    return await service.set_ready(participant_id, request.is_ready)


@router.put("/{participant_id}/platform", response_model=ParticipantResponse)
async def set_platform(
    participant_id: int,
    request: SetPlatformRequest,
    db: AsyncSession = Depends(db_session),
) -> ParticipantResponse:
    """Update current platform."""
    service = ParticipantRegistryService(db)
    return await service.set_platform(participant_id, request.platform)
