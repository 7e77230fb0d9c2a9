from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import db_session
from swaproom.models.api.swaps import (
    RandomSwapRequest,
    RandomSwapResponse,
    RecordSwapRequest,
    RecordSwapResponse,
    SwapHistoryEntry,
)
from swaproom.services.swap_coordinator_service import SwapCoordinatorService

router = APIRouter()


@router.post("/{room_id}/swaps", response_model=RecordSwapResponse, status_code=201)
async def record_swap(
    room_id: int, request: RecordSwapRequest, db: AsyncSession = Depends(db_session)
) -> RecordSwapResponse:
    """Record a swap chosen by the viewing client."""
    service = SwapCoordinatorService(db)
    return await service.record_swap(
        room_id,
        request.from_participant_id,
        request.to_participant_id,
        request.swap_type,
    )


@router.post("/{room_id}/swaps/random", response_model=RandomSwapResponse)
async def random_swap(
    room_id: int, request: RandomSwapRequest, db: AsyncSession = Depends(db_session)
) -> RandomSwapResponse:
    """Swap to a random participant other than yourself and your current target."""
    service = SwapCoordinatorService(db)
    return await service.random_swap(
        room_id, request.from_participant_id, request.current_target_id
    )


@router.get("/{room_id}/swaps", response_model=List[SwapHistoryEntry])
async def swap_history(
    room_id: int,
    limit: int = Query(
        config.SWAP_HISTORY_DEFAULT_LIMIT,
        description="Maximum number of swaps to return",
        ge=1,
        le=config.SWAP_HISTORY_MAX_LIMIT,
    ),
    db: AsyncSession = Depends(db_session),
) -> List[SwapHistoryEntry]:
    """
    Get the swap history of a room, newest first.

    Query parameters:
    - limit: Maximum number of swaps to return (default: 20, max: 100)
    """
    try:
        service = SwapCoordinatorService(db)
        return await service.history(room_id, limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
