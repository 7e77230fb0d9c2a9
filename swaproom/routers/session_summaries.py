from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom.database import db_session
from swaproom.models.api.session_summaries import (
    RecordSessionSummaryRequest,
    RecordSessionSummaryResponse,
    SessionSummaryResponse,
)
from swaproom.services.session_summary_service import SessionSummaryService

router = APIRouter()


@router.post(
    "/{room_id}/summary", response_model=RecordSessionSummaryResponse, status_code=201
)
async def record_summary(
    room_id: int,
    request: RecordSessionSummaryRequest,
    db: AsyncSession = Depends(db_session),
) -> RecordSessionSummaryResponse:
    """Record the figures of a finished session for later review."""
    service = SessionSummaryService(db)
    return await service.record_summary(
        room_id,
        host_name=request.host_name,
        participant_count=request.participant_count,
        session_duration=request.session_duration,
        total_swaps=request.total_swaps,
        total_messages=request.total_messages,
        platforms_used=request.platforms_used,
    )


@router.get("/{room_id}/summary", response_model=SessionSummaryResponse)
async def get_summary(
    room_id: int, db: AsyncSession = Depends(db_session)
) -> SessionSummaryResponse:
    """Get the most recent session summary of a room."""
    service = SessionSummaryService(db)
    return await service.get_summary(room_id)
