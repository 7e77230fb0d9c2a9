import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from swaproom.database import unit_of_work
from swaproom.exceptions import RoomNotFoundError, SessionSummaryNotFoundError
from swaproom.models.api.session_summaries import (
    RecordSessionSummaryResponse,
    SessionSummaryResponse,
)
from swaproom.repositories.message_repository import MessageRepository
from swaproom.repositories.room_repository import RoomRepository
from swaproom.repositories.session_summary_repository import SessionSummaryRepository
from swaproom.repositories.swap_repository import SwapRepository

logger = logging.getLogger(__name__)


class SessionSummaryService:
    """Service for the per-session figures kept for later review."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.room_repo = RoomRepository(db)
        self.swap_repo = SwapRepository(db)
        self.message_repo = MessageRepository(db)
        self.summary_repo = SessionSummaryRepository(db)

    async def record_summary(
        self,
        room_id: int,
        host_name: str,
        participant_count: int,
        session_duration: int,
        total_swaps: Optional[int] = None,
        total_messages: Optional[int] = None,
        platforms_used: Optional[List[str]] = None,
    ) -> RecordSessionSummaryResponse:
        """
        Record a summary for a finished session:

        1. Verify the room exists
        2. Count swaps and messages the caller did not supply
        3. Stamp the end time and derive the start time from the duration
        """
        async with unit_of_work(self.db):
            # Step 1: Verify room exists
            if await self.room_repo.get_by_id(room_id) is None:
                raise RoomNotFoundError(details={"room_id": room_id})

            # Step 2: Fill in totals from the logs
            if total_swaps is None:
                total_swaps = await self.swap_repo.count_by_room(room_id)
            if total_messages is None:
                total_messages = await self.message_repo.count_by_room(room_id)

            # Step 3: Timestamps
            ended_at = datetime.now(timezone.utc)
            summary = await self.summary_repo.add_summary(
                room_id=room_id,
                host_name=host_name,
                participant_count=participant_count,
                total_swaps=total_swaps,
                total_messages=total_messages,
                session_duration=session_duration,
                platforms_used=sorted(set(platforms_used or [])),
                started_at=ended_at - timedelta(seconds=session_duration),
                ended_at=ended_at,
            )

        logger.info(
            "Session summary %d recorded for room %d (%d swaps, %d messages)",
            summary.id,
            room_id,
            total_swaps,
            total_messages,
        )
        return RecordSessionSummaryResponse(session_id=summary.id)

    async def get_summary(self, room_id: int) -> SessionSummaryResponse:
        """Get the most recent summary recorded for a room."""
        async with unit_of_work(self.db):
            summary = await self.summary_repo.get_latest_for_room(room_id)

        if summary is None:
            raise SessionSummaryNotFoundError(details={"room_id": room_id})
        return summary
