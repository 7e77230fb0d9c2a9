from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.models.api.session_summaries import SessionSummaryResponse
from swaproom.models.db.session_summary_model import SessionSummaryModel
from swaproom.repositories.base_repository import BaseRepository


class SessionSummaryRepository(
    BaseRepository[SessionSummaryModel, SessionSummaryResponse]
):
    """Repository for session summary operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, SessionSummaryModel)

    async def add_summary(
        self,
        room_id: int,
        host_name: str,
        participant_count: int,
        total_swaps: int,
        total_messages: int,
        session_duration: int,
        platforms_used: List[str],
        started_at: datetime,
        ended_at: datetime,
    ) -> SessionSummaryResponse:
        summary = SessionSummaryModel(
            room_id=room_id,
            host_name=host_name,
            participant_count=participant_count,
            total_swaps=total_swaps,
            total_messages=total_messages,
            session_duration=session_duration,
            platforms_used=platforms_used,
            started_at=started_at,
            ended_at=ended_at,
        )
        return await self.create(summary)

    async def get_latest_for_room(
        self, room_id: int
    ) -> Optional[SessionSummaryResponse]:
        query = (
            select(self.model_class)
            .where(self.model_class.room_id == room_id)
            .order_by(self.model_class.ended_at.desc(), self.model_class.id.desc())
            .limit(1)
        )
        result = await self.db.execute(query)
        db_model = result.scalar_one_or_none()
        return self._to_pydantic(db_model) if db_model else None

    def _to_pydantic(self, db_model: Any) -> SessionSummaryResponse:
        """Convert SQLAlchemy SessionSummaryModel to Pydantic SessionSummaryResponse."""
        return SessionSummaryResponse(
            id=db_model.id,
            room_id=db_model.room_id,
            host_name=db_model.host_name,
            participant_count=db_model.participant_count,
            total_swaps=db_model.total_swaps,
            total_messages=db_model.total_messages,
            session_duration=db_model.session_duration,
            platforms_used=db_model.platforms_used or [],
            started_at=db_model.started_at,
            ended_at=db_model.ended_at,
        )
