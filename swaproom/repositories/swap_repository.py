from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.models.api.swaps import SwapHistoryEntry, SwapType
from swaproom.models.db.swap_model import SwapHistoryModel
from swaproom.repositories.base_repository import BaseRepository


class SwapRepository(BaseRepository[SwapHistoryModel, SwapHistoryEntry]):
    """Repository for the append-only swap history."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, SwapHistoryModel)

    async def record(
        self,
        room_id: int,
        from_participant_id: int,
        to_participant_id: int,
        swap_type: SwapType,
        from_label: Optional[str] = None,
        to_label: Optional[str] = None,
    ) -> SwapHistoryEntry:
        entry = SwapHistoryModel(
            room_id=room_id,
            from_participant_id=from_participant_id,
            to_participant_id=to_participant_id,
            from_label=from_label,
            to_label=to_label,
            swap_type=SwapType(swap_type).value,
        )
        return await self.create(entry)

    async def get_recent(self, room_id: int, limit: int) -> List[SwapHistoryEntry]:
        """Most recent entries first; id breaks ties between equal timestamps."""
        query = (
            select(self.model_class)
            .where(self.model_class.room_id == room_id)
            .order_by(self.model_class.created_at.desc(), self.model_class.id.desc())
            .limit(limit)
        )
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def count_by_room(self, room_id: int) -> int:
        query = select(func.count(self.model_class.id)).where(
            self.model_class.room_id == room_id
        )
        result = await self.db.execute(query)
        return int(result.scalar() or 0)

    def _to_pydantic(self, db_model: Any) -> SwapHistoryEntry:
        """Convert SQLAlchemy SwapHistoryModel to Pydantic SwapHistoryEntry."""
        return SwapHistoryEntry(
            id=db_model.id,
            room_id=db_model.room_id,
            from_participant_id=db_model.from_participant_id,
            to_participant_id=db_model.to_participant_id,
            from_label=db_model.from_label,
            to_label=db_model.to_label,
            swap_type=SwapType(db_model.swap_type),
            created_at=db_model.created_at,
        )
