from typing import Any, List, Optional

from sqlalchemy import func, insert, literal
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.models.api.participants import ParticipantResponse
from swaproom.models.db.participant_model import ParticipantModel
from swaproom.repositories.base_repository import BaseRepository


class ParticipantRepository(BaseRepository[ParticipantModel, ParticipantResponse]):
    """Repository for participant operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ParticipantModel)

    async def get_by_room(self, room_id: int) -> List[ParticipantResponse]:
        """Get all participants currently in a room."""
        query = (
            select(self.model_class)
            .where(self.model_class.room_id == room_id)
            .order_by(self.model_class.id)
        )
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def add_participant(
        self,
        room_id: int,
        guest_name: str,
        user_id: Optional[int] = None,
        is_host: bool = False,
        commit: bool = True,
    ) -> ParticipantResponse:
        """Add a participant to a room, not ready and with no platform."""
        participant = ParticipantModel(
            room_id=room_id,
            user_id=user_id,
            guest_name=guest_name,
            is_host=is_host,
            is_ready=False,
        )
        return await self.create(participant, commit=commit)

    async def add_participant_if_space(
        self,
        room_id: int,
        max_participants: int,
        guest_name: str,
        user_id: Optional[int] = None,
    ) -> Optional[ParticipantResponse]:
        """Add a guest only while the room holds fewer than ``max_participants``.

        The seat count and the insert are one INSERT ... SELECT statement, so
        no other writer can slip in between them. Returns None when the room
        is full. Does not commit.
        """
        table = self.model_class.__table__
        occupied = (
            select(func.count(table.c.id))
            .where(table.c.room_id == room_id)
            .correlate(None)
            .scalar_subquery()
        )
        seat = select(
            literal(room_id, table.c.room_id.type),
            literal(user_id, table.c.user_id.type),
            literal(guest_name, table.c.guest_name.type),
            literal(False, table.c.is_ready.type),
            literal(False, table.c.is_host.type),
        ).where(occupied < max_participants)
        query = (
            insert(table)
            .from_select(
                ["room_id", "user_id", "guest_name", "is_ready", "is_host"], seat
            )
            .returning(table.c.id)
        )
        result = await self.db.execute(query)
        participant_id = result.scalar_one_or_none()
        if participant_id is None:
            return None
        return await self.get_by_id(participant_id)

    async def set_ready(
        self, participant_id: int, is_ready: bool
    ) -> Optional[ParticipantResponse]:
        return await self.update_fields(participant_id, is_ready=is_ready)

    async def set_platform(
        self, participant_id: int, platform: str
    ) -> Optional[ParticipantResponse]:
        return await self.update_fields(participant_id, current_platform=platform)

    def _to_pydantic(self, db_model: Any) -> ParticipantResponse:
        """Convert SQLAlchemy ParticipantModel to Pydantic ParticipantResponse."""
        return ParticipantResponse(
            id=db_model.id,
            room_id=db_model.room_id,
            user_id=db_model.user_id,
            guest_name=db_model.guest_name,
            is_ready=db_model.is_ready,
            is_host=db_model.is_host,
            current_platform=db_model.current_platform,
            joined_at=db_model.joined_at,
        )
