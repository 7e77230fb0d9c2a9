from typing import Any, Optional

from sqlalchemy import exists
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.models.api.rooms import RoomResponse
from swaproom.models.db.room_model import RoomModel
from swaproom.repositories.base_repository import BaseRepository


class RoomRepository(BaseRepository[RoomModel, RoomResponse]):
    """Repository for room operations. Rooms are never deleted."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, RoomModel)

    async def add_room(
        self, code: str, name: str, max_participants: int, commit: bool = True
    ) -> RoomResponse:
        """Insert an active room. Raises IntegrityError if the code is taken."""
        room = RoomModel(
            code=code,
            name=name,
            host_id=0,
            max_participants=max_participants,
            is_active=True,
        )
        return await self.create(room, commit=commit)

    async def get_by_code(
        self, code: str, for_update: bool = False
    ) -> Optional[RoomResponse]:
        """Get room by its shareable code.

        ``for_update`` locks the row until the transaction ends (Postgres);
        SQLite ignores the clause.
        """
        query = select(self.model_class).where(self.model_class.code == code)
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        db_model = result.scalar_one_or_none()
        return self._to_pydantic(db_model) if db_model else None

    async def code_exists(self, code: str) -> bool:
        """Check the code against every room ever created, ended ones included."""
        query = select(exists().where(self.model_class.code == code))
        result = await self.db.execute(query)
        return bool(result.scalar())

    async def set_host(
        self, room_id: int, participant_id: int, commit: bool = True
    ) -> Optional[RoomResponse]:
        return await self.update_fields(room_id, commit=commit, host_id=participant_id)

    async def deactivate(self, room_id: int) -> Optional[RoomResponse]:
        """Mark a room ended. Ended rooms are left untouched."""
        room = await self.get_by_id(room_id)
        if room is None or not room.is_active:
            return room
        return await self.update_fields(room_id, is_active=False)

    def _to_pydantic(self, db_model: Any) -> RoomResponse:
        """Convert SQLAlchemy RoomModel to Pydantic RoomResponse."""
        return RoomResponse(
            id=db_model.id,
            code=db_model.code,
            name=db_model.name,
            host_id=db_model.host_id,
            max_participants=db_model.max_participants,
            is_active=db_model.is_active,
            created_at=db_model.created_at,
            updated_at=db_model.updated_at,
        )
