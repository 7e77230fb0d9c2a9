from typing import Any, List

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from swaproom.models.api.messages import MessageResponse
from swaproom.models.db.message_model import MessageModel
from swaproom.repositories.base_repository import BaseRepository


class MessageRepository(BaseRepository[MessageModel, MessageResponse]):
    """Repository for message operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, MessageModel)

    async def add_message(
        self, room_id: int, participant_id: int, sender_name: str, content: str
    ) -> MessageResponse:
        message = MessageModel(
            room_id=room_id,
            participant_id=participant_id,
            sender_name=sender_name,
            content=content,
        )
        return await self.create(message)

    async def get_by_room(self, room_id: int, limit: int) -> List[MessageResponse]:
        """Get the latest messages for a room, newest first."""
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

    def _to_pydantic(self, db_model: Any) -> MessageResponse:
        """Convert SQLAlchemy MessageModel to Pydantic MessageResponse."""
        return MessageResponse(
            id=db_model.id,
            room_id=db_model.room_id,
            participant_id=db_model.participant_id,
            sender_name=db_model.sender_name,
            content=db_model.content,
            created_at=db_model.created_at,
        )
