import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import unit_of_work
from swaproom.exceptions import RoomNotFoundError
from swaproom.models.api.messages import MessageResponse, SendMessageResponse
from swaproom.repositories.message_repository import MessageRepository
from swaproom.repositories.room_repository import RoomRepository

logger = logging.getLogger(__name__)


class MessageService:
    """Service for a room's chat log."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.room_repo = RoomRepository(db)
        self.message_repo = MessageRepository(db)

    async def send_message(
        self, room_id: int, participant_id: int, sender_name: str, content: str
    ) -> SendMessageResponse:
        """Store a chat message. The sender name is kept with the message."""
        async with unit_of_work(self.db):
            if await self.room_repo.get_by_id(room_id) is None:
                raise RoomNotFoundError(details={"room_id": room_id})

            message = await self.message_repo.add_message(
                room_id=room_id,
                participant_id=participant_id,
                sender_name=sender_name,
                content=content,
            )

        logger.debug("Message %d stored for room %d", message.id, room_id)
        return SendMessageResponse(message_id=message.id)

    async def list_messages(
        self, room_id: int, limit: int = config.MESSAGE_LIST_DEFAULT_LIMIT
    ) -> List[MessageResponse]:
        # Validate parameters
        if limit <= 0 or limit > config.MESSAGE_LIST_MAX_LIMIT:
            raise ValueError(
                f"Limit must be between 1 and {config.MESSAGE_LIST_MAX_LIMIT}"
            )

        async with unit_of_work(self.db):
            return await self.message_repo.get_by_room(room_id, limit)
