import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import unit_of_work
from swaproom.exceptions import DuplicateCodeError
from swaproom.models.api.rooms import CreateRoomResponse, RoomResponse
from swaproom.repositories.participant_repository import ParticipantRepository
from swaproom.repositories.room_repository import RoomRepository
from swaproom.services.code_generator import CodeGenerator

logger = logging.getLogger(__name__)


class RoomLifecycleService:
    """Service for creating and ending rooms."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.room_repo = RoomRepository(db)
        self.participant_repo = ParticipantRepository(db)
        self.code_generator = CodeGenerator(self.room_repo)

    async def create_room(
        self,
        name: str,
        host_guest_name: str,
        max_participants: int,
        host_user_id: Optional[int] = None,
    ) -> CreateRoomResponse:
        """
        Create a room and register its creator as host:

        1. Allocate a code no room has used
        2. Insert the room (unique code constraint confirms the allocation)
        3. Insert the host participant and point the room at it
        4. Commit all three writes together
        """
        if not (
            config.MIN_ROOM_CAPACITY <= max_participants <= config.MAX_ROOM_CAPACITY
        ):
            raise ValueError(
                f"max_participants must be between {config.MIN_ROOM_CAPACITY} "
                f"and {config.MAX_ROOM_CAPACITY}"
            )

        async with unit_of_work(self.db):
            # Step 1: Allocate code
            code = await self.code_generator.ensure_unique()

            # Step 2: Insert room, not yet committed
            try:
                room = await self.room_repo.add_room(
                    code=code,
                    name=name,
                    max_participants=max_participants,
                    commit=False,
                )
            except IntegrityError as e:
                logger.warning("Room code %s taken by a concurrent creator", code)
                raise DuplicateCodeError(details={"code": code}) from e

            # Step 3: Register host in the same transaction
            host = await self.participant_repo.add_participant(
                room_id=room.id,
                guest_name=host_guest_name,
                user_id=host_user_id,
                is_host=True,
                commit=False,
            )
            await self.room_repo.set_host(room.id, host.id, commit=False)

            # Step 4: Commit room and host together
            await self.db.commit()

        logger.info("Room %s created (id=%d, host=%d)", code, room.id, host.id)
        return CreateRoomResponse(room_id=room.id, code=code, participant_id=host.id)

    async def end_room(self, room_id: int) -> Optional[RoomResponse]:
        """End a room. Ending an ended or unknown room is a no-op."""
        async with unit_of_work(self.db):
            room = await self.room_repo.deactivate(room_id)

        if room is None:
            logger.warning("End requested for unknown room %d", room_id)
        else:
            logger.info("Room %d ended", room_id)
        return room
