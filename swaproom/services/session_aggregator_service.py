from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import unit_of_work
from swaproom.exceptions import RoomNotFoundError
from swaproom.models.api.rooms import RoomSessionResponse
from swaproom.repositories.participant_repository import ParticipantRepository
from swaproom.repositories.room_repository import RoomRepository
from swaproom.repositories.swap_repository import SwapRepository
from swaproom.services.participant_registry_service import all_ready, can_start_session


class SessionAggregatorService:
    """Read model polled by clients: room, members and recent swaps at once."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.room_repo = RoomRepository(db)
        self.participant_repo = ParticipantRepository(db)
        self.swap_repo = SwapRepository(db)

    async def get_session(
        self,
        room_id: int,
        include_history: bool = False,
        history_limit: int = config.SWAP_HISTORY_DEFAULT_LIMIT,
    ) -> RoomSessionResponse:
        """
        Build one snapshot of a room:

        1. Load the room, failing if it does not exist
        2. Load current participants and derive readiness
        3. Optionally load recent swap history

        All reads share one session transaction. Nothing is written.
        """
        if history_limit <= 0 or history_limit > config.SWAP_HISTORY_MAX_LIMIT:
            raise ValueError(
                f"History limit must be between 1 and {config.SWAP_HISTORY_MAX_LIMIT}"
            )

        async with unit_of_work(self.db):
            # Step 1: Room
            room = await self.room_repo.get_by_id(room_id)
            if room is None:
                raise RoomNotFoundError(details={"room_id": room_id})

            # Step 2: Participants
            participants = await self.participant_repo.get_by_room(room_id)

            # Step 3: History
            swaps = (
                await self.swap_repo.get_recent(room_id, history_limit)
                if include_history
                else None
            )

        return RoomSessionResponse(
            room=room,
            participants=participants,
            participant_count=len(participants),
            all_ready=all_ready(participants),
            can_start=can_start_session(participants),
            swaps=swaps,
        )
