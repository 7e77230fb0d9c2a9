import logging
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import unit_of_work
from swaproom.exceptions import (
    ParticipantNotFoundError,
    RoomEndedError,
    RoomFullError,
    RoomNotFoundError,
)
from swaproom.models.api.participants import ParticipantResponse
from swaproom.models.api.rooms import JoinRoomResponse
from swaproom.repositories.participant_repository import ParticipantRepository
from swaproom.repositories.room_repository import RoomRepository

logger = logging.getLogger(__name__)


def all_ready(participants: Sequence[ParticipantResponse]) -> bool:
    """True iff there is at least one participant and every one is ready."""
    return bool(participants) and all(p.is_ready for p in participants)


def can_start_session(
    participants: Sequence[ParticipantResponse],
    min_participants: int = config.MIN_PARTICIPANTS_TO_START,
) -> bool:
    """Start gating used by the HTTP surface: everyone ready and enough people.

    A lone participant is all ready but cannot start a session.
    """
    return len(participants) >= min_participants and all_ready(participants)


class ParticipantRegistryService:
    """Service for room membership, readiness and platform state."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.room_repo = RoomRepository(db)
        self.participant_repo = ParticipantRepository(db)

    async def join(
        self, code: str, guest_name: str, user_id: Optional[int] = None
    ) -> JoinRoomResponse:
        """
        Admit a guest to the room with the given code:

        1. Load the room, locking its row where the backend supports it
        2. Reject unknown, then ended rooms
        3. Claim a seat with a single guarded insert; no seat means full
        4. Commit
        """
        code = code.upper()
        async with unit_of_work(self.db):
            # Step 1: Load room (row lock on Postgres, ignored by SQLite)
            room = await self.room_repo.get_by_code(code, for_update=True)

            # Step 2: Admission checks
            if room is None:
                raise RoomNotFoundError(details={"code": code})
            if not room.is_active:
                raise RoomEndedError(details={"room_id": room.id})

            # Step 3: Seat count and insert in one statement
            participant = await self.participant_repo.add_participant_if_space(
                room_id=room.id,
                max_participants=room.max_participants,
                guest_name=guest_name,
                user_id=user_id,
            )
            if participant is None:
                raise RoomFullError(
                    details={"room_id": room.id, "max_participants": room.max_participants}
                )

            # Step 4: Commit
            await self.db.commit()

        logger.info(
            "Participant %d joined room %d (max %d)",
            participant.id,
            room.id,
            room.max_participants,
        )
        return JoinRoomResponse(room_id=room.id, participant_id=participant.id, room=room)

    async def leave(self, participant_id: int) -> bool:
        """Remove a participant. Returns False when it was already gone."""
        # Host role is advisory: the room keeps running without reassignment
        async with unit_of_work(self.db):
            removed = await self.participant_repo.delete(participant_id)

        if removed:
            logger.info("Participant %d left", participant_id)
        return removed

    async def set_ready(self, participant_id: int, is_ready: bool) -> ParticipantResponse:
        async with unit_of_work(self.db):
            participant = await self.participant_repo.set_ready(participant_id, is_ready)

        if participant is None:
            raise ParticipantNotFoundError(details={"participant_id": participant_id})
        return participant

    async def set_platform(self, participant_id: int, platform: str) -> ParticipantResponse:
        """Record the platform label; labels are not checked against a catalog."""
        async with unit_of_work(self.db):
            participant = await self.participant_repo.set_platform(
                participant_id, platform
            )

        if participant is None:
            raise ParticipantNotFoundError(details={"participant_id": participant_id})
        return participant

    async def list_participants(self, room_id: int) -> List[ParticipantResponse]:
        async with unit_of_work(self.db):
            return await self.participant_repo.get_by_room(room_id)

    async def room_all_ready(self, room_id: int) -> bool:
        return all_ready(await self.list_participants(room_id))
