import logging
import random
from typing import Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from swaproom import config
from swaproom.database import unit_of_work
from swaproom.exceptions import SwapConflictError
from swaproom.models.api.participants import ParticipantResponse
from swaproom.models.api.swaps import (
    RandomSwapResponse,
    RecordSwapResponse,
    SwapHistoryEntry,
    SwapType,
)
from swaproom.repositories.participant_repository import ParticipantRepository
from swaproom.repositories.swap_repository import SwapRepository

logger = logging.getLogger(__name__)


def pick_random_target(
    participants: Sequence[ParticipantResponse],
    self_id: int,
    current_target_id: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Optional[ParticipantResponse]:
    """Pick uniformly among participants other than the viewer and its target.

    Returns None when nobody is left to pick, which is expected in a room of
    two.
    """
    candidates = [
        p for p in participants if p.id != self_id and p.id != current_target_id
    ]
    if not candidates:
        return None
    return (rng or random).choice(candidates)


class SwapCoordinatorService:
    """Service for recording who watches whom and reading the swap history.

    A swap is bookkeeping only: clients render whatever the latest recorded
    target is.
    """

    def __init__(
        self,
        db: AsyncSession,
        require_membership: bool = config.SWAP_REQUIRE_MEMBERSHIP,
    ):
        self.db = db
        self.require_membership = require_membership
        self.swap_repo = SwapRepository(db)
        self.participant_repo = ParticipantRepository(db)

    async def record_swap(
        self,
        room_id: int,
        from_participant_id: int,
        to_participant_id: int,
        swap_type: SwapType,
    ) -> RecordSwapResponse:
        """
        Append a swap to the room's history:

        1. Look up current members to capture display labels
        2. Reject ids that are not members, when membership is required
        3. Append the immutable history row
        """
        async with unit_of_work(self.db):
            # Step 1: Current members by id
            members = await self._members_by_id(room_id)

            # Step 2: Membership validation
            if self.require_membership:
                missing = [
                    pid
                    for pid in (from_participant_id, to_participant_id)
                    if pid not in members
                ]
                if missing:
                    raise SwapConflictError(
                        details={"room_id": room_id, "participant_ids": missing}
                    )

            # Step 3: Append
            entry = await self.swap_repo.record(
                room_id=room_id,
                from_participant_id=from_participant_id,
                to_participant_id=to_participant_id,
                swap_type=swap_type,
                from_label=self._label(members.get(from_participant_id)),
                to_label=self._label(members.get(to_participant_id)),
            )

        logger.info(
            "Swap %d in room %d: %d -> %d (%s)",
            entry.id,
            room_id,
            from_participant_id,
            to_participant_id,
            entry.swap_type.value,
        )
        return RecordSwapResponse(swap_id=entry.id)

    async def random_swap(
        self,
        room_id: int,
        from_participant_id: int,
        current_target_id: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> RandomSwapResponse:
        """Pick a random target among current members and record the swap."""
        async with unit_of_work(self.db):
            participants = await self.participant_repo.get_by_room(room_id)

        target = pick_random_target(
            participants, from_participant_id, current_target_id, rng=rng
        )
        if target is None:
            logger.debug(
                "No random swap candidates for participant %d in room %d",
                from_participant_id,
                room_id,
            )
            return RandomSwapResponse(no_candidates=True)

        recorded = await self.record_swap(
            room_id, from_participant_id, target.id, SwapType.RANDOM
        )
        return RandomSwapResponse(
            no_candidates=False, swap_id=recorded.swap_id, target=target
        )

    async def history(
        self, room_id: int, limit: int = config.SWAP_HISTORY_DEFAULT_LIMIT
    ) -> List[SwapHistoryEntry]:
        """Most recent swaps of a room, newest first."""
        if limit <= 0 or limit > config.SWAP_HISTORY_MAX_LIMIT:
            raise ValueError(
                f"Limit must be between 1 and {config.SWAP_HISTORY_MAX_LIMIT}"
            )

        async with unit_of_work(self.db):
            return await self.swap_repo.get_recent(room_id, limit)

    async def _members_by_id(self, room_id: int) -> Dict[int, ParticipantResponse]:
        participants = await self.participant_repo.get_by_room(room_id)
        return {p.id: p for p in participants}

    @staticmethod
    def _label(participant: Optional[ParticipantResponse]) -> Optional[str]:
        return participant.guest_name if participant else None
