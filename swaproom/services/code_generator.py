import logging
import random

from swaproom import config
from swaproom.exceptions import ExhaustedRetriesError
from swaproom.repositories.room_repository import RoomRepository

logger = logging.getLogger(__name__)


def generate_room_code() -> str:
    """Return a short shareable room code. Not suitable as a secret."""
    return "".join(
        random.choice(config.ROOM_CODE_ALPHABET)
        for _ in range(config.ROOM_CODE_LENGTH)
    )


class CodeGenerator:
    """Allocates room codes that no existing room, active or ended, uses."""

    def __init__(
        self,
        room_repo: RoomRepository,
        max_attempts: int = config.ROOM_CODE_MAX_ATTEMPTS,
    ):
        self.room_repo = room_repo
        self.max_attempts = max_attempts

    async def ensure_unique(self) -> str:
        """
        Draw codes until one is free.

        The check is not atomic against concurrent creators; the room insert
        is the real confirmation of uniqueness.
        """
        for attempt in range(1, self.max_attempts + 1):
            code = generate_room_code()
            if not await self.room_repo.code_exists(code):
                return code
            logger.warning(
                "Room code collision on attempt %d/%d", attempt, self.max_attempts
            )

        raise ExhaustedRetriesError(details={"attempts": self.max_attempts})
