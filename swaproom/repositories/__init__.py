# Repository classes for database operations
from .base_repository import BaseRepository
from .message_repository import MessageRepository
from .participant_repository import ParticipantRepository
from .room_repository import RoomRepository
from .session_summary_repository import SessionSummaryRepository
from .swap_repository import SwapRepository

__all__ = [
    "BaseRepository",
    "MessageRepository",
    "ParticipantRepository",
    "RoomRepository",
    "SessionSummaryRepository",
    "SwapRepository",
]
