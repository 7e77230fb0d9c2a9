# SQLAlchemy database models
from .message_model import MessageModel
from .participant_model import ParticipantModel
from .room_model import RoomModel
from .session_summary_model import SessionSummaryModel
from .swap_model import SwapHistoryModel

__all__ = [
    "MessageModel",
    "ParticipantModel",
    "RoomModel",
    "SessionSummaryModel",
    "SwapHistoryModel",
]
