# Export all models
from .api import (
    CreateRoomRequest,
    JoinRoomRequest,
    MessageResponse,
    ParticipantResponse,
    RoomResponse,
    RoomSessionResponse,
    SessionSummaryResponse,
    SwapHistoryEntry,
    SwapType,
)
from .db import (
    MessageModel,
    ParticipantModel,
    RoomModel,
    SessionSummaryModel,
    SwapHistoryModel,
)

__all__ = [
    # API models
    "CreateRoomRequest",
    "JoinRoomRequest",
    "RoomResponse",
    "RoomSessionResponse",
    "ParticipantResponse",
    "SwapHistoryEntry",
    "SwapType",
    "MessageResponse",
    "SessionSummaryResponse",
    # DB models
    "MessageModel",
    "ParticipantModel",
    "RoomModel",
    "SessionSummaryModel",
    "SwapHistoryModel",
]
