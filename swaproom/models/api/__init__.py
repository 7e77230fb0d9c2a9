# API models for request/response contracts
from .messages import MessageResponse, SendMessageRequest, SendMessageResponse
from .participants import ParticipantResponse, SetPlatformRequest, SetReadyRequest
from .rooms import (
    CreateRoomRequest,
    CreateRoomResponse,
    JoinRoomRequest,
    JoinRoomResponse,
    RoomResponse,
    RoomSessionResponse,
    SuccessResponse,
)
from .session_summaries import (
    RecordSessionSummaryRequest,
    RecordSessionSummaryResponse,
    SessionSummaryResponse,
)
from .swaps import (
    RandomSwapRequest,
    RandomSwapResponse,
    RecordSwapRequest,
    RecordSwapResponse,
    SwapHistoryEntry,
    SwapType,
)

__all__ = [
    "CreateRoomRequest",
    "CreateRoomResponse",
    "JoinRoomRequest",
    "JoinRoomResponse",
    "RoomResponse",
    "RoomSessionResponse",
    "SuccessResponse",
    "ParticipantResponse",
    "SetReadyRequest",
    "SetPlatformRequest",
    "RecordSwapRequest",
    "RecordSwapResponse",
    "RandomSwapRequest",
    "RandomSwapResponse",
    "SwapHistoryEntry",
    "SwapType",
    "SendMessageRequest",
    "SendMessageResponse",
    "MessageResponse",
    "RecordSessionSummaryRequest",
    "RecordSessionSummaryResponse",
    "SessionSummaryResponse",
]
