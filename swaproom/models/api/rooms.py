from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from swaproom import config
from swaproom.models.api.participants import ParticipantResponse
from swaproom.models.api.swaps import SwapHistoryEntry


class CreateRoomRequest(BaseModel):
    """Request model for creating a room."""

    name: str = Field(..., min_length=1, max_length=100)
    guest_name: str = Field(
        ..., min_length=1, max_length=50, description="Display name of the host"
    )
    host_user_id: Optional[int] = None
    max_participants: int = Field(
        default=config.MAX_ROOM_CAPACITY,
        ge=config.MIN_ROOM_CAPACITY,
        le=config.MAX_ROOM_CAPACITY,
    )


class CreateRoomResponse(BaseModel):
    """Identifiers handed back to the room creator."""

    room_id: int
    code: str
    participant_id: int


class JoinRoomRequest(BaseModel):
    """Request model for joining a room by its shareable code."""

    code: str = Field(
        ..., min_length=config.ROOM_CODE_LENGTH, max_length=config.ROOM_CODE_LENGTH
    )
    guest_name: str = Field(..., min_length=1, max_length=50)
    user_id: Optional[int] = None

    @field_validator("code")
    @classmethod
    def normalize_code(cls, value: str) -> str:
        return value.upper()


class RoomResponse(BaseModel):
    """Response model for room data."""

    id: int
    code: str
    name: str
    host_id: int
    max_participants: int
    is_active: bool
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class JoinRoomResponse(BaseModel):
    """Identifiers handed back to a joiner, plus the room they joined."""

    room_id: int
    participant_id: int
    room: RoomResponse


class RoomSessionResponse(BaseModel):
    """Snapshot consumed by polling clients."""

    room: RoomResponse
    participants: List[ParticipantResponse]
    participant_count: int
    all_ready: bool
    can_start: bool
    swaps: Optional[List[SwapHistoryEntry]] = None


class SuccessResponse(BaseModel):
    success: bool = True
