from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ParticipantResponse(BaseModel):
    """Response model for participant data."""

    id: int
    room_id: int
    user_id: Optional[int]
    guest_name: str
    is_ready: bool
    is_host: bool
    current_platform: Optional[str]
    joined_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class SetReadyRequest(BaseModel):
    """Request model for toggling readiness."""

    is_ready: bool


class SetPlatformRequest(BaseModel):
    """Request model for selecting the platform a participant is on."""

    platform: str = Field(..., min_length=1, max_length=50)
