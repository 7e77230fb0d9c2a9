from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SendMessageRequest(BaseModel):
    """Request model for posting to a room's chat log."""

    participant_id: int
    sender_name: str = Field(..., min_length=1, max_length=50)
    content: str = Field(..., min_length=1, max_length=500)


class SendMessageResponse(BaseModel):
    message_id: int


class MessageResponse(BaseModel):
    """Response model for message data."""

    id: int
    room_id: int
    participant_id: int
    sender_name: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
