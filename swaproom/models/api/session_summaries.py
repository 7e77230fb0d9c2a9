from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecordSessionSummaryRequest(BaseModel):
    """Request model for recording the aggregate figures of a finished session.

    Totals left out are counted from the room's swap history and chat log.
    """

    host_name: str = Field(..., min_length=1, max_length=50)
    participant_count: int = Field(..., ge=0)
    session_duration: int = Field(..., ge=0, description="Duration in seconds")
    total_swaps: Optional[int] = Field(default=None, ge=0)
    total_messages: Optional[int] = Field(default=None, ge=0)
    platforms_used: Optional[List[str]] = None


class RecordSessionSummaryResponse(BaseModel):
    session_id: int


class SessionSummaryResponse(BaseModel):
    """Response model for session summary data."""

    id: int
    room_id: int
    host_name: str
    participant_count: int
    total_swaps: int
    total_messages: int
    session_duration: int
    platforms_used: List[str]
    started_at: Optional[datetime]
    ended_at: datetime

    model_config = ConfigDict(from_attributes=True)
