from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from swaproom.models.api.participants import ParticipantResponse


class SwapType(str, Enum):
    """How the swap target was chosen."""

    MANUAL = "manual"
    RANDOM = "random"


class RecordSwapRequest(BaseModel):
    """Request model for recording a swap."""

    from_participant_id: int
    to_participant_id: int
    swap_type: SwapType


class RecordSwapResponse(BaseModel):
    swap_id: int


class RandomSwapRequest(BaseModel):
    """Request model for a swap to a randomly chosen participant."""

    from_participant_id: int
    current_target_id: Optional[int] = None


class RandomSwapResponse(BaseModel):
    """Outcome of a random swap; no_candidates means nothing was recorded."""

    no_candidates: bool
    swap_id: Optional[int] = None
    target: Optional[ParticipantResponse] = None


class SwapHistoryEntry(BaseModel):
    """Response model for one swap history row."""

    id: int
    room_id: int
    from_participant_id: int
    to_participant_id: int
    from_label: Optional[str]  # name at the time of the swap
    to_label: Optional[str]
    swap_type: SwapType
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
