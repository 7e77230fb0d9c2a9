"""Typed failures raised by the room coordination services.

API response format is handled by the exception handler registered in
``swaproom.main``.
"""

from typing import Any, Dict, Optional


class RoomServiceError(Exception):
    """Base exception for the swap room service."""

    status_code = 500
    code = "internal_error"
    default_message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class NotFoundError(RoomServiceError):
    """The room or participant no longer exists."""

    status_code = 404
    code = "not_found"
    default_message = "Not found"


class RoomNotFoundError(NotFoundError):
    code = "room_not_found"
    default_message = "Room not found"


class ParticipantNotFoundError(NotFoundError):
    code = "participant_not_found"
    default_message = "Participant not found"


class SessionSummaryNotFoundError(NotFoundError):
    code = "session_summary_not_found"
    default_message = "No session summary recorded for this room"


class ConflictError(RoomServiceError):
    """The request clashes with current room state; retry with other input."""

    status_code = 409
    code = "conflict"
    default_message = "Conflict"


class RoomFullError(ConflictError):
    code = "room_full"
    default_message = "Room is full"


class RoomEndedError(ConflictError):
    code = "room_ended"
    default_message = "Room is no longer active"


class DuplicateCodeError(ConflictError):
    code = "duplicate_code"
    default_message = "Room code was taken by a concurrent room"


class SwapConflictError(ConflictError):
    code = "swap_conflict"
    default_message = "Swap participants are not members of this room"


class ExhaustedRetriesError(RoomServiceError):
    code = "exhausted_retries"
    default_message = "Failed to generate unique room code"


class StorageUnavailableError(RoomServiceError):
    status_code = 503
    code = "storage_unavailable"
    default_message = "Storage is unavailable"
