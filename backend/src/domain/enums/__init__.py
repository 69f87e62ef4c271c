"""列挙型モジュール."""
from .deletion_request_status import DeletionRequestStatus
from .session_event_type import SessionEventType
from .view_state import ViewState

__all__ = [
    "DeletionRequestStatus",
    "SessionEventType",
    "ViewState",
]
