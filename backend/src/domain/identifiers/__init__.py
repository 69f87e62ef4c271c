"""識別子モジュール."""
from .deletion_request_id import DeletionRequestId
from .user_id import UserId

__all__ = [
    "DeletionRequestId",
    "UserId",
]
