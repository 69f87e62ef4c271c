"""エンティティモジュール."""
from .deletion_request import GRACE_PERIOD, GRACE_PERIOD_DAYS, DeletionRequest
from .session import Session

__all__ = [
    "DeletionRequest",
    "GRACE_PERIOD",
    "GRACE_PERIOD_DAYS",
    "Session",
]
