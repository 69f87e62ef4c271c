"""ポートモジュール."""
from .deletion_request_repository import (
    DeletionRequestAlreadyExistsError,
    DeletionRequestRepository,
    DeletionRequestRepositoryError,
)
from .identity_provider import AuthenticationError, IdentityProvider, SessionEvent, SessionListener
from .scheduler import ScheduledTask, Scheduler

__all__ = [
    "AuthenticationError",
    "DeletionRequestAlreadyExistsError",
    "DeletionRequestRepository",
    "DeletionRequestRepositoryError",
    "IdentityProvider",
    "ScheduledTask",
    "Scheduler",
    "SessionEvent",
    "SessionListener",
]
