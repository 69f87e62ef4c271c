"""ドメイン層モジュール."""
from .entities import DeletionRequest, Session
from .enums import DeletionRequestStatus, SessionEventType, ViewState
from .identifiers import DeletionRequestId, UserId
from .ports import (
    AuthenticationError,
    DeletionRequestAlreadyExistsError,
    DeletionRequestRepository,
    DeletionRequestRepositoryError,
    IdentityProvider,
    ScheduledTask,
    Scheduler,
    SessionEvent,
)
from .services import DeletionLifecycleService
from .value_objects import (
    CredentialsValidationError,
    DeletionViewModel,
    Email,
    LoginCredentials,
)

__all__ = [
    # Identifiers
    "DeletionRequestId",
    "UserId",
    # Enums
    "DeletionRequestStatus",
    "SessionEventType",
    "ViewState",
    # Value Objects
    "CredentialsValidationError",
    "DeletionViewModel",
    "Email",
    "LoginCredentials",
    # Entities
    "DeletionRequest",
    "Session",
    # Ports
    "AuthenticationError",
    "DeletionRequestAlreadyExistsError",
    "DeletionRequestRepository",
    "DeletionRequestRepositoryError",
    "IdentityProvider",
    "ScheduledTask",
    "Scheduler",
    "SessionEvent",
    # Services
    "DeletionLifecycleService",
]
