"""アプリケーション層モジュール."""
from .countdown_ticker import CountdownTicker
from .session_context import SessionContext
from .use_cases import (
    AccountDeletionResult,
    CancelAccountDeletionUseCase,
    GetDeletionRequestUseCase,
    RequestAccountDeletionUseCase,
    SignInUseCase,
    SignOutUseCase,
)

__all__ = [
    "CountdownTicker",
    "SessionContext",
    # Use Cases
    "AccountDeletionResult",
    "CancelAccountDeletionUseCase",
    "GetDeletionRequestUseCase",
    "RequestAccountDeletionUseCase",
    "SignInUseCase",
    "SignOutUseCase",
]
