"""ユースケースモジュール."""
from .cancel_account_deletion import CancelAccountDeletionUseCase
from .get_deletion_request import GetDeletionRequestUseCase
from .request_account_deletion import AccountDeletionResult, RequestAccountDeletionUseCase
from .sign_in import SignInUseCase
from .sign_out import SignOutUseCase

__all__ = [
    "AccountDeletionResult",
    "CancelAccountDeletionUseCase",
    "GetDeletionRequestUseCase",
    "RequestAccountDeletionUseCase",
    "SignInUseCase",
    "SignOutUseCase",
]
