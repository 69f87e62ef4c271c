"""値オブジェクトモジュール."""
from .deletion_view_model import DeletionViewModel
from .email import Email
from .login_credentials import CredentialsValidationError, LoginCredentials

__all__ = [
    "CredentialsValidationError",
    "DeletionViewModel",
    "Email",
    "LoginCredentials",
]
