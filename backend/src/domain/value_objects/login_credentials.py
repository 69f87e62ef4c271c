"""ログイン入力を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass, field


class CredentialsValidationError(ValueError):
    """ログイン入力の検証エラー."""

    pass


@dataclass(frozen=True)
class LoginCredentials:
    """メールアドレスとパスワードの組.

    書式の検証は認証基盤に任せ、ここでは未入力のみを弾く。
    """

    email: str
    password: str = field(repr=False)

    MISSING_MESSAGE = "Please enter both email and password"

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.email or not self.password:
            raise CredentialsValidationError(self.MISSING_MESSAGE)
