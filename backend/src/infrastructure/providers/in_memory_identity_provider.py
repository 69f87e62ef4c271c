"""認証基盤のインメモリ実装."""
from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Session
from src.domain.identifiers import UserId
from src.domain.ports import AuthenticationError
from src.domain.value_objects import Email

from .observable_identity_provider import ObservableIdentityProvider


@dataclass(frozen=True)
class _Account:
    user_id: UserId
    email: Email
    password: str


class InMemoryIdentityProvider(ObservableIdentityProvider):
    """認証基盤のインメモリ実装（ローカル開発・テスト用）."""

    INVALID_CREDENTIALS_MESSAGE = "Invalid login credentials"

    def __init__(self) -> None:
        """初期化."""
        super().__init__()
        self._accounts: dict[str, _Account] = {}
        self._sign_out_error: str | None = None

    def register(self, email: str, password: str, user_id: str | None = None) -> UserId:
        """ログイン可能なアカウントを登録する."""
        uid = UserId(user_id or f"user-{len(self._accounts) + 1}")
        self._accounts[email] = _Account(uid, Email(email), password)
        return uid

    def restore_session(self, session: Session) -> None:
        """保存済みセッションがある状態を再現する（通知はしない）."""
        self._session = session

    def fail_sign_out_with(self, message: str | None) -> None:
        """次回以降の sign_out を失敗させる."""
        self._sign_out_error = message

    def sign_in(self, email: str, password: str) -> Session:
        """メールアドレスとパスワードでログインする."""
        account = self._accounts.get(email)
        if account is None or account.password != password:
            raise AuthenticationError(self.INVALID_CREDENTIALS_MESSAGE)
        session = Session(
            user_id=account.user_id,
            email=account.email,
            access_token=f"token-{account.user_id.value}",
        )
        return self._signed_in(session)

    def sign_out(self) -> None:
        """ログアウトする."""
        if self._sign_out_error is not None:
            raise AuthenticationError(self._sign_out_error)
        self._signed_out()
