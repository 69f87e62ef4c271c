"""Supabase Auth による認証基盤実装."""
import logging

from src.domain.entities import Session
from src.domain.identifiers import UserId
from src.domain.ports import AuthenticationError
from src.domain.value_objects import Email
from src.infrastructure.clients import SupabaseApiError, SupabaseClient

from .observable_identity_provider import ObservableIdentityProvider

logger = logging.getLogger(__name__)


class SupabaseIdentityProvider(ObservableIdentityProvider):
    """Supabase Auth（GoTrue）のパスワード認証を使う認証基盤.

    ログイン中のアクセストークンは共有の SupabaseClient に設定し、
    テーブル操作も同じユーザー権限で行う。
    """

    def __init__(self, client: SupabaseClient) -> None:
        """初期化."""
        super().__init__()
        self._client = client

    def sign_in(self, email: str, password: str) -> Session:
        """メールアドレスとパスワードでログインする."""
        try:
            response = self._client.request(
                "POST",
                "/auth/v1/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
            )
        except SupabaseApiError as e:
            logger.error(f"Login failed: {e}")
            raise AuthenticationError(e.message) from e

        data = response.json()
        user = data.get("user") or {}
        try:
            session = Session(
                user_id=UserId(user.get("id", "")),
                email=Email.parse(user.get("email", "")),
                access_token=data.get("access_token", ""),
                refresh_token=data.get("refresh_token"),
            )
        except ValueError as e:
            raise AuthenticationError(f"Unexpected session payload: {e}") from e

        self._client.access_token = session.access_token
        return self._signed_in(session)

    def sign_out(self) -> None:
        """ログアウトする."""
        if self._session is not None:
            try:
                self._client.request("POST", "/auth/v1/logout")
            except SupabaseApiError as e:
                logger.error(f"Logout failed: {e}")
                raise AuthenticationError(e.message) from e
        self._client.access_token = None
        self._signed_out()
