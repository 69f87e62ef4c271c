"""ログインユースケース."""
import logging

from src.domain.entities import Session
from src.domain.ports import IdentityProvider
from src.domain.value_objects import LoginCredentials

logger = logging.getLogger(__name__)


class SignInUseCase:
    """ログインユースケース."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """初期化."""
        self._identity_provider = identity_provider

    def execute(self, email: str, password: str) -> Session:
        """メールアドレスとパスワードでログインする.

        Args:
            email: メールアドレス
            password: パスワード

        Returns:
            ログイン後のセッション

        Raises:
            CredentialsValidationError: 未入力の項目がある場合（認証基盤は呼ばない）
            AuthenticationError: 認証に失敗した場合
        """
        credentials = LoginCredentials(email=email, password=password)
        session = self._identity_provider.sign_in(credentials.email, credentials.password)
        logger.info("Signed in: %s", session.user_id)
        return session
