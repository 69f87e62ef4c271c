"""ログアウトユースケース."""
from src.domain.ports import IdentityProvider


class SignOutUseCase:
    """ログアウトユースケース."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """初期化."""
        self._identity_provider = identity_provider

    def execute(self) -> None:
        """ログアウトする。画面遷移は SIGNED_OUT イベントで行う."""
        self._identity_provider.sign_out()
