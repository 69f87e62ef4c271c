"""InMemoryIdentityProviderのテスト."""
import pytest

from src.domain.enums import SessionEventType
from src.domain.ports import AuthenticationError
from src.infrastructure.providers import InMemoryIdentityProvider


class TestInMemoryIdentityProvider:
    """インメモリ認証基盤のテスト."""

    def test_ログインでSIGNED_INを通知する(self):
        provider = InMemoryIdentityProvider()
        provider.register("test@example.com", "secret", user_id="user-123")
        events = []
        provider.on_session_change(events.append)

        session = provider.sign_in("test@example.com", "secret")

        assert [e.event_type for e in events] == [SessionEventType.SIGNED_IN]
        assert events[0].session == session

    def test_ログアウトでSIGNED_OUTを通知する(self):
        provider = InMemoryIdentityProvider()
        provider.register("test@example.com", "secret")
        provider.sign_in("test@example.com", "secret")
        events = []
        provider.on_session_change(events.append)

        provider.sign_out()

        assert [e.event_type for e in events] == [SessionEventType.SIGNED_OUT]
        assert provider.get_current_session() is None

    def test_未登録ユーザーは認証エラー(self):
        provider = InMemoryIdentityProvider()
        with pytest.raises(AuthenticationError):
            provider.sign_in("nobody@example.com", "secret")

    def test_ログアウト失敗を再現できる(self):
        provider = InMemoryIdentityProvider()
        provider.fail_sign_out_with("network error")
        with pytest.raises(AuthenticationError, match="network error"):
            provider.sign_out()
