"""CognitoIdentityProviderのテスト."""
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from src.domain.enums import SessionEventType
from src.domain.ports import AuthenticationError
from src.infrastructure.providers.cognito_identity_provider import CognitoIdentityProvider


def _client_error(code: str, message: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "InitiateAuth")


@pytest.fixture
def cognito():
    with patch("src.infrastructure.providers.cognito_identity_provider.boto3.client") as mock_client:
        client = MagicMock()
        mock_client.return_value = client
        client.initiate_auth.return_value = {
            "AuthenticationResult": {"AccessToken": "access", "RefreshToken": "refresh"}
        }
        client.get_user.return_value = {
            "Username": "test-user",
            "UserAttributes": [
                {"Name": "sub", "Value": "user-123"},
                {"Name": "email", "Value": "test@example.com"},
            ],
        }
        yield client


class TestCognitoIdentityProvider:
    """Cognito 認証基盤のテスト."""

    def test_クライアントIDは必須(self, monkeypatch, cognito):
        monkeypatch.delenv("COGNITO_CLIENT_ID", raising=False)
        with pytest.raises(ValueError):
            CognitoIdentityProvider()

    def test_ログインしてsubをユーザーIDにする(self, cognito):
        provider = CognitoIdentityProvider("client-id")
        events = []
        provider.on_session_change(events.append)

        session = provider.sign_in("test@example.com", "secret")

        assert session.user_id.value == "user-123"
        assert session.email.value == "test@example.com"
        assert events[0].event_type == SessionEventType.SIGNED_IN
        cognito.initiate_auth.assert_called_once_with(
            AuthFlow="USER_PASSWORD_AUTH",
            ClientId="client-id",
            AuthParameters={"USERNAME": "test@example.com", "PASSWORD": "secret"},
        )

    def test_認証失敗はメッセージをそのまま返す(self, cognito):
        cognito.initiate_auth.side_effect = _client_error("NotAuthorizedException", "Incorrect username or password.")
        with pytest.raises(AuthenticationError, match="Incorrect username or password."):
            CognitoIdentityProvider("client-id").sign_in("test@example.com", "wrong")

    def test_追加チャレンジが必要なら認証エラー(self, cognito):
        cognito.initiate_auth.return_value = {"ChallengeName": "SOFTWARE_TOKEN_MFA"}
        with pytest.raises(AuthenticationError, match="SOFTWARE_TOKEN_MFA"):
            CognitoIdentityProvider("client-id").sign_in("test@example.com", "secret")

    def test_ログアウトでトークンを無効化する(self, cognito):
        provider = CognitoIdentityProvider("client-id")
        provider.sign_in("test@example.com", "secret")
        events = []
        provider.on_session_change(events.append)

        provider.sign_out()

        cognito.global_sign_out.assert_called_once_with(AccessToken="access")
        assert provider.get_current_session() is None
        assert events[0].event_type == SessionEventType.SIGNED_OUT
