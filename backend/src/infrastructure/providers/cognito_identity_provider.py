"""Amazon Cognito による認証基盤実装."""
import logging
import os

import boto3
from botocore.exceptions import ClientError

from src.domain.entities import Session
from src.domain.identifiers import UserId
from src.domain.ports import AuthenticationError
from src.domain.value_objects import Email

from .observable_identity_provider import ObservableIdentityProvider

logger = logging.getLogger(__name__)


class CognitoIdentityProvider(ObservableIdentityProvider):
    """Cognito ユーザープールの USER_PASSWORD_AUTH フローを使う認証基盤."""

    def __init__(self, client_id: str | None = None) -> None:
        """初期化."""
        super().__init__()
        self._client_id = client_id or os.environ.get("COGNITO_CLIENT_ID", "")
        if not self._client_id:
            raise ValueError("COGNITO_CLIENT_ID is required")
        self._client = boto3.client("cognito-idp")

    def sign_in(self, email: str, password: str) -> Session:
        """メールアドレスとパスワードでログインする."""
        try:
            response = self._client.initiate_auth(
                AuthFlow="USER_PASSWORD_AUTH",
                ClientId=self._client_id,
                AuthParameters={"USERNAME": email, "PASSWORD": password},
            )
            result = response.get("AuthenticationResult")
            if result is None:
                challenge = response.get("ChallengeName", "UNKNOWN")
                raise AuthenticationError(f"Additional authentication required: {challenge}")

            user = self._client.get_user(AccessToken=result["AccessToken"])
        except ClientError as e:
            logger.error(f"Login failed for {email}: {e}")
            raise AuthenticationError(e.response["Error"]["Message"]) from e

        attributes = {attr["Name"]: attr["Value"] for attr in user.get("UserAttributes", [])}
        session = Session(
            user_id=UserId(attributes.get("sub") or user["Username"]),
            email=Email.parse(attributes.get("email", email)),
            access_token=result["AccessToken"],
            refresh_token=result.get("RefreshToken"),
        )
        return self._signed_in(session)

    def sign_out(self) -> None:
        """ログアウトする（全デバイスのトークンを無効化する）."""
        if self._session is not None:
            try:
                self._client.global_sign_out(AccessToken=self._session.access_token)
            except ClientError as e:
                logger.error(f"Logout failed for {self._session.user_id}: {e}")
                raise AuthenticationError(e.response["Error"]["Message"]) from e
        self._signed_out()
