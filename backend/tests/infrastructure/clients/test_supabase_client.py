"""SupabaseClientのテスト."""
from unittest.mock import MagicMock

import pytest
import requests

from src.infrastructure.clients import SupabaseApiError, SupabaseClient


def _response(ok: bool = True, status_code: int = 200, body=None, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.reason = reason
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body if body is not None else {}
    return response


class TestSupabaseClient:
    """Supabase クライアントのテスト."""

    def test_未ログイン時はanon_keyで認証する(self):
        session = MagicMock()
        session.request.return_value = _response()
        client = SupabaseClient("https://example.supabase.co/", "anon-key", session=session)

        client.request("GET", "/rest/v1/account_deletion_requests")

        args, kwargs = session.request.call_args
        assert args == ("GET", "https://example.supabase.co/rest/v1/account_deletion_requests")
        assert kwargs["headers"]["apikey"] == "anon-key"
        assert kwargs["headers"]["Authorization"] == "Bearer anon-key"
        assert kwargs["timeout"] == SupabaseClient.DEFAULT_TIMEOUT

    def test_ログイン中はアクセストークンで認証する(self):
        session = MagicMock()
        session.request.return_value = _response()
        client = SupabaseClient("https://example.supabase.co", "anon-key", session=session)
        client.access_token = "user-token"

        client.request("GET", "/rest/v1/x", headers={"Accept": "application/json"})

        headers = session.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer user-token"
        assert headers["Accept"] == "application/json"

    def test_エラーレスポンスはメッセージとコードを保持する(self):
        session = MagicMock()
        session.request.return_value = _response(
            ok=False, status_code=406, body={"code": "PGRST116", "message": "no rows"}
        )
        client = SupabaseClient("https://example.supabase.co", "anon-key", session=session)

        with pytest.raises(SupabaseApiError) as exc_info:
            client.request("GET", "/rest/v1/x")
        assert exc_info.value.code == "PGRST116"
        assert exc_info.value.status_code == 406
        assert exc_info.value.message == "no rows"

    def test_認証エラーのerror_descriptionを使う(self):
        session = MagicMock()
        session.request.return_value = _response(
            ok=False, status_code=400, body={"error": "invalid_grant", "error_description": "Invalid login credentials"}
        )
        client = SupabaseClient("https://example.supabase.co", "anon-key", session=session)

        with pytest.raises(SupabaseApiError, match="Invalid login credentials"):
            client.request("POST", "/auth/v1/token")

    def test_JSONでないエラーはreasonを使う(self):
        session = MagicMock()
        session.request.return_value = _response(
            ok=False, status_code=502, body=ValueError("no json"), reason="Bad Gateway"
        )
        client = SupabaseClient("https://example.supabase.co", "anon-key", session=session)

        with pytest.raises(SupabaseApiError, match="Bad Gateway"):
            client.request("GET", "/rest/v1/x")

    def test_通信エラーはSupabaseApiError(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        client = SupabaseClient("https://example.supabase.co", "anon-key", session=session)

        with pytest.raises(SupabaseApiError, match="connection refused"):
            client.request("GET", "/rest/v1/x")
