"""Supabase REST クライアント.

認証（GoTrue）とテーブル操作（PostgREST）を requests で呼び出す。
"""
from __future__ import annotations

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class SupabaseApiError(Exception):
    """Supabase API エラー."""

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None) -> None:
        """初期化."""
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


class SupabaseClient:
    """Supabase プロジェクトへの HTTP クライアント.

    ログイン中はユーザーのアクセストークン、未ログイン時は anon key で
    Authorization ヘッダーを組み立てる。
    """

    DEFAULT_TIMEOUT = 30  # seconds

    def __init__(
        self,
        url: str,
        anon_key: str,
        timeout: int | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """初期化.

        Args:
            url: プロジェクト URL (例: https://xxxx.supabase.co)
            anon_key: 公開用の anon key
            timeout: リクエストタイムアウト秒数
            session: 利用する HTTP セッション
        """
        self._url = url.rstrip("/")
        self._anon_key = anon_key
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._session = session or requests.Session()
        self.access_token: str | None = None

    @property
    def url(self) -> str:
        """プロジェクト URL."""
        return self._url

    def _headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        headers = {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {self.access_token or self._anon_key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """API を呼び出す.

        Raises:
            SupabaseApiError: 通信に失敗した場合、または 2xx 以外が返った場合
        """
        try:
            response = self._session.request(
                method,
                f"{self._url}{path}",
                params=params,
                json=json,
                headers=self._headers(headers),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Supabase request failed: {method} {path}: {e}")
            raise SupabaseApiError(str(e)) from e

        if not response.ok:
            raise self._to_error(response)
        return response

    @staticmethod
    def _to_error(response: requests.Response) -> SupabaseApiError:
        """エラーレスポンスを SupabaseApiError に変換する."""
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = (
            body.get("message")
            or body.get("msg")
            or body.get("error_description")
            or body.get("error")
            or response.reason
            or f"HTTP {response.status_code}"
        )
        code = body.get("code") or body.get("error_code")
        return SupabaseApiError(str(message), status_code=response.status_code, code=str(code) if code else None)
