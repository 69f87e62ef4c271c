"""環境変数から読み込むアプリケーション設定."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

_PLACEHOLDERS = {"YOUR_SUPABASE_URL", "YOUR_SUPABASE_ANON_KEY"}


class ConfigurationError(Exception):
    """設定不備エラー."""

    pass


def _first_env(*names: str) -> str | None:
    """最初に値が設定されている環境変数を返す."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass(frozen=True)
class Settings:
    """アプリケーション設定."""

    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    identity_provider: str = "in_memory"
    deletion_request_store: str = "in_memory"
    deletion_request_table_name: str = "account-deletion-requests"
    cognito_client_id: str | None = None
    countdown_interval_seconds: float = 60.0
    display_timezone: str = "UTC"

    def uses_supabase(self) -> bool:
        """Supabase を利用する設定かどうか."""
        return "supabase" in (self.identity_provider, self.deletion_request_store)

    def require_supabase(self) -> tuple[str, str]:
        """Supabase の URL と anon key を返す.

        Raises:
            ConfigurationError: 未設定またはプレースホルダーのままの場合
        """
        url = (self.supabase_url or "").strip()
        key = (self.supabase_anon_key or "").strip()
        if not url or url in _PLACEHOLDERS:
            raise ConfigurationError("SUPABASE_URL is required")
        if not key or key in _PLACEHOLDERS:
            raise ConfigurationError("SUPABASE_ANON_KEY is required")
        return url.rstrip("/"), key

    def display_tz(self) -> tzinfo:
        """日付表示に使うタイムゾーンを返す."""
        if self.display_timezone.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.display_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown DISPLAY_TIMEZONE=%s, falling back to UTC", self.display_timezone)
            return timezone.utc


def load_settings() -> Settings:
    """環境変数から設定を読み込む.

    Vercel 等のビルド環境向けに NEXT_PUBLIC_ 接頭辞付きの変数も参照する。
    """
    interval_raw = os.environ.get("COUNTDOWN_INTERVAL_SECONDS", "60")
    try:
        interval = float(interval_raw)
    except ValueError as e:
        raise ConfigurationError(f"COUNTDOWN_INTERVAL_SECONDS must be a number: {interval_raw}") from e
    if interval <= 0:
        raise ConfigurationError("COUNTDOWN_INTERVAL_SECONDS must be positive")

    settings = Settings(
        supabase_url=_first_env("SUPABASE_URL", "NEXT_PUBLIC_SUPABASE_URL"),
        supabase_anon_key=_first_env("SUPABASE_ANON_KEY", "NEXT_PUBLIC_SUPABASE_ANON_KEY"),
        identity_provider=os.environ.get("IDENTITY_PROVIDER", "in_memory").lower(),
        deletion_request_store=os.environ.get("DELETION_REQUEST_STORE", "in_memory").lower(),
        deletion_request_table_name=os.environ.get(
            "DELETION_REQUEST_TABLE_NAME", "account-deletion-requests"
        ),
        cognito_client_id=os.environ.get("COGNITO_CLIENT_ID"),
        countdown_interval_seconds=interval,
        display_timezone=os.environ.get("DISPLAY_TIMEZONE", "UTC"),
    )
    if settings.uses_supabase():
        settings.require_supabase()
    return settings
