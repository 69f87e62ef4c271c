"""認証セッションイベント種別の列挙型."""
from enum import Enum


class SessionEventType(str, Enum):
    """認証セッションイベント種別."""

    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
