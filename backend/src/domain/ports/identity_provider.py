"""認証基盤インターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from ..entities import Session
from ..enums import SessionEventType


class AuthenticationError(Exception):
    """認証エラー."""

    pass


@dataclass(frozen=True)
class SessionEvent:
    """認証状態の変化イベント."""

    event_type: SessionEventType
    session: Session | None = None

    @classmethod
    def signed_in(cls, session: Session) -> SessionEvent:
        """ログインイベントを生成する."""
        return cls(SessionEventType.SIGNED_IN, session)

    @classmethod
    def signed_out(cls) -> SessionEvent:
        """ログアウトイベントを生成する."""
        return cls(SessionEventType.SIGNED_OUT)


SessionListener = Callable[[SessionEvent], None]


class IdentityProvider(ABC):
    """認証基盤のインターフェース.

    sign_in 成功後は SIGNED_IN、sign_out 成功後は SIGNED_OUT を
    登録済みリスナーへ通知すること。
    """

    @abstractmethod
    def get_current_session(self) -> Session | None:
        """現在のセッションを取得する."""
        pass

    @abstractmethod
    def on_session_change(self, listener: SessionListener) -> None:
        """セッション変化のリスナーを登録する."""
        pass

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Session:
        """メールアドレスとパスワードでログインする."""
        pass

    @abstractmethod
    def sign_out(self) -> None:
        """ログアウトする."""
        pass
