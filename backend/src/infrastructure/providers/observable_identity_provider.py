"""セッション変化をリスナーへ通知する認証基盤の共通実装."""
from src.domain.entities import Session
from src.domain.ports import IdentityProvider, SessionEvent, SessionListener


class ObservableIdentityProvider(IdentityProvider):
    """現在のセッション保持とリスナー通知を共通化した基底クラス."""

    def __init__(self) -> None:
        """初期化."""
        self._session: Session | None = None
        self._listeners: list[SessionListener] = []

    def get_current_session(self) -> Session | None:
        """現在のセッションを取得する."""
        return self._session

    def on_session_change(self, listener: SessionListener) -> None:
        """セッション変化のリスナーを登録する."""
        self._listeners.append(listener)

    def _signed_in(self, session: Session) -> Session:
        self._session = session
        self._notify(SessionEvent.signed_in(session))
        return session

    def _signed_out(self) -> None:
        self._session = None
        self._notify(SessionEvent.signed_out())

    def _notify(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
