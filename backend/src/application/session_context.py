"""ログイン中ユーザーと削除リクエストを保持するセッションコンテキスト."""
from __future__ import annotations

from src.domain.entities import DeletionRequest, Session


class SessionContext:
    """画面全体で共有する唯一の可変状態.

    アプリ起動時に init()、ログアウト時に reset() する。
    """

    def __init__(self) -> None:
        """初期化."""
        self.current_session: Session | None = None
        self.current_request: DeletionRequest | None = None
        self._in_flight: set[str] = set()

    def init(self) -> None:
        """起動時の状態に戻す."""
        self.current_session = None
        self.current_request = None
        self._in_flight = set()

    def reset(self) -> None:
        """ログアウト時に状態を破棄する."""
        self.init()

    @property
    def is_authenticated(self) -> bool:
        """ログイン中かどうか."""
        return self.current_session is not None

    def authenticate(self, session: Session) -> None:
        """ログイン中のセッションを設定する.

        別ユーザーに切り替わった場合は保持している削除リクエストを破棄する。
        """
        if self.current_session is not None and not self.current_session.belongs_to(session.user_id):
            self.current_request = None
        self.current_session = session

    def replace_request(self, request: DeletionRequest | None) -> None:
        """保持している削除リクエストを置き換える."""
        self.current_request = request

    def try_begin(self, operation: str) -> bool:
        """操作を開始する。同じ操作が実行中なら False を返す."""
        if operation in self._in_flight:
            return False
        self._in_flight.add(operation)
        return True

    def finish(self, operation: str) -> None:
        """操作の完了を記録する."""
        self._in_flight.discard(operation)

    def is_in_flight(self, operation: str) -> bool:
        """操作が実行中かどうか."""
        return operation in self._in_flight
