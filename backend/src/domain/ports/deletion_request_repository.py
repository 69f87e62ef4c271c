"""削除リクエストリポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import DeletionRequest
from ..identifiers import UserId


class DeletionRequestRepositoryError(Exception):
    """削除リクエストの保存・取得・削除に失敗した."""

    pass


class DeletionRequestAlreadyExistsError(DeletionRequestRepositoryError):
    """同じユーザーの削除リクエストが既に存在する."""

    pass


class DeletionRequestRepository(ABC):
    """削除リクエストリポジトリのインターフェース.

    ユーザーごとに最大1件であることはリポジトリ側で保証する。
    """

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> DeletionRequest | None:
        """ユーザーIDで検索する（存在しない場合はNone）."""
        pass

    @abstractmethod
    def insert(self, request: DeletionRequest) -> DeletionRequest:
        """削除リクエストを登録し、ID付きのリクエストを返す."""
        pass

    @abstractmethod
    def delete(self, request: DeletionRequest) -> None:
        """削除リクエストをIDで削除する."""
        pass
