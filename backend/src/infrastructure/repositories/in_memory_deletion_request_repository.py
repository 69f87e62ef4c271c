"""インメモリ削除リクエストリポジトリ実装."""
from src.domain.entities import DeletionRequest
from src.domain.identifiers import DeletionRequestId, UserId
from src.domain.ports import DeletionRequestAlreadyExistsError, DeletionRequestRepository


class InMemoryDeletionRequestRepository(DeletionRequestRepository):
    """インメモリ削除リクエストリポジトリ（ローカル開発・テスト用）."""

    def __init__(self) -> None:
        """初期化."""
        self._requests: dict[str, DeletionRequest] = {}

    def find_by_user_id(self, user_id: UserId) -> DeletionRequest | None:
        """ユーザーIDで検索する."""
        return self._requests.get(user_id.value)

    def insert(self, request: DeletionRequest) -> DeletionRequest:
        """削除リクエストを登録する."""
        if request.user_id.value in self._requests:
            raise DeletionRequestAlreadyExistsError(
                f"Deletion request already exists for user: {request.user_id}"
            )
        stored = request.with_id(DeletionRequestId.generate())
        self._requests[request.user_id.value] = stored
        return stored

    def delete(self, request: DeletionRequest) -> None:
        """削除リクエストをIDで削除する."""
        for key, stored in list(self._requests.items()):
            if stored.request_id == request.request_id:
                del self._requests[key]
                return

    def count(self) -> int:
        """登録件数を返す."""
        return len(self._requests)
