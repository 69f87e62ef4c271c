"""削除リクエスト取得ユースケース."""
from src.domain.entities import DeletionRequest
from src.domain.identifiers import UserId
from src.domain.ports import DeletionRequestRepository


class GetDeletionRequestUseCase:
    """削除リクエスト取得ユースケース."""

    def __init__(self, repository: DeletionRequestRepository) -> None:
        """初期化."""
        self._repository = repository

    def execute(self, user_id: UserId) -> DeletionRequest | None:
        """ユーザーの削除リクエストを取得する.

        未申請は正常系として None を返す。

        Raises:
            DeletionRequestRepositoryError: 取得に失敗した場合
        """
        return self._repository.find_by_user_id(user_id)
