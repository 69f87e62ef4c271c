"""アカウント削除キャンセルユースケース."""
import logging

from src.domain.entities import DeletionRequest
from src.domain.ports import DeletionRequestRepository

logger = logging.getLogger(__name__)


class CancelAccountDeletionUseCase:
    """アカウント削除キャンセルユースケース."""

    def __init__(self, repository: DeletionRequestRepository) -> None:
        """初期化."""
        self._repository = repository

    def execute(self, request: DeletionRequest) -> None:
        """削除リクエストを物理削除する.

        Raises:
            ValueError: 未登録のリクエストが渡された場合
            DeletionRequestRepositoryError: 削除に失敗した場合
        """
        if not request.is_persisted():
            raise ValueError("DeletionRequest has not been stored yet")
        self._repository.delete(request)
        logger.info("Account deletion cancelled: %s", request.user_id)
