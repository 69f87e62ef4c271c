"""アカウント削除リクエストユースケース."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from src.domain.entities import DeletionRequest, Session
from src.domain.ports import DeletionRequestRepository
from src.domain.services import DeletionLifecycleService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountDeletionResult:
    """アカウント削除リクエスト結果."""

    request: DeletionRequest
    days_remaining: int


class RequestAccountDeletionUseCase:
    """アカウント削除リクエストユースケース."""

    def __init__(self, repository: DeletionRequestRepository) -> None:
        """初期化."""
        self._repository = repository

    def execute(self, session: Session, now: datetime | None = None) -> AccountDeletionResult:
        """猶予期間付きのアカウント削除をリクエストする.

        Args:
            session: ログイン中ユーザーのセッション
            now: リクエスト日時（省略時は現在時刻）

        Returns:
            登録されたリクエストと残り日数

        Raises:
            DeletionRequestAlreadyExistsError: 既にリクエスト済みの場合
            DeletionRequestRepositoryError: 登録に失敗した場合
        """
        if now is None:
            now = datetime.now(timezone.utc)

        request = DeletionRequest.create(session.user_id, session.email, now)
        stored = self._repository.insert(request)
        logger.info("Account deletion requested: %s (scheduled %s)", session.user_id, stored.deletion_date.isoformat())

        return AccountDeletionResult(
            request=stored,
            days_remaining=DeletionLifecycleService.days_remaining(stored.deletion_date, now),
        )
