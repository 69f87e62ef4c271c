"""アカウント削除リクエストエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone

from ..enums import DeletionRequestStatus
from ..identifiers import DeletionRequestId, UserId
from ..value_objects import Email

GRACE_PERIOD_DAYS = 10
GRACE_PERIOD = timedelta(days=GRACE_PERIOD_DAYS)


@dataclass(frozen=True)
class DeletionRequest:
    """アカウント削除リクエスト.

    1ユーザーにつき最大1件。キャンセル時はステータス遷移ではなく
    レコードごと削除される。
    """

    user_id: UserId
    email: Email
    requested_at: datetime
    deletion_date: datetime
    status: DeletionRequestStatus = DeletionRequestStatus.PENDING
    request_id: DeletionRequestId | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.requested_at.tzinfo is None or self.deletion_date.tzinfo is None:
            raise ValueError("DeletionRequest timestamps must be timezone-aware")

    @classmethod
    def create(cls, user_id: UserId, email: Email, now: datetime | None = None) -> DeletionRequest:
        """猶予期間付きの削除リクエストを作成する（未登録状態）."""
        requested_at = now or datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            email=email,
            requested_at=requested_at,
            deletion_date=requested_at + GRACE_PERIOD,
        )

    def with_id(self, request_id: DeletionRequestId) -> DeletionRequest:
        """リポジトリが払い出したIDを付与したコピーを返す."""
        return replace(self, request_id=request_id)

    def is_persisted(self) -> bool:
        """登録済みかどうか."""
        return self.request_id is not None
