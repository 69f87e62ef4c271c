"""アカウント削除ライフサイクルのドメインサービス."""
from datetime import datetime, timedelta, timezone, tzinfo

from ..entities import GRACE_PERIOD, GRACE_PERIOD_DAYS, DeletionRequest
from ..value_objects import DeletionViewModel

_ONE_DAY = timedelta(days=1)


class DeletionLifecycleService:
    """削除リクエストと現在時刻から表示内容を導出するサービス.

    残り日数は初回表示・定期更新ともに切り捨てで計算する。
    """

    GRACE_PERIOD_DAYS = GRACE_PERIOD_DAYS
    DATE_FORMAT = "%Y-%m-%d"

    PREVIEW_MESSAGE = f"If you confirm, your account will be deleted in {GRACE_PERIOD_DAYS} days."
    DUE_TODAY_MESSAGE = "Your account is scheduled for deletion today."

    @staticmethod
    def days_remaining(deletion_date: datetime, now: datetime | None = None) -> int:
        """削除予定日時までの残り日数（切り捨て、0未満にはならない）を返す."""
        if now is None:
            now = datetime.now(timezone.utc)
        remaining = deletion_date - now
        if remaining <= timedelta(0):
            return 0
        return remaining // _ONE_DAY

    @staticmethod
    def message_for(days_remaining: int) -> str:
        """残り日数に応じたメッセージを返す."""
        if days_remaining <= 0:
            return DeletionLifecycleService.DUE_TODAY_MESSAGE
        unit = "day" if days_remaining == 1 else "days"
        return f"Your account will be deleted in {days_remaining} {unit}."

    @staticmethod
    def format_date(value: datetime, display_tz: tzinfo = timezone.utc) -> str:
        """表示用の日付文字列に変換する."""
        return value.astimezone(display_tz).strftime(DeletionLifecycleService.DATE_FORMAT)

    @classmethod
    def build_view_model(
        cls,
        request: DeletionRequest | None,
        now: datetime | None = None,
        display_tz: tzinfo = timezone.utc,
    ) -> DeletionViewModel:
        """削除リクエストの有無から表示内容を導出する.

        Args:
            request: 削除リクエスト（未申請の場合はNone）
            now: 現在時刻
            display_tz: 日付表示に使うタイムゾーン

        Returns:
            表示内容
        """
        if now is None:
            now = datetime.now(timezone.utc)

        if request is None:
            # 未申請時は確定した場合の削除予定日をプレビューする（保存はしない）
            deletion_date = now + GRACE_PERIOD
            return DeletionViewModel(
                has_pending_request=False,
                requested_at=now,
                deletion_date=deletion_date,
                requested_at_display=cls.format_date(now, display_tz),
                deletion_date_display=cls.format_date(deletion_date, display_tz),
                days_remaining=cls.GRACE_PERIOD_DAYS,
                message=cls.PREVIEW_MESSAGE,
                show_confirm=True,
                show_cancel=False,
            )

        days = cls.days_remaining(request.deletion_date, now)
        return DeletionViewModel(
            has_pending_request=True,
            requested_at=request.requested_at,
            deletion_date=request.deletion_date,
            requested_at_display=cls.format_date(request.requested_at, display_tz),
            deletion_date_display=cls.format_date(request.deletion_date, display_tz),
            days_remaining=days,
            message=cls.message_for(days),
            show_confirm=False,
            show_cancel=days > 0,
        )
