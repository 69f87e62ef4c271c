"""削除管理画面の表示内容を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DeletionViewModel:
    """削除リクエストと現在時刻から導出される表示内容."""

    has_pending_request: bool
    requested_at: datetime
    deletion_date: datetime
    requested_at_display: str
    deletion_date_display: str
    days_remaining: int
    message: str
    show_confirm: bool
    show_cancel: bool

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.days_remaining < 0:
            raise ValueError("days_remaining must not be negative")
        if self.show_confirm and self.show_cancel:
            raise ValueError("Confirm and cancel cannot be shown together")
