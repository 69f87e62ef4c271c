"""認証セッションエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..identifiers import UserId
from ..value_objects import Email


@dataclass(frozen=True)
class Session:
    """認証基盤から受け取ったログイン中ユーザーのセッション."""

    user_id: UserId
    email: Email
    access_token: str = field(default="", repr=False)
    refresh_token: str | None = field(default=None, repr=False)

    def belongs_to(self, user_id: UserId) -> bool:
        """指定ユーザーのセッションかどうか."""
        return self.user_id == user_id
