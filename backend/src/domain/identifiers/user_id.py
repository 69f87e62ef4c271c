"""ユーザー識別子."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """認証基盤が発行するユーザーID.

    Supabase では auth.users.id、Cognito では sub 属性の値。
    削除リクエストはこの値で一意になる。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")
        if self.value != self.value.strip():
            raise ValueError(f"UserId must not have surrounding whitespace: {self.value!r}")

    def __str__(self) -> str:
        return self.value
