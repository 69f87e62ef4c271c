"""ログインユーザーのメールアドレス."""
from __future__ import annotations

import re
from dataclasses import dataclass

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """削除リクエスト作成時点のメールアドレス.

    認証基盤が返した値をそのまま保持し、表示と削除リクエストの記録に使う。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("Email cannot be empty")
        if not _EMAIL_PATTERN.match(self.value):
            raise ValueError(f"Invalid email format: {self.value}")

    @classmethod
    def parse(cls, raw: str | None) -> Email:
        """認証基盤から受け取った文字列を前後空白を除いて生成する."""
        return cls((raw or "").strip())

    def masked(self) -> str:
        """ログ出力用にローカル部を伏せた文字列を返す."""
        local, _, domain = self.value.partition("@")
        return f"{local[:1]}***@{domain}"

    def __str__(self) -> str:
        return self.value
