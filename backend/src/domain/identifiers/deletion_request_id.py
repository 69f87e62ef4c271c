"""削除リクエスト識別子の値オブジェクト."""
from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class DeletionRequestId:
    """削除リクエストの一意識別子.

    リポジトリが登録時に払い出す。Supabase では数値の主キーが返るため、
    文字列として保持する。
    """

    value: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.value:
            raise ValueError("DeletionRequestId cannot be empty")

    @classmethod
    def generate(cls) -> DeletionRequestId:
        """新しいDeletionRequestIdを生成する."""
        return cls(str(uuid.uuid4()))

    def __str__(self) -> str:
        """文字列表現."""
        return self.value
