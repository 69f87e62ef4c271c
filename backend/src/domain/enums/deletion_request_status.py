"""削除リクエストステータスの列挙型."""
from enum import Enum


class DeletionRequestStatus(str, Enum):
    """削除リクエストステータス.

    キャンセルはレコードの物理削除で表現するため、PENDING 以外は存在しない。
    """

    PENDING = "pending"
