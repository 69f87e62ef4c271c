"""アカウント削除予約ポータルのパッケージ."""
from . import domain

# infrastructure は boto3 / requests に依存するため、
# 必要な場所で明示的にインポートする
# from . import infrastructure

__all__ = ["domain"]
