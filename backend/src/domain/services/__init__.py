"""ドメインサービスモジュール."""
from .deletion_lifecycle_service import DeletionLifecycleService

__all__ = [
    "DeletionLifecycleService",
]
