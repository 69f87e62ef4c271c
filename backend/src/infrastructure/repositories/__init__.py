"""リポジトリ実装モジュール."""
from .dynamodb_deletion_request_repository import DynamoDBDeletionRequestRepository
from .in_memory_deletion_request_repository import InMemoryDeletionRequestRepository
from .supabase_deletion_request_repository import SupabaseDeletionRequestRepository

__all__ = [
    "DynamoDBDeletionRequestRepository",
    "InMemoryDeletionRequestRepository",
    "SupabaseDeletionRequestRepository",
]
