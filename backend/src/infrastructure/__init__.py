"""インフラストラクチャ層モジュール."""
from .clients import SupabaseApiError, SupabaseClient
from .providers import (
    CognitoIdentityProvider,
    InMemoryIdentityProvider,
    SupabaseIdentityProvider,
    ThreadingScheduler,
)
from .repositories import (
    DynamoDBDeletionRequestRepository,
    InMemoryDeletionRequestRepository,
    SupabaseDeletionRequestRepository,
)

__all__ = [
    "CognitoIdentityProvider",
    "DynamoDBDeletionRequestRepository",
    "InMemoryDeletionRequestRepository",
    "InMemoryIdentityProvider",
    "SupabaseApiError",
    "SupabaseClient",
    "SupabaseDeletionRequestRepository",
    "SupabaseIdentityProvider",
    "ThreadingScheduler",
]
