"""プロバイダー実装."""
from .cognito_identity_provider import CognitoIdentityProvider
from .in_memory_identity_provider import InMemoryIdentityProvider
from .observable_identity_provider import ObservableIdentityProvider
from .supabase_identity_provider import SupabaseIdentityProvider
from .threading_scheduler import ThreadingScheduler

__all__ = [
    "CognitoIdentityProvider",
    "InMemoryIdentityProvider",
    "ObservableIdentityProvider",
    "SupabaseIdentityProvider",
    "ThreadingScheduler",
]
