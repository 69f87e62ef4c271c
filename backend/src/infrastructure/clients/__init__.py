"""外部APIクライアントモジュール."""
from .supabase_client import SupabaseApiError, SupabaseClient

__all__ = [
    "SupabaseApiError",
    "SupabaseClient",
]
