from .base import AbstractContentStore
from .supabase_store import SupabaseContentStore

__all__ = ["AbstractContentStore", "SupabaseContentStore"]
