# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client factory (service + user-scoped)
# - utils.py: Shared helpers (UUID normalization, timestamps, text matching)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import contains_ignore_case, normalize_uuid, utc_now_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "contains_ignore_case",
    "normalize_uuid",
    "utc_now_iso",
]
