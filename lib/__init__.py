# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client factory (service and anon clients)
# - utils.py: Shared helpers (UUID normalization, slugs, calendar dates)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import generate_slug, normalize_uuid, one_month_before

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "generate_slug",
    "normalize_uuid",
    "one_month_before",
]
