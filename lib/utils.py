# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Small helpers used across the application.
# =============================================================================

from datetime import datetime, timezone
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        category_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        category_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, the format PostgREST accepts for timestamptz."""
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Text Utilities
# =============================================================================

def contains_ignore_case(value: object, term: str) -> bool:
    """
    Case-insensitive substring test that tolerates non-string values.

    None never matches; numbers are compared by their string form.
    """
    if value is None:
        return False
    return term.lower() in str(value).lower()
