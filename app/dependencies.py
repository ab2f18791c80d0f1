# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends
from supabase import Client

from app.auth import AuthUser, get_current_user
from lib.supabase_client import SupabaseClient


def get_db(user: AuthUser = Depends(get_current_user)) -> Client:
    """
    Get a Supabase client acting as the authenticated user.

    A new client per request; RLS decides what the user can see and change.
    """
    return SupabaseClient.for_access_token(user.access_token)


# Type alias for dependency injection
DbDep = Annotated[Client, Depends(get_db)]
