# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field
from uuid import UUID
from typing import Optional


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a Supabase JWT.

    The raw access token is kept so that database calls can be made as this
    user (RLS policies see the "authenticated" role).
    """
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: Optional[str] = None
    role: Optional[str] = None
    access_token: str = Field(default="", repr=False, exclude=True)


class UserResponse(BaseModel):
    """Identity returned by /auth/me."""
    id: UUID
    email: Optional[str] = None
    role: Optional[str] = None
