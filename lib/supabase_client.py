# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns every Supabase client the application creates:
# - A singleton service_role client for server-side maintenance (seeding,
#   readiness checks). It bypasses Row Level Security.
# - Per-request clients bound to the caller's access token. Every admin
#   action runs through one of these so the RLS policies
#   ("authenticated" role only) apply.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   client = SupabaseClient.for_access_token(user.access_token)
#   client.table("categories").select("*").execute()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from postgrest.exceptions import APIError
from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while creating a Supabase client.

    Provides actionable error messages: what failed and how to fix it.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Factory for Supabase clients.

    All methods are class methods for easy access without instantiation.

    Example:
        # Server-side maintenance (bypasses RLS)
        admin = SupabaseClient.get_client()

        # Request on behalf of a signed-in user (RLS applies)
        client = SupabaseClient.for_access_token(token)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton service_role client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Only seeding and health checks use it.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase service client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def for_access_token(cls, access_token: str) -> Client:
        """
        Create a client that acts as the signed-in user.

        The anon key identifies the project; the user's JWT is forwarded to
        PostgREST so that auth.role() evaluates to 'authenticated' inside
        the RLS policies.

        Args:
            access_token: The Supabase access token from the Authorization header

        Returns:
            Client: A fresh client scoped to this user

        Raises:
            SupabaseClientError: If client creation fails
        """
        try:
            client = create_client(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to create Supabase client: {e}",
                code="CLIENT_INIT_FAILED",
                suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file"
            )

        client.postgrest.auth(access_token)
        logger.debug("Created user-scoped Supabase client")
        return client

    @classmethod
    def reset(cls) -> None:
        """Drop the cached service client (tests and key rotation)."""
        cls._instance = None

    @staticmethod
    def error_message(exc: Exception) -> str:
        """
        Extract the database driver's message from an exception, unmodified.

        PostgREST errors carry the Postgres message (e.g. 'duplicate key value
        violates unique constraint "products_sku_key"'); anything else falls
        back to str(exc).
        """
        if isinstance(exc, APIError) and exc.message:
            return exc.message
        return str(exc)
