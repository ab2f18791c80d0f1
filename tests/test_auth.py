# =============================================================================
# tests/test_auth.py - Authentication & Client Scoping Tests
# =============================================================================
# Tokens are signed with the HS256 test secret from conftest.
#
# Run with: pytest tests/test_auth.py -v
# =============================================================================

import time
from unittest.mock import MagicMock, patch

from jose import jwt

from app.config import settings
from app.dependencies import get_db
from lib.supabase_client import SupabaseClient
from tests.conftest import USER_ID


def make_token(**overrides) -> str:
    claims = {
        "sub": USER_ID,
        "email": "admin@example.com",
        "role": "authenticated",
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    claims.update(overrides)
    return jwt.encode(claims, settings.SUPABASE_JWT_SECRET, algorithm="HS256")


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestTokenVerification:
    """Tests for get_current_user via /api/v1/auth."""

    def test_me(self, anonymous_client):
        response = anonymous_client.get("/api/v1/auth/me", headers=bearer(make_token()))

        assert response.status_code == 200
        assert response.json() == {"id": USER_ID, "email": "admin@example.com", "role": "authenticated"}

    def test_verify(self, anonymous_client):
        response = anonymous_client.get("/api/v1/auth/verify", headers=bearer(make_token()))

        assert response.json()["valid"] is True
        assert response.json()["user_id"] == USER_ID

    def test_expired_token(self, anonymous_client):
        token = make_token(exp=int(time.time()) - 60)

        response = anonymous_client.get("/api/v1/auth/me", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_wrong_audience(self, anonymous_client):
        response = anonymous_client.get("/api/v1/auth/me", headers=bearer(make_token(aud="anon")))

        assert response.status_code == 401

    def test_wrong_secret(self, anonymous_client):
        token = jwt.encode(
            {"sub": USER_ID, "aud": "authenticated", "exp": int(time.time()) + 60},
            "some-other-secret",
            algorithm="HS256",
        )

        response = anonymous_client.get("/api/v1/auth/me", headers=bearer(token))

        assert response.status_code == 401

    def test_malformed_subject(self, anonymous_client):
        response = anonymous_client.get("/api/v1/auth/me", headers=bearer(make_token(sub="not-a-uuid")))

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token: malformed user ID"


class TestClientScoping:
    """Requests run as the signed-in user, not the service role."""

    def test_get_db_uses_the_users_token(self, auth_user):
        with patch.object(SupabaseClient, "for_access_token") as for_access_token:
            get_db(auth_user)

        for_access_token.assert_called_once_with("user-token")

    def test_for_access_token_forwards_jwt(self):
        fake_client = MagicMock()
        with patch("lib.supabase_client.create_client", return_value=fake_client) as create:
            client = SupabaseClient.for_access_token("user-token")

        create.assert_called_once_with(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
        fake_client.postgrest.auth.assert_called_once_with("user-token")
        assert client is fake_client

    def test_access_token_is_not_serialized(self, auth_user):
        assert "access_token" not in auth_user.model_dump()


class TestReadiness:
    """Tests for /api/v1/health/ready."""

    def test_ready(self, anonymous_client):
        with patch.object(SupabaseClient, "get_client", return_value=MagicMock()):
            response = anonymous_client.get("/api/v1/health/ready")

        assert response.json()["status"] == "ready"
        assert response.json()["checks"]["database"] == "healthy"

    def test_degraded(self, anonymous_client):
        service = MagicMock()
        service.table.side_effect = RuntimeError("connection refused")
        with patch.object(SupabaseClient, "get_client", return_value=service):
            response = anonymous_client.get("/api/v1/health/ready")

        assert response.json()["status"] == "degraded"
        assert response.json()["checks"]["database"].startswith("unhealthy")
