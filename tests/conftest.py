# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - FakeSupabase: records PostgREST builder chains and returns canned data,
#   so services can be tested without a database
# - API client fixtures with auth and database dependencies overridden
# =============================================================================

import os
from types import SimpleNamespace
from typing import Any
from uuid import UUID

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length-for-hs256")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from postgrest.exceptions import APIError


USER_ID = "7d3f2a4e-1b5c-4e8a-9f0d-2c6b8a1e4f37"
CATEGORY_ID = "11111111-1111-4111-8111-111111111111"
PRODUCT_ID = "22222222-2222-4222-8222-222222222222"
CUSTOMER_ID = "33333333-3333-4333-8333-333333333333"
ORDER_ID = "44444444-4444-4444-8444-444444444444"
ITEM_ID = "55555555-5555-4555-8555-555555555555"


def api_error(message: str, code: str = "23505") -> APIError:
    """An APIError shaped like the ones PostgREST returns."""
    return APIError({"message": message, "code": code, "hint": None, "details": None})


# =============================================================================
# Fake Supabase Client
# =============================================================================

class FakeQuery:
    """One table(...) builder chain. Every method returns self, like postgrest's builders."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.columns: str | None = None
        self.payload: Any = None
        self.options: dict[str, Any] = {}
        self.filters: list[tuple[str, Any]] = []
        self.orders: list[tuple[str, bool]] = []
        self.is_single = False

    def select(self, columns: str = "*"):
        self.op = "select"
        self.columns = columns
        return self

    def insert(self, rows):
        self.op = "insert"
        self.payload = rows
        return self

    def upsert(self, rows, **options):
        self.op = "upsert"
        self.payload = rows
        self.options = options
        return self

    def update(self, payload):
        self.op = "update"
        self.payload = payload
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column: str, value: Any):
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False):
        self.orders.append((column, desc))
        return self

    def limit(self, count: int):
        return self

    def single(self):
        self.is_single = True
        return self

    def execute(self):
        self.db.queries.append(self)
        response = self.db.responses.get((self.table, self.op))
        if isinstance(response, Exception):
            raise response
        return SimpleNamespace(data=response)


class FakeSupabase:
    """
    Stand-in for supabase.Client.

    Configure with respond(table, op, data_or_exception); inspect `queries`.
    """

    def __init__(self):
        self.responses: dict[tuple[str, str], Any] = {}
        self.queries: list[FakeQuery] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def respond(self, table: str, op: str, data: Any) -> "FakeSupabase":
        self.responses[(table, op)] = data
        return self

    def calls(self, table: str, op: str | None = None) -> list[FakeQuery]:
        return [q for q in self.queries if q.table == table and (op is None or q.op == op)]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def db():
    """A fresh fake Supabase client."""
    return FakeSupabase()


@pytest.fixture
def sample_category():
    return {
        "id": CATEGORY_ID,
        "name": "Grooming",
        "description": "Pet grooming supplies and tools",
        "created_at": "2024-01-15T10:00:00+00:00",
        "updated_at": "2024-01-15T10:00:00+00:00",
    }


@pytest.fixture
def sample_products():
    """Two products as PostgREST returns them with the categories embed."""
    return [
        {
            "id": PRODUCT_ID,
            "name": "Pet Shampoo",
            "description": "Hypoallergenic pet shampoo, 500ml",
            "category_id": CATEGORY_ID,
            "sku": "GROOM-001",
            "price": 19.99,
            "cost": 8.0,
            "stock": 75,
            "min_stock": 15,
            "unit": "unit",
            "status": "active",
            "categories": {"id": CATEGORY_ID, "name": "Grooming"},
        },
        {
            "id": "22222222-2222-4222-8222-222222222223",
            "name": "Dental Chews",
            "description": "Dental health chews for dogs, 30-pack",
            "category_id": None,
            "sku": "TREAT-001",
            "price": 24.99,
            "cost": 12.0,
            "stock": 60,
            "min_stock": 10,
            "unit": "pack",
            "status": "discontinued",
            "categories": None,
        },
    ]


@pytest.fixture
def sample_customers():
    return [
        {"id": CUSTOMER_ID, "name": "Emily Davis", "email": "emily.davis@email.com",
         "phone": "555-0104", "city": "Springfield", "status": "active"},
        {"id": "33333333-3333-4333-8333-333333333334", "name": "John Smith",
         "email": "john.smith@email.com", "phone": "555-0101", "city": "Chicago",
         "status": "inactive"},
    ]


@pytest.fixture
def sample_order():
    """An order fetched with its customer and lines embedded."""
    return {
        "id": ORDER_ID,
        "order_number": "ORD-2024-001",
        "customer_id": CUSTOMER_ID,
        "total_amount": 156.97,
        "discount": 0,
        "tax": 12.56,
        "status": "completed",
        "payment_status": "paid",
        "payment_method": "credit_card",
        "notes": None,
        "customers": {"id": CUSTOMER_ID, "name": "Emily Davis"},
        "order_items": [
            {"id": ITEM_ID, "order_id": ORDER_ID, "product_id": PRODUCT_ID,
             "product_name": "Pet Shampoo", "quantity": 2, "unit_price": 19.99,
             "subtotal": 39.98},
        ],
    }


@pytest.fixture
def auth_user():
    from app.auth.models import AuthUser
    return AuthUser(id=UUID(USER_ID), email="admin@example.com", role="authenticated",
                    access_token="user-token")


@pytest.fixture
def client(db, auth_user):
    """TestClient acting as a signed-in user against the fake database."""
    from fastapi.testclient import TestClient

    from app.auth import get_current_user
    from app.dependencies import get_db
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: auth_user
    app.dependency_overrides[get_db] = lambda: db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client():
    """TestClient with real auth dependencies."""
    from fastapi.testclient import TestClient

    from app.main import app

    app.dependency_overrides.clear()
    with TestClient(app) as test_client:
        yield test_client
