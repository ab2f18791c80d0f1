# =============================================================================
# tests/test_schema.py - Migration & Seed SQL Tests
# =============================================================================
# Static checks on the SQL files; no database needed.
#
# Run with: pytest tests/test_schema.py -v
# =============================================================================

import re
from pathlib import Path

import pytest

SUPABASE_DIR = Path(__file__).resolve().parent.parent / "supabase"
SCHEMA = (SUPABASE_DIR / "migrations" / "001_initial_schema.sql").read_text()
SEED = (SUPABASE_DIR / "seed.sql").read_text()

TABLES = ["customers", "categories", "products", "orders", "order_items"]


def table_body(name: str) -> str:
    match = re.search(rf"CREATE TABLE public\.{name} \((.*?)\n\);", SCHEMA, re.S)
    assert match, f"table {name} not found"
    return match.group(1)


class TestTables:
    """Tests for the table definitions."""

    @pytest.mark.parametrize("table", TABLES)
    def test_uuid_primary_key(self, table):
        assert "id UUID PRIMARY KEY DEFAULT gen_random_uuid()" in table_body(table)

    @pytest.mark.parametrize("table,column", [
        ("customers", "email TEXT UNIQUE"),
        ("categories", "name TEXT NOT NULL UNIQUE"),
        ("products", "sku TEXT UNIQUE NOT NULL"),
        ("orders", "order_number TEXT UNIQUE NOT NULL"),
    ])
    def test_unique_columns(self, table, column):
        assert column in table_body(table)

    def test_foreign_keys(self):
        assert "REFERENCES public.categories(id) ON DELETE SET NULL" in table_body("products")
        assert "REFERENCES public.customers(id) ON DELETE SET NULL" in table_body("orders")
        items = table_body("order_items")
        assert "REFERENCES public.orders(id) ON DELETE CASCADE" in items
        assert "REFERENCES public.products(id) ON DELETE SET NULL" in items

    def test_status_checks(self):
        assert "CHECK (status IN ('active', 'inactive', 'discontinued'))" in table_body("products")
        assert "CHECK (status IN ('active', 'inactive'))" in table_body("customers")
        orders = table_body("orders")
        assert "CHECK (status IN ('pending', 'processing', 'completed', 'cancelled'))" in orders
        assert "CHECK (payment_status IN ('unpaid', 'partial', 'paid', 'refunded'))" in orders

    def test_quantity_must_be_positive(self):
        assert "CHECK (quantity > 0)" in table_body("order_items")

    def test_order_items_have_no_updated_at(self):
        assert "updated_at" not in table_body("order_items")


class TestTriggersAndSecurity:
    """Tests for updated_at triggers and row level security."""

    @pytest.mark.parametrize("table", ["customers", "categories", "products", "orders"])
    def test_updated_at_trigger(self, table):
        assert f"CREATE TRIGGER update_{table}_updated_at\n  BEFORE UPDATE ON public.{table}" in SCHEMA

    @pytest.mark.parametrize("table", TABLES)
    def test_rls_enabled_for_authenticated(self, table):
        assert f"ALTER TABLE public.{table} ENABLE ROW LEVEL SECURITY;" in SCHEMA
        assert re.search(
            rf"ON public\.{table}\n  FOR ALL USING \(auth\.role\(\) = 'authenticated'\);",
            SCHEMA,
        )


class TestSeedSql:
    """Tests for supabase/seed.sql."""

    def test_conflict_handling(self):
        assert "ON CONFLICT (name) DO NOTHING" in SEED
        assert "ON CONFLICT (sku) DO UPDATE SET" in SEED

    @pytest.mark.parametrize("table", TABLES)
    def test_inserts_every_table(self, table):
        assert f"INSERT INTO {table} (" in SEED


def test_schema_has_no_upserts():
    assert "ON CONFLICT" not in SCHEMA
