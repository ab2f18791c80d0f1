# =============================================================================
# tests/test_listing.py - List Page Search & Filter Tests
# =============================================================================
# Run with: pytest tests/test_listing.py -v
# =============================================================================

from core.listing import (
    CATEGORY_SEARCH_FIELDS,
    CUSTOMER_SEARCH_FIELDS,
    PRODUCT_SEARCH_FIELDS,
    build_list_page,
    filter_rows,
    search_rows,
)
from core.models import ListResult
from lib.utils import contains_ignore_case


PRODUCTS = [
    {"name": "Wireless Mouse", "sku": "WM-001", "description": None, "category_name": "Electronics", "status": "active"},
    {"name": "Desk Lamp", "sku": "DL-7", "description": "LED, dimmable", "category_name": None, "status": "inactive"},
    {"name": "Mouse Pad", "sku": "MP-2", "description": "Cloth", "category_name": "Accessories", "status": "active"},
]


class TestSearchRows:
    """Tests for search_rows."""

    def test_case_insensitive_substring(self):
        rows = search_rows(PRODUCTS, "mouse", PRODUCT_SEARCH_FIELDS)

        assert [r["sku"] for r in rows] == ["WM-001", "MP-2"]

    def test_matches_any_field(self):
        assert [r["sku"] for r in search_rows(PRODUCTS, "dl-", PRODUCT_SEARCH_FIELDS)] == ["DL-7"]
        assert [r["sku"] for r in search_rows(PRODUCTS, "dimm", PRODUCT_SEARCH_FIELDS)] == ["DL-7"]
        assert [r["sku"] for r in search_rows(PRODUCTS, "ELECTRON", PRODUCT_SEARCH_FIELDS)] == ["WM-001"]

    def test_blank_term_keeps_everything(self):
        assert search_rows(PRODUCTS, "", PRODUCT_SEARCH_FIELDS) == PRODUCTS
        assert search_rows(PRODUCTS, "   ", PRODUCT_SEARCH_FIELDS) == PRODUCTS
        assert search_rows(PRODUCTS, None, PRODUCT_SEARCH_FIELDS) == PRODUCTS

    def test_unlisted_fields_are_not_searched(self):
        rows = [{"name": "Garden", "description": "Tools", "secret": "mouse"}]

        assert search_rows(rows, "mouse", CATEGORY_SEARCH_FIELDS) == []

    def test_customer_search_by_city(self):
        rows = [
            {"name": "Jane", "email": None, "phone": "555", "city": "Austin"},
            {"name": "Bob", "email": "bob@x.io", "phone": None, "city": "Boston"},
        ]

        assert [r["name"] for r in search_rows(rows, "aus", CUSTOMER_SEARCH_FIELDS)] == ["Jane"]


class TestFilterRows:
    """Tests for filter_rows."""

    def test_exact_match(self):
        rows = filter_rows(PRODUCTS, status="inactive")

        assert [r["sku"] for r in rows] == ["DL-7"]

    def test_none_filters_are_ignored(self):
        assert filter_rows(PRODUCTS, status=None) == PRODUCTS


class TestBuildListPage:
    """Tests for build_list_page."""

    def test_search_and_filter_together(self):
        page = build_list_page(ListResult(data=PRODUCTS), "mouse", PRODUCT_SEARCH_FIELDS, status="active")

        assert page.total == 2
        assert page.error is None

    def test_failed_fetch_gives_empty_page(self):
        page = build_list_page(ListResult(data=[], error="permission denied"), "mouse", PRODUCT_SEARCH_FIELDS)

        assert page.data == []
        assert page.total == 0
        assert page.error == "permission denied"


class TestContainsIgnoreCase:
    """Tests for lib.utils.contains_ignore_case."""

    def test_none_never_matches(self):
        assert contains_ignore_case(None, "") is False

    def test_numbers_compare_as_text(self):
        assert contains_ignore_case(19.99, "19.9") is True
