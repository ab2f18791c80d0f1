# =============================================================================
# tests/test_forms.py - Dialog Form Parsing Tests
# =============================================================================
# Run with: pytest tests/test_forms.py -v
# =============================================================================

import json

import pytest

from core.forms import (
    FormError,
    parse_category_form,
    parse_customer_form,
    parse_order_form,
    parse_order_item_form,
    parse_product_form,
)


# =============================================================================
# Categories
# =============================================================================

class TestCategoryForm:
    """Tests for parse_category_form."""

    def test_name_and_description(self):
        data = parse_category_form({"name": "Garden", "description": "Outdoor tools"})

        assert data.name == "Garden"
        assert data.description == "Outdoor tools"

    def test_blank_description_becomes_none(self):
        data = parse_category_form({"name": "Garden", "description": "   "})

        assert data.description is None

    def test_name_is_required(self):
        with pytest.raises(FormError) as exc_info:
            parse_category_form({"name": "", "description": "x"})

        assert exc_info.value.message == "Name is required"
        assert exc_info.value.field == "name"


# =============================================================================
# Products
# =============================================================================

class TestProductForm:
    """Tests for parse_product_form."""

    def test_full_form(self):
        data = parse_product_form({
            "name": "Wireless Mouse",
            "sku": "WM-001",
            "price": "29.99",
            "cost": "12.50",
            "stock": "100",
            "min_stock": "20",
            "unit": "box",
            "category_id": "cat-1",
            "status": "inactive",
        })

        assert data.price == 29.99
        assert data.cost == 12.5
        assert data.stock == 100
        assert data.min_stock == 20
        assert data.unit == "box"
        assert data.category_id == "cat-1"
        assert data.status == "inactive"

    def test_defaults_for_optional_fields(self):
        data = parse_product_form({"name": "Mouse", "sku": "M-1", "price": "5", "stock": "0"})

        assert data.min_stock == 10
        assert data.unit == "unit"
        assert data.status == "active"
        assert data.cost is None
        assert data.description is None

    def test_none_option_clears_category(self):
        data = parse_product_form({
            "name": "Mouse", "sku": "M-1", "price": "5", "stock": "1", "category_id": "none",
        })

        assert data.category_id is None

    @pytest.mark.parametrize("missing,message", [
        ("name", "Name is required"),
        ("sku", "Sku is required"),
        ("price", "Price is required"),
        ("stock", "Stock is required"),
    ])
    def test_required_fields(self, missing, message):
        form = {"name": "Mouse", "sku": "M-1", "price": "5", "stock": "1"}
        form[missing] = ""

        with pytest.raises(FormError) as exc_info:
            parse_product_form(form)

        assert exc_info.value.message == message

    def test_unreadable_number(self):
        with pytest.raises(FormError) as exc_info:
            parse_product_form({"name": "Mouse", "sku": "M-1", "price": "abc", "stock": "1"})

        assert exc_info.value.message == "Price must be a number"

    def test_negative_values_are_left_to_the_database(self):
        data = parse_product_form({"name": "Mouse", "sku": "M-1", "price": "-1", "stock": "-5"})

        assert data.price == -1
        assert data.stock == -5


# =============================================================================
# Customers
# =============================================================================

class TestCustomerForm:
    """Tests for parse_customer_form."""

    def test_blank_email_becomes_none(self):
        data = parse_customer_form({"name": "Jane", "email": "", "city": "Austin"})

        assert data.email is None
        assert data.city == "Austin"
        assert data.status == "active"

    def test_name_is_required(self):
        with pytest.raises(FormError, match="Name is required"):
            parse_customer_form({"email": "jane@example.com"})


# =============================================================================
# Orders
# =============================================================================

class TestOrderForm:
    """Tests for parse_order_form and parse_order_item_form."""

    def test_header_defaults(self):
        data = parse_order_form({"order_number": "ORD-1"})

        assert data.total_amount == 0
        assert data.discount == 0
        assert data.tax == 0
        assert data.status == "pending"
        assert data.payment_status == "unpaid"
        assert data.customer_id is None
        assert data.items == []

    def test_order_number_is_required(self):
        with pytest.raises(FormError, match="Order number is required"):
            parse_order_form({"total_amount": "10"})

    def test_items_from_json(self):
        items = [
            {"product_id": "p-1", "product_name": "Mouse", "quantity": 2, "unit_price": 10.5},
            {"product_id": "none", "product_name": "Cable", "quantity": 1, "unit_price": 3, "subtotal": 2.5},
        ]

        data = parse_order_form({"order_number": "ORD-1", "items": json.dumps(items)})

        assert len(data.items) == 2
        assert data.items[0].subtotal == 21.0
        assert data.items[1].product_id is None
        assert data.items[1].subtotal == 2.5

    @pytest.mark.parametrize("raw", ["not json", '{"a": 1}', "[1, 2]"])
    def test_items_must_be_a_json_array(self, raw):
        with pytest.raises(FormError, match="Items must be a JSON array"):
            parse_order_form({"order_number": "ORD-1", "items": raw})

    def test_item_requires_product_name(self):
        with pytest.raises(FormError, match="Product name is required"):
            parse_order_item_form({"quantity": "1", "unit_price": "2"})

    def test_item_quantity_must_be_whole(self):
        with pytest.raises(FormError, match="Quantity must be a number"):
            parse_order_item_form({"product_name": "Mouse", "quantity": "1.5", "unit_price": "2"})
