# =============================================================================
# core/forms.py - Dialog Form Parsing
# =============================================================================
# Turns submitted form fields (urlencoded/multipart, or any mapping) into the
# entity input models.
#
# Rules:
# - blank optional text -> None (never "", UNIQUE columns would collide)
# - select references ("category_id", "customer_id", "product_id"):
#   "" or "none" -> None
# - numbers are parsed; blank optional numbers fall back to the dialog default
# - only the dialogs' required fields are checked. Ranges, statuses and
#   uniqueness are left to the database.
#
# Usage:
#   form = await request.form()
#   data = parse_product_form(form)   # raises FormError("Sku is required")
# =============================================================================

import json
from typing import Any, Callable, Mapping

from pydantic import BaseModel, ValidationError

from app.config import settings
from core.models.category import CategoryInput
from core.models.customer import CustomerInput, CustomerStatus
from core.models.order import OrderInput, OrderItemInput, OrderStatus, PaymentStatus
from core.models.product import ProductInput, ProductStatus

# Select value meaning "no selection"
NONE_OPTION = "none"


class FormError(ValueError):
    """A submitted form is missing a required field or has an unreadable value."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


# =============================================================================
# Field Readers
# =============================================================================

def _label(field: str) -> str:
    return field.replace("_", " ").capitalize()


def _raw(form: Mapping[str, Any], field: str) -> str | None:
    value = form.get(field)
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def text(
    form: Mapping[str, Any],
    field: str,
    required: bool = False,
    default: str | None = None,
) -> str | None:
    """Read a text field. Blank means missing."""
    value = _raw(form, field)
    if value is None:
        if required:
            raise FormError(f"{_label(field)} is required", field)
        return default
    return value


def reference(form: Mapping[str, Any], field: str) -> str | None:
    """Read a foreign-key select. The "none" option clears the reference."""
    value = _raw(form, field)
    if value is None or value == NONE_OPTION:
        return None
    return value


def _number(
    form: Mapping[str, Any],
    field: str,
    cast: Callable[[str], Any],
    required: bool,
    default: Any,
) -> Any:
    value = _raw(form, field)
    if value is None:
        if required:
            raise FormError(f"{_label(field)} is required", field)
        return default
    try:
        return cast(value.strip())
    except ValueError:
        raise FormError(f"{_label(field)} must be a number", field)


def decimal(
    form: Mapping[str, Any],
    field: str,
    required: bool = False,
    default: float | None = None,
) -> float | None:
    """Read a decimal field (prices, amounts)."""
    return _number(form, field, float, required, default)


def integer(
    form: Mapping[str, Any],
    field: str,
    required: bool = False,
    default: int | None = None,
) -> int | None:
    """Read a whole-number field (stock, quantity)."""
    return _number(form, field, int, required, default)


def _build(model: type[BaseModel], **values: Any) -> Any:
    try:
        return model(**values)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise FormError(f"{_label(field) or 'Form'}: {first.get('msg')}", field or None)


# =============================================================================
# Entity Forms
# =============================================================================

def parse_category_form(form: Mapping[str, Any]) -> CategoryInput:
    return _build(
        CategoryInput,
        name=text(form, "name", required=True),
        description=text(form, "description"),
    )


def parse_product_form(form: Mapping[str, Any]) -> ProductInput:
    """Product dialog fields; stock/min_stock/unit/status fall back to the dialog defaults."""
    return _build(
        ProductInput,
        name=text(form, "name", required=True),
        description=text(form, "description"),
        category_id=reference(form, "category_id"),
        sku=text(form, "sku", required=True),
        price=decimal(form, "price", required=True),
        cost=decimal(form, "cost"),
        stock=integer(form, "stock", required=True),
        min_stock=integer(form, "min_stock", default=settings.DEFAULT_MIN_STOCK),
        unit=text(form, "unit", default=settings.DEFAULT_UNIT),
        status=text(form, "status", default=ProductStatus.ACTIVE.value),
    )


def parse_customer_form(form: Mapping[str, Any]) -> CustomerInput:
    return _build(
        CustomerInput,
        name=text(form, "name", required=True),
        email=text(form, "email"),
        phone=text(form, "phone"),
        address=text(form, "address"),
        city=text(form, "city"),
        state=text(form, "state"),
        zip_code=text(form, "zip_code"),
        notes=text(form, "notes"),
        status=text(form, "status", default=CustomerStatus.ACTIVE.value),
    )


def parse_order_item_form(form: Mapping[str, Any]) -> OrderItemInput:
    return _build(
        OrderItemInput,
        product_id=reference(form, "product_id"),
        product_name=text(form, "product_name", required=True),
        quantity=integer(form, "quantity", required=True),
        unit_price=decimal(form, "unit_price", required=True),
        subtotal=decimal(form, "subtotal"),
    )


def _parse_items(form: Mapping[str, Any]) -> list[OrderItemInput]:
    raw = _raw(form, "items")
    if raw is None:
        return []
    try:
        rows = json.loads(raw)
    except json.JSONDecodeError:
        raise FormError("Items must be a JSON array", "items")
    if not isinstance(rows, list) or not all(isinstance(row, Mapping) for row in rows):
        raise FormError("Items must be a JSON array", "items")
    return [parse_order_item_form(row) for row in rows]


def parse_order_form(form: Mapping[str, Any]) -> OrderInput:
    """Order dialog fields. Lines arrive as a JSON array in the "items" field."""
    return _build(
        OrderInput,
        order_number=text(form, "order_number", required=True),
        customer_id=reference(form, "customer_id"),
        total_amount=decimal(form, "total_amount", default=0),
        discount=decimal(form, "discount", default=0),
        tax=decimal(form, "tax", default=0),
        status=text(form, "status", default=OrderStatus.PENDING.value),
        payment_status=text(form, "payment_status", default=PaymentStatus.UNPAID.value),
        payment_method=text(form, "payment_method"),
        notes=text(form, "notes"),
        items=_parse_items(form),
    )
