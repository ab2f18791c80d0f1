# =============================================================================
# core/dialogs.py - Create/Edit Dialogs
# =============================================================================
# Server-side counterpart of the admin panel's modal forms. A dialog:
# 1. opens in "create" mode (no entity) or "edit" mode (existing row), and
#    reports its title, description, pre-filled values and select options
# 2. takes the submitted form, parses it, and calls the create or update
#    action
# 3. reports {success, error, message, field}, where message is the toast shown on
#    success
#
# The only validation is the required fields; the database decides the rest.
#
# Usage:
#   dialog = ProductDialog(client)
#   state = dialog.open(product_row)                  # edit mode
#   result = dialog.submit(form, entity_id=product_row["id"])
# =============================================================================

import logging
from enum import Enum
from typing import Any, Callable, Mapping

from pydantic import BaseModel, Field
from supabase import Client

from app.config import settings
from core.forms import (
    FormError,
    NONE_OPTION,
    parse_category_form,
    parse_customer_form,
    parse_order_form,
    parse_product_form,
)
from core.models.customer import CustomerStatus
from core.models.order import OrderStatus, PaymentStatus
from core.models.product import ProductStatus
from core.services import CategoryService, CustomerService, OrderService, ProductService
from core.services.base import TableService

logger = logging.getLogger(__name__)

# Fallback when an action fails without a message
GENERIC_ERROR = "An error occurred"


class DialogMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class DialogState(BaseModel):
    """What the client needs to render an opened dialog."""

    mode: DialogMode
    title: str
    description: str
    submit_label: str
    values: dict[str, Any] = Field(default_factory=dict)
    options: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)


class DialogResult(BaseModel):
    """Outcome of a dialog submit."""

    success: bool
    error: str | None = None
    message: str | None = None
    # Form field the error refers to, when the form itself was rejected
    field: str | None = None


def _enum_options(enum: type[Enum]) -> list[dict[str, Any]]:
    return [{"value": member.value, "label": member.value.capitalize()} for member in enum]


class EntityDialog:
    """
    Base dialog: subclasses name the entity, its form parser and service,
    the pre-filled values for create mode and any select options.
    """

    noun: str = "Record"
    create_description: str = ""
    edit_description: str = ""
    service_class: type[TableService] = TableService
    parse_form: Callable[[Mapping[str, Any]], BaseModel]

    def __init__(self, client: Client):
        self.service = self.service_class(client)

    def defaults(self) -> dict[str, Any]:
        """Values shown in an empty (create mode) dialog."""
        return {}

    def options(self) -> dict[str, list[dict[str, Any]]]:
        """Select options, keyed by field name."""
        return {}

    def open(self, entity: dict[str, Any] | None = None) -> DialogState:
        defaults = self.defaults()

        if entity is None:
            return DialogState(
                mode=DialogMode.CREATE,
                title=f"Add New {self.noun}",
                description=self.create_description,
                submit_label=f"Add {self.noun}",
                values=defaults,
                options=self.options(),
            )

        values = {field: entity.get(field, default) for field, default in defaults.items()}
        values["id"] = entity.get("id")
        return DialogState(
            mode=DialogMode.EDIT,
            title=f"Edit {self.noun}",
            description=self.edit_description,
            submit_label=f"Update {self.noun}",
            values=values,
            options=self.options(),
        )

    def submit(self, form: Mapping[str, Any], entity_id: str | None = None) -> DialogResult:
        """Create when entity_id is None, otherwise update that row."""
        try:
            data = self.parse_form(form)
        except FormError as e:
            return DialogResult(success=False, error=e.message, field=e.field)

        if entity_id is None:
            result = self.service.create(data)
            verb = "created"
        else:
            result = self.service.update(entity_id, data)
            verb = "updated"

        if not result.success:
            return DialogResult(success=False, error=result.error or GENERIC_ERROR)

        return DialogResult(success=True, message=f"{self.noun} {verb} successfully")


# =============================================================================
# Entity Dialogs
# =============================================================================

class CategoryDialog(EntityDialog):
    noun = "Category"
    create_description = "Add a new category to organize your products"
    edit_description = "Update the category information"
    service_class = CategoryService
    parse_form = staticmethod(parse_category_form)

    def defaults(self) -> dict[str, Any]:
        return {"name": "", "description": ""}


class ProductDialog(EntityDialog):
    noun = "Product"
    create_description = "Fill in the details to add a new product to your inventory"
    edit_description = "Update the product information"
    service_class = ProductService
    parse_form = staticmethod(parse_product_form)

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "description": "",
            "category_id": None,
            "sku": "",
            "unit": settings.DEFAULT_UNIT,
            "price": None,
            "cost": None,
            "stock": 0,
            "min_stock": settings.DEFAULT_MIN_STOCK,
            "status": ProductStatus.ACTIVE.value,
        }

    def options(self) -> dict[str, list[dict[str, Any]]]:
        # A failed fetch leaves only the "None" option
        categories = self.service.list_category_options()
        if not categories.ok:
            logger.warning(f"Category options unavailable: {categories.error}")
        return {
            "category_id": [{"value": NONE_OPTION, "label": "None"}] + [
                {"value": c["id"], "label": c["name"]} for c in categories.data
            ],
            "status": _enum_options(ProductStatus),
        }


class CustomerDialog(EntityDialog):
    noun = "Customer"
    create_description = "Fill in the details to add a new customer"
    edit_description = "Update the customer information"
    service_class = CustomerService
    parse_form = staticmethod(parse_customer_form)

    def defaults(self) -> dict[str, Any]:
        return {
            "name": "",
            "email": "",
            "phone": "",
            "address": "",
            "city": "",
            "state": "",
            "zip_code": "",
            "notes": "",
            "status": CustomerStatus.ACTIVE.value,
        }

    def options(self) -> dict[str, list[dict[str, Any]]]:
        return {"status": _enum_options(CustomerStatus)}


class OrderDialog(EntityDialog):
    noun = "Order"
    create_description = "Fill in the details to record a new order"
    edit_description = "Update the order information"
    service_class = OrderService
    parse_form = staticmethod(parse_order_form)

    def defaults(self) -> dict[str, Any]:
        return {
            "order_number": "",
            "customer_id": None,
            "total_amount": 0,
            "discount": 0,
            "tax": 0,
            "status": OrderStatus.PENDING.value,
            "payment_status": PaymentStatus.UNPAID.value,
            "payment_method": "",
            "notes": "",
        }

    def options(self) -> dict[str, list[dict[str, Any]]]:
        customers = self.service.list_customer_options()
        if not customers.ok:
            logger.warning(f"Customer options unavailable: {customers.error}")
        return {
            "customer_id": [{"value": NONE_OPTION, "label": "None"}] + [
                {"value": c["id"], "label": c["name"]} for c in customers.data
            ],
            "status": _enum_options(OrderStatus),
            "payment_status": _enum_options(PaymentStatus),
        }
