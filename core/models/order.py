# =============================================================================
# core/models/order.py - Order & Order Item Schemas
# =============================================================================
# Orders carry caller-computed totals (total_amount, discount, tax); the
# application does not recompute them. Order items snapshot the product's
# name and price at the time of sale and are deleted with their order
# (ON DELETE CASCADE).
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class OrderStatus(str, Enum):
    """Allowed order statuses (orders.status CHECK constraint)."""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    """Allowed payment statuses (orders.payment_status CHECK constraint)."""
    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"
    REFUNDED = "refunded"


class OrderItemInput(BaseModel):
    """
    One order line.

    subtotal defaults to quantity * unit_price when omitted; a supplied value
    is stored as-is.

    Example:
        {"product_id": "...", "product_name": "Dental Chews", "quantity": 2, "unit_price": 24.99}
    """

    # Nullable FK to products (ON DELETE SET NULL); product_name keeps the line readable
    product_id: str | None = Field(default=None)

    product_name: str = Field(..., description="Product name snapshot")

    quantity: int = Field(..., description="Units ordered")

    unit_price: float = Field(..., description="Price per unit snapshot")

    subtotal: float | None = Field(default=None, description="Line total")

    @model_validator(mode="after")
    def default_subtotal(self) -> "OrderItemInput":
        if self.subtotal is None:
            self.subtotal = round(self.quantity * self.unit_price, 2)
        return self


class OrderInput(BaseModel):
    """
    Fields accepted when creating or updating an order.

    items is only used on create; order lines are edited through the
    order item endpoints afterwards.
    """

    order_number: str = Field(..., description="Human-facing order number (unique)")

    # Nullable FK to customers (ON DELETE SET NULL)
    customer_id: str | None = Field(default=None)

    total_amount: float = Field(default=0)
    discount: float = Field(default=0)
    tax: float = Field(default=0)

    status: str = Field(
        default=OrderStatus.PENDING.value,
        description="pending | processing | completed | cancelled"
    )

    payment_status: str = Field(
        default=PaymentStatus.UNPAID.value,
        description="unpaid | partial | paid | refunded"
    )

    payment_method: str | None = Field(default=None, description="e.g. credit_card, cash")

    notes: str | None = None

    items: list[OrderItemInput] = Field(
        default_factory=list,
        description="Order lines inserted together with a new order"
    )
