# =============================================================================
# core/models/customer.py - Customer Schemas
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class CustomerStatus(str, Enum):
    """Allowed customer statuses (mirrors the customers.status CHECK constraint)."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class CustomerInput(BaseModel):
    """
    Fields accepted when creating or updating a customer.

    Blank optional fields must be sent as null, not "": email is UNIQUE and
    two empty strings would collide.
    """

    name: str = Field(..., description="Customer name")
    email: str | None = Field(default=None, description="Email address (unique)")
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    notes: str | None = None
    status: str = Field(
        default=CustomerStatus.ACTIVE.value,
        description="active | inactive"
    )
