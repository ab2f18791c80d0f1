# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# Products are the inventory rows. Price, cost and stock constraints
# (non-negative) and the status allow-list live in the database as CHECK
# constraints; these models only describe the payload.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


class ProductStatus(str, Enum):
    """
    Allowed product statuses (mirrors the products.status CHECK constraint).

    There are no transition rules: any status may be set at any time.
    """
    ACTIVE = "active"
    INACTIVE = "inactive"
    DISCONTINUED = "discontinued"


class ProductInput(BaseModel):
    """
    Fields accepted when creating or updating a product.

    Example:
        {
            "name": "Pet Shampoo",
            "sku": "GROOM-001",
            "price": 19.99,
            "cost": 8.00,
            "stock": 75,
            "min_stock": 15,
            "category_id": "550e8400-e29b-41d4-a716-446655440000",
            "status": "active"
        }
    """

    name: str = Field(..., description="Product name")

    description: str | None = Field(default=None)

    # Nullable FK to categories (ON DELETE SET NULL)
    category_id: str | None = Field(
        default=None,
        description="Category id, or null for uncategorised"
    )

    sku: str = Field(..., description="Stock-keeping unit (unique)")

    price: float = Field(..., description="Sale price")

    cost: float | None = Field(default=None, description="Purchase cost")

    stock: int = Field(default=0, description="Units on hand")

    min_stock: int = Field(default=10, description="Reorder threshold")

    unit: str = Field(default="unit", description="Unit of measure (unit, kg, liter...)")

    # Plain string so that unknown values reach the CHECK constraint
    status: str = Field(
        default=ProductStatus.ACTIVE.value,
        description="active | inactive | discontinued"
    )
