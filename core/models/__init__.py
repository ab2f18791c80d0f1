# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - results.py: Uniform {data, error} / {success, error} action results
# - category.py, product.py, customer.py, order.py: entity input payloads
#   and the status allow-lists
#
# Range checks and status allow-lists are NOT enforced here; the database
# CHECK constraints own them.
# =============================================================================

from .results import (
    ItemResult,
    ListPage,
    ListResult,
    MutationResult,
)

from .category import CategoryInput

from .product import (
    ProductInput,
    ProductStatus,
)

from .customer import (
    CustomerInput,
    CustomerStatus,
)

from .order import (
    OrderInput,
    OrderItemInput,
    OrderStatus,
    PaymentStatus,
)

__all__ = [
    # Results
    "ItemResult",
    "ListPage",
    "ListResult",
    "MutationResult",
    # Category
    "CategoryInput",
    # Product
    "ProductInput",
    "ProductStatus",
    # Customer
    "CustomerInput",
    "CustomerStatus",
    # Order
    "OrderInput",
    "OrderItemInput",
    "OrderStatus",
    "PaymentStatus",
]
