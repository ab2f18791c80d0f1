# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by entity:
# - health.py: Health check endpoints
# - categories.py: Category list page, dialog, and row actions
# - products.py: Product list page, dialog, row actions, category options
# - customers.py: Customer list page, dialog, and row actions
# - orders.py: Order list page, dialog, row actions, and order items
# - common.py: Result-to-response helpers shared by the routers above
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import categories
from . import products
from . import customers
from . import orders

__all__ = [
    "health",
    "categories",
    "products",
    "customers",
    "orders",
]
