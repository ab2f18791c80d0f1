# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .base import TableService
from .category_service import CategoryService
from .customer_service import CustomerService
from .order_service import OrderItemService, OrderService
from .product_service import ProductService

__all__ = [
    "TableService",
    "CategoryService",
    "CustomerService",
    "OrderItemService",
    "OrderService",
    "ProductService",
]
