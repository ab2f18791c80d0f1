# =============================================================================
# core/services/product_service.py - Product Actions
# =============================================================================
# Products are listed newest first with their category embedded, and the
# category name flattened onto the row for display and search.
# =============================================================================

from typing import Any

from core.models.results import ListResult
from core.services.base import TableService


class ProductService(TableService):
    """Product CRUD plus the category options for the product dialog."""

    table = "products"
    entity = "product"
    select_columns = "*, categories (id, name)"
    order_by = "created_at"
    order_desc = True

    def shape_row(self, row: dict[str, Any]) -> dict[str, Any]:
        category = row.get("categories") or {}
        return {**row, "category_name": category.get("name")}

    def list_category_options(self) -> ListResult:
        """id/name pairs for the category select, ordered by name."""
        return self._select_options("categories")
