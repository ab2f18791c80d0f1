# =============================================================================
# core/services/category_service.py - Category Actions
# =============================================================================

from typing import Any

from pydantic import BaseModel

from core.services.base import TableService
from lib.utils import utc_now_iso


class CategoryService(TableService):
    """
    Category CRUD, ordered by name.

    Deleting a category leaves its products in place with category_id
    set to NULL by the foreign key.
    """

    table = "categories"
    entity = "category"
    order_by = "name"

    def update_payload(self, data: BaseModel) -> dict[str, Any]:
        # update_categories_updated_at sets this too
        payload = super().update_payload(data)
        payload["updated_at"] = utc_now_iso()
        return payload
