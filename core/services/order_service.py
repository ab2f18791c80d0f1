# =============================================================================
# core/services/order_service.py - Order & Order Item Actions
# =============================================================================
# Orders are listed newest first with the customer name flattened onto the
# row. A single order is fetched with its lines embedded as "items".
#
# Creating an order with lines is two inserts: the header, then the lines
# with the new order id. There is no rollback between them; if the lines
# fail, the header stays and the line error is returned.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from core.models.order import OrderInput, OrderItemInput
from core.models.results import ListResult, MutationResult
from core.services.base import TableService
from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

ITEMS_ON_UPDATE_ERROR = "Order items cannot be changed when updating an order; use the order item actions"


def _flatten_customer(row: dict[str, Any]) -> dict[str, Any]:
    customer = row.get("customers") or {}
    return {**row, "customer_name": customer.get("name")}


class OrderService(TableService):
    """Order CRUD plus the customer options for the order dialog."""

    table = "orders"
    entity = "order"
    select_columns = "*, customers (id, name)"
    detail_columns = "*, customers (id, name), order_items (*)"
    order_by = "created_at"
    order_desc = True

    def shape_row(self, row: dict[str, Any]) -> dict[str, Any]:
        row = _flatten_customer(row)
        if "order_items" in row:
            row["items"] = row.pop("order_items") or []
        return row

    def create_payload(self, data: BaseModel) -> dict[str, Any]:
        return data.model_dump(exclude_unset=True, exclude={"items"})

    def update_payload(self, data: BaseModel) -> dict[str, Any]:
        return data.model_dump(exclude_unset=True, exclude={"items"})

    def update(self, record_id: str | UUID, data: OrderInput) -> MutationResult:
        """
        Update the order header.

        Lines are managed through OrderItemService; an update carrying
        items is rejected.
        """
        if data.items:
            logger.warning(f"Rejected update of order {record_id}: items submitted")
            return MutationResult.failed(ITEMS_ON_UPDATE_ERROR)
        return super().update(record_id, data)

    def create(self, data: OrderInput) -> MutationResult:
        """Insert the order header, then its lines if any were submitted."""
        try:
            response = (
                self.client.table(self.table)
                .insert([self.create_payload(data)])
                .execute()
            )
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to create order: {error}")
            return MutationResult.failed(error)

        if not data.items:
            logger.info(f"Created order {data.order_number}")
            return MutationResult.ok()

        if not response.data:
            return MutationResult.failed("Insert returned no data")

        order_id = response.data[0]["id"]
        items = OrderItemService(self.client)
        result = items.create_many(order_id, data.items)
        if result.success:
            logger.info(f"Created order {data.order_number} with {len(data.items)} items")
        return result

    def list_customer_options(self) -> ListResult:
        """id/name pairs for the customer select, ordered by name."""
        return self._select_options("customers")


class OrderItemService(TableService):
    """Order lines. They are removed automatically when their order is deleted."""

    table = "order_items"
    entity = "order item"
    order_by = "created_at"

    def list_for_order(self, order_id: str | UUID) -> ListResult:
        """Fetch the lines of one order, oldest first."""
        order_id = normalize_uuid(order_id)

        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("order_id", order_id)
                .order(self.order_by, desc=False)
                .execute()
            )
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to list items for order {order_id}: {error}")
            return ListResult(data=[], error=error)

        return ListResult(data=response.data or [])

    def create(self, order_id: str | UUID, data: OrderItemInput) -> MutationResult:
        """Add one line to an existing order."""
        return self.create_many(order_id, [data])

    def create_many(self, order_id: str | UUID, items: list[OrderItemInput]) -> MutationResult:
        """Insert several lines for one order in a single request."""
        order_id = normalize_uuid(order_id)
        rows = [{**item.model_dump(), "order_id": order_id} for item in items]

        try:
            self.client.table(self.table).insert(rows).execute()
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to add items to order {order_id}: {error}")
            return MutationResult.failed(error)

        logger.info(f"Added {len(rows)} items to order {order_id}")
        return MutationResult.ok()

    def delete_for_order(self, order_id: str | UUID, item_id: str | UUID) -> MutationResult:
        """
        Delete one line, only if it belongs to the given order.

        A line of another order matches no row; that is reported as a failure.
        """
        order_id = normalize_uuid(order_id)
        item_id = normalize_uuid(item_id)

        try:
            response = (
                self.client.table(self.table)
                .delete()
                .eq("order_id", order_id)
                .eq("id", item_id)
                .execute()
            )
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to delete item {item_id} of order {order_id}: {error}")
            return MutationResult.failed(error)

        if not response.data:
            logger.warning(f"Order item {item_id} not found on order {order_id}")
            return MutationResult.failed(f"Order item {item_id} not found on order {order_id}")

        logger.info(f"Deleted item {item_id} of order {order_id}")
        return MutationResult.ok()
