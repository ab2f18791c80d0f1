# =============================================================================
# app/routers/orders.py - Order & Order Item Endpoints
# =============================================================================
# List page (search + status/payment filters), dialog, row actions, and
# the order's lines.
# All endpoints require authentication.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, Request

from app.dependencies import DbDep
from app.routers.common import dialog_response, item_or_404, mutation_response
from core.dialogs import DialogResult, DialogState, OrderDialog
from core.listing import ORDER_SEARCH_FIELDS, build_list_page
from core.models.order import OrderInput, OrderItemInput
from core.models.results import ListPage, ListResult, MutationResult
from core.services import OrderItemService, OrderService

router = APIRouter()


# =============================================================================
# Orders
# =============================================================================

@router.get("", response_model=ListPage)
async def list_orders(
    db: DbDep,
    q: Annotated[str | None, Query(description="Search order number, customer or payment method")] = None,
    status: Annotated[str | None, Query(description="Only this order status")] = None,
    payment_status: Annotated[str | None, Query(description="Only this payment status")] = None,
):
    """Orders, newest first, with customer_name."""
    result = OrderService(db).list()
    return build_list_page(
        result,
        q,
        ORDER_SEARCH_FIELDS,
        status=status,
        payment_status=payment_status,
    )


@router.get("/dialog", response_model=DialogState)
async def open_order_dialog(
    db: DbDep,
    order_id: Annotated[UUID | None, Query(description="Order to edit; omit to create")] = None,
):
    """Open the order dialog in create or edit mode."""
    entity = None
    if order_id:
        entity = item_or_404(OrderService(db).get(order_id), "order", order_id)
    return OrderDialog(db).open(entity)


@router.post("/dialog", response_model=DialogResult)
async def submit_order_dialog(
    request: Request,
    db: DbDep,
    order_id: Annotated[UUID | None, Query(description="Order to update; omit to create")] = None,
):
    """
    Submit the order dialog form.

    On create, order lines may be sent as a JSON array in the "items" field.
    """
    form = await request.form()
    result = OrderDialog(db).submit(form, str(order_id) if order_id else None)
    return dialog_response(result)


@router.get("/{order_id}")
async def get_order(
    order_id: Annotated[UUID, Path(description="Order UUID")],
    db: DbDep,
):
    """Get one order with its customer and lines (as "items")."""
    return item_or_404(OrderService(db).get(order_id), "order", order_id)


@router.post("", response_model=MutationResult)
async def create_order(data: OrderInput, db: DbDep):
    """
    Create an order, with its lines if "items" is given.

    A duplicate order_number returns the unique-violation message.
    """
    return mutation_response(OrderService(db).create(data))


@router.put("/{order_id}", response_model=MutationResult)
async def update_order(
    order_id: Annotated[UUID, Path(description="Order UUID")],
    data: OrderInput,
    db: DbDep,
):
    """Update the order header. A body with "items" is rejected with 400; lines are managed through /items."""
    return mutation_response(OrderService(db).update(order_id, data))


@router.delete("/{order_id}", response_model=MutationResult)
async def delete_order(
    order_id: Annotated[UUID, Path(description="Order UUID")],
    db: DbDep,
):
    """Delete an order. Its lines are deleted with it."""
    return mutation_response(OrderService(db).delete(order_id))


# =============================================================================
# Order Items
# =============================================================================

@router.get("/{order_id}/items", response_model=ListResult)
async def list_order_items(
    order_id: Annotated[UUID, Path(description="Order UUID")],
    db: DbDep,
):
    return OrderItemService(db).list_for_order(order_id)


@router.post("/{order_id}/items", response_model=MutationResult)
async def add_order_item(
    order_id: Annotated[UUID, Path(description="Order UUID")],
    data: OrderItemInput,
    db: DbDep,
):
    """Add a line. Totals on the order are not recalculated."""
    return mutation_response(OrderItemService(db).create(order_id, data))


@router.delete("/{order_id}/items/{item_id}", response_model=MutationResult)
async def delete_order_item(
    order_id: Annotated[UUID, Path(description="Order UUID")],
    item_id: Annotated[UUID, Path(description="Order item UUID")],
    db: DbDep,
):
    return mutation_response(OrderItemService(db).delete_for_order(order_id, item_id))
