# =============================================================================
# app/routers/customers.py - Customer Endpoints
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, Request

from app.dependencies import DbDep
from app.routers.common import dialog_response, item_or_404, mutation_response
from core.dialogs import CustomerDialog, DialogResult, DialogState
from core.listing import CUSTOMER_SEARCH_FIELDS, build_list_page
from core.models.customer import CustomerInput
from core.models.results import ListPage, MutationResult
from core.services import CustomerService

router = APIRouter()


@router.get("", response_model=ListPage)
async def list_customers(
    db: DbDep,
    q: Annotated[str | None, Query(description="Search name, email, phone or city")] = None,
    status: Annotated[str | None, Query(description="Only this status")] = None,
):
    """Customers ordered by name."""
    result = CustomerService(db).list()
    return build_list_page(result, q, CUSTOMER_SEARCH_FIELDS, status=status)


@router.get("/dialog", response_model=DialogState)
async def open_customer_dialog(
    db: DbDep,
    customer_id: Annotated[UUID | None, Query(description="Customer to edit; omit to create")] = None,
):
    entity = None
    if customer_id:
        entity = item_or_404(CustomerService(db).get(customer_id), "customer", customer_id)
    return CustomerDialog(db).open(entity)


@router.post("/dialog", response_model=DialogResult)
async def submit_customer_dialog(
    request: Request,
    db: DbDep,
    customer_id: Annotated[UUID | None, Query(description="Customer to update; omit to create")] = None,
):
    form = await request.form()
    result = CustomerDialog(db).submit(form, str(customer_id) if customer_id else None)
    return dialog_response(result)


@router.get("/{customer_id}")
async def get_customer(
    customer_id: Annotated[UUID, Path(description="Customer UUID")],
    db: DbDep,
):
    return item_or_404(CustomerService(db).get(customer_id), "customer", customer_id)


@router.post("", response_model=MutationResult)
async def create_customer(data: CustomerInput, db: DbDep):
    return mutation_response(CustomerService(db).create(data))


@router.put("/{customer_id}", response_model=MutationResult)
async def update_customer(
    customer_id: Annotated[UUID, Path(description="Customer UUID")],
    data: CustomerInput,
    db: DbDep,
):
    return mutation_response(CustomerService(db).update(customer_id, data))


@router.delete("/{customer_id}", response_model=MutationResult)
async def delete_customer(
    customer_id: Annotated[UUID, Path(description="Customer UUID")],
    db: DbDep,
):
    """Delete a customer. Their orders remain with customer_id set to null."""
    return mutation_response(CustomerService(db).delete(customer_id))
