# =============================================================================
# app/routers/products.py - Product Endpoints
# =============================================================================
# List page (search + status/category filters), dialog, and row actions.
# All endpoints require authentication.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, Request

from app.dependencies import DbDep
from app.routers.common import dialog_response, item_or_404, mutation_response
from core.dialogs import DialogResult, DialogState, ProductDialog
from core.listing import PRODUCT_SEARCH_FIELDS, build_list_page
from core.models.product import ProductInput
from core.models.results import ListPage, ListResult, MutationResult
from core.services import ProductService

router = APIRouter()


@router.get("", response_model=ListPage)
async def list_products(
    db: DbDep,
    q: Annotated[str | None, Query(description="Search name, SKU, description or category")] = None,
    status: Annotated[str | None, Query(description="Only this status")] = None,
    category_id: Annotated[UUID | None, Query(description="Only this category")] = None,
):
    """Products, newest first, with category_name."""
    result = ProductService(db).list()
    return build_list_page(
        result,
        q,
        PRODUCT_SEARCH_FIELDS,
        status=status,
        category_id=str(category_id) if category_id else None,
    )


@router.get("/category-options", response_model=ListResult)
async def list_category_options(db: DbDep):
    """id/name pairs for the category select."""
    return ProductService(db).list_category_options()


@router.get("/dialog", response_model=DialogState)
async def open_product_dialog(
    db: DbDep,
    product_id: Annotated[UUID | None, Query(description="Product to edit; omit to create")] = None,
):
    """Open the product dialog in create or edit mode."""
    entity = None
    if product_id:
        entity = item_or_404(ProductService(db).get(product_id), "product", product_id)
    return ProductDialog(db).open(entity)


@router.post("/dialog", response_model=DialogResult)
async def submit_product_dialog(
    request: Request,
    db: DbDep,
    product_id: Annotated[UUID | None, Query(description="Product to update; omit to create")] = None,
):
    """Submit the product dialog form (urlencoded or multipart)."""
    form = await request.form()
    result = ProductDialog(db).submit(form, str(product_id) if product_id else None)
    return dialog_response(result)


@router.get("/{product_id}")
async def get_product(
    product_id: Annotated[UUID, Path(description="Product UUID")],
    db: DbDep,
):
    """Get one product with its category."""
    return item_or_404(ProductService(db).get(product_id), "product", product_id)


@router.post("", response_model=MutationResult)
async def create_product(data: ProductInput, db: DbDep):
    """Create a product. A duplicate SKU returns the unique-violation message."""
    return mutation_response(ProductService(db).create(data))


@router.put("/{product_id}", response_model=MutationResult)
async def update_product(
    product_id: Annotated[UUID, Path(description="Product UUID")],
    data: ProductInput,
    db: DbDep,
):
    """Update a product."""
    return mutation_response(ProductService(db).update(product_id, data))


@router.delete("/{product_id}", response_model=MutationResult)
async def delete_product(
    product_id: Annotated[UUID, Path(description="Product UUID")],
    db: DbDep,
):
    """
    Delete a product.

    Order lines keep their name/price snapshot; their product_id becomes null.
    """
    return mutation_response(ProductService(db).delete(product_id))
