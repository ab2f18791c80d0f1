# =============================================================================
# app/routers/categories.py - Category Endpoints
# =============================================================================
# List page, dialog, and row actions for categories.
# All endpoints require authentication.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, Request

from app.dependencies import DbDep
from app.routers.common import dialog_response, item_or_404, mutation_response
from core.dialogs import CategoryDialog, DialogResult, DialogState
from core.listing import CATEGORY_SEARCH_FIELDS, build_list_page
from core.models.category import CategoryInput
from core.models.results import ListPage, MutationResult
from core.services import CategoryService

router = APIRouter()


@router.get("", response_model=ListPage)
async def list_categories(
    db: DbDep,
    q: Annotated[str | None, Query(description="Search name or description")] = None,
):
    """
    Categories ordered by name.

    A failed fetch still returns 200 with an empty list and the error.
    """
    result = CategoryService(db).list()
    return build_list_page(result, q, CATEGORY_SEARCH_FIELDS)


@router.get("/dialog", response_model=DialogState)
async def open_category_dialog(
    db: DbDep,
    category_id: Annotated[UUID | None, Query(description="Category to edit; omit to create")] = None,
):
    """Open the category dialog in create or edit mode."""
    entity = None
    if category_id:
        entity = item_or_404(CategoryService(db).get(category_id), "category", category_id)
    return CategoryDialog(db).open(entity)


@router.post("/dialog", response_model=DialogResult)
async def submit_category_dialog(
    request: Request,
    db: DbDep,
    category_id: Annotated[UUID | None, Query(description="Category to update; omit to create")] = None,
):
    """Submit the category dialog form (urlencoded or multipart)."""
    form = await request.form()
    result = CategoryDialog(db).submit(form, str(category_id) if category_id else None)
    return dialog_response(result)


@router.get("/{category_id}")
async def get_category(
    category_id: Annotated[UUID, Path(description="Category UUID")],
    db: DbDep,
):
    """Get one category."""
    return item_or_404(CategoryService(db).get(category_id), "category", category_id)


@router.post("", response_model=MutationResult)
async def create_category(data: CategoryInput, db: DbDep):
    """Create a category. A duplicate name returns the unique-violation message."""
    return mutation_response(CategoryService(db).create(data))


@router.put("/{category_id}", response_model=MutationResult)
async def update_category(
    category_id: Annotated[UUID, Path(description="Category UUID")],
    data: CategoryInput,
    db: DbDep,
):
    """Update a category."""
    return mutation_response(CategoryService(db).update(category_id, data))


@router.delete("/{category_id}", response_model=MutationResult)
async def delete_category(
    category_id: Annotated[UUID, Path(description="Category UUID")],
    db: DbDep,
):
    """
    Delete a category.

    Products in this category are kept; their category_id becomes null.
    """
    return mutation_response(CategoryService(db).delete(category_id))
