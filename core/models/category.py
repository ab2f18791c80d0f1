# =============================================================================
# core/models/category.py - Category Schemas
# =============================================================================
# A category groups products. Products reference it through a nullable
# category_id (ON DELETE SET NULL), so deleting a category never deletes
# products.
# =============================================================================

from pydantic import BaseModel, Field


class CategoryInput(BaseModel):
    """
    Fields accepted when creating or updating a category.

    Name uniqueness is enforced by the database; a duplicate surfaces as the
    driver's unique-violation message.

    Example:
        {"name": "Grooming", "description": "Pet grooming supplies and tools"}
    """

    name: str = Field(
        ...,
        description="Category name (unique)"
    )

    description: str | None = Field(
        default=None,
        description="Free-text description"
    )
