# =============================================================================
# core/models/results.py - Uniform Action Results
# =============================================================================
# Every data-access action returns one of these shapes instead of raising:
# - ListResult:     {data: [...], error: null | "<driver message>"}
# - ItemResult:     {data: {...} | null, error: ...}
# - MutationResult: {success: bool, error: ...}
# - ListPage:       ListResult plus the row count after search/filter
#
# The error string is the database driver's message, unmodified.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class ListResult(BaseModel):
    """Result of a list action."""

    data: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Fetched rows (empty on failure)"
    )

    error: str | None = Field(
        default=None,
        description="Database error message, if the fetch failed"
    )

    @property
    def ok(self) -> bool:
        return self.error is None


class ItemResult(BaseModel):
    """Result of a single-row lookup."""

    data: dict[str, Any] | None = Field(
        default=None,
        description="The row, or null when not found / on failure"
    )

    error: str | None = Field(
        default=None,
        description="Database error message, if the lookup failed"
    )


class MutationResult(BaseModel):
    """
    Result of a create/update/delete action.

    Example:
        {"success": false, "error": "duplicate key value violates unique constraint \"products_sku_key\""}
    """

    success: bool = Field(
        ...,
        description="Whether the write was accepted by the database"
    )

    error: str | None = Field(
        default=None,
        description="Database error message, if the write failed"
    )

    @classmethod
    def ok(cls) -> "MutationResult":
        return cls(success=True, error=None)

    @classmethod
    def failed(cls, error: str) -> "MutationResult":
        return cls(success=False, error=error)


class ListPage(BaseModel):
    """
    A list page after in-process search and filters.

    total is the number of rows left after filtering, not the table size.
    """

    data: list[dict[str, Any]] = Field(default_factory=list)
    error: str | None = None
    total: int = Field(default=0, ge=0)
