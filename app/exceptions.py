# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Database errors from actions are NOT raised: they travel inside the
# {success, error} / {data, error} result bodies. These exceptions cover
# the HTTP-level failures around them (missing rows, client setup).
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class InventoryAdminException(Exception):
    """
    Base exception for the Inventory Admin API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "INVENTORY_ADMIN_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Record Exceptions
# =============================================================================

class RecordNotFoundError(InventoryAdminException):
    """Raised when a row lookup by id returns nothing."""

    def __init__(self, entity: str, record_id: str):
        super().__init__(
            message=f"{entity.capitalize()} not found: {record_id}",
            code=f"{entity.upper()}_NOT_FOUND",
            status_code=404,
            suggestion=f"Check that the {entity} id is correct and has not been deleted",
            details={"id": record_id},
        )


class RecordLookupError(InventoryAdminException):
    """Raised when a row lookup fails for a reason other than a missing row (RLS, network)."""

    def __init__(self, entity: str, record_id: str, error: str):
        super().__init__(
            message=error,
            code="DATABASE_ERROR",
            status_code=400,
            details={"entity": entity, "id": record_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def inventory_admin_exception_handler(
    request: Request,
    exc: InventoryAdminException
) -> JSONResponse:
    """
    Convert InventoryAdminException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle request validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
