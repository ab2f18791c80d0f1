# =============================================================================
# app/routers/common.py - Shared Response Helpers
# =============================================================================
# Maps action results onto HTTP:
# - mutations: 200 on success, 400 on failure; body is always {success, error}
# - lookups:   the row, 404 when nothing came back, 400 with the driver
#              message when the lookup itself failed
# - dialogs:   200 on success, 400 on failure; body is {success, error, message, field}
# =============================================================================

from uuid import UUID

from fastapi.responses import JSONResponse

from app.exceptions import RecordLookupError, RecordNotFoundError
from core.dialogs import DialogResult
from core.models.results import ItemResult, MutationResult


def mutation_response(result: MutationResult) -> JSONResponse:
    """Serialize a mutation result with a status code matching its outcome."""
    return JSONResponse(
        status_code=200 if result.success else 400,
        content=result.model_dump(),
    )


def dialog_response(result: DialogResult) -> JSONResponse:
    """Serialize a dialog submit with a status code matching its outcome."""
    return JSONResponse(
        status_code=200 if result.success else 400,
        content=result.model_dump(),
    )


def item_or_404(result: ItemResult, entity: str, record_id: UUID | str) -> dict:
    """Unwrap a lookup, raising RecordLookupError on failure and RecordNotFoundError when no row came back."""
    if result.error:
        raise RecordLookupError(entity, str(record_id), result.error)
    if result.data is None:
        raise RecordNotFoundError(entity, str(record_id))
    return result.data
