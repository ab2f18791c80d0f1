# =============================================================================
# core/services/base.py - Shared Table CRUD
# =============================================================================
# Every entity exposes the same five actions: list, get, create, update,
# delete. TableService implements them once over a PostgREST table; the
# entity services only declare their table, ordering and embeds.
#
# Actions never raise. Database failures come back inside the result with
# the driver's message unchanged, and the caller decides how to show it.
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from postgrest.exceptions import APIError
from pydantic import BaseModel
from supabase import Client

from core.models.results import ItemResult, ListResult, MutationResult
from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

# PostgREST code for .single() matching zero rows
NO_ROWS_CODE = "PGRST116"


class TableService:
    """
    CRUD actions over one table.

    Subclasses set:
        table: PostgREST table name
        entity: singular name used in logs and messages
        select_columns: select() expression for list (may embed relations)
        detail_columns: select() expression for get, when wider than the list
        order_by / order_desc: default list ordering
    """

    table: str = ""
    entity: str = "record"
    select_columns: str = "*"
    detail_columns: str | None = None
    order_by: str = "created_at"
    order_desc: bool = False

    def __init__(self, client: Client):
        self.client = client

    # -------------------------------------------------------------------------
    # Hooks
    # -------------------------------------------------------------------------

    def shape_row(self, row: dict[str, Any]) -> dict[str, Any]:
        """Post-process a fetched row (flatten embeds). Identity by default."""
        return row

    def create_payload(self, data: BaseModel) -> dict[str, Any]:
        """Columns to insert: exactly the fields that were submitted."""
        return data.model_dump(exclude_unset=True)

    def update_payload(self, data: BaseModel) -> dict[str, Any]:
        """Columns to update: exactly the fields that were submitted."""
        return data.model_dump(exclude_unset=True)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def list(self) -> ListResult:
        """Fetch all rows in the default order."""
        try:
            response = (
                self.client.table(self.table)
                .select(self.select_columns)
                .order(self.order_by, desc=self.order_desc)
                .execute()
            )
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to list {self.table}: {error}")
            return ListResult(data=[], error=error)

        rows = [self.shape_row(row) for row in response.data or []]
        logger.debug(f"Fetched {len(rows)} rows from {self.table}")
        return ListResult(data=rows)

    def get(self, record_id: str | UUID) -> ItemResult:
        """
        Fetch one row by id.

        A missing row (PGRST116) returns data=None with no error. Any other
        failure returns data=None with the driver message.
        """
        record_id = normalize_uuid(record_id)

        try:
            response = (
                self.client.table(self.table)
                .select(self.detail_columns or self.select_columns)
                .eq("id", record_id)
                .single()
                .execute()
            )
        except Exception as e:
            if isinstance(e, APIError) and e.code == NO_ROWS_CODE:
                logger.debug(f"No {self.entity} with id {record_id}")
                return ItemResult(data=None)
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to fetch {self.entity} {record_id}: {error}")
            return ItemResult(data=None, error=error)

        if not response.data:
            return ItemResult(data=None)
        return ItemResult(data=self.shape_row(response.data))

    def create(self, data: BaseModel) -> MutationResult:
        """Insert one row."""
        try:
            self.client.table(self.table).insert([self.create_payload(data)]).execute()
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to create {self.entity}: {error}")
            return MutationResult.failed(error)

        logger.info(f"Created {self.entity}")
        return MutationResult.ok()

    def update(self, record_id: str | UUID, data: BaseModel) -> MutationResult:
        """Update one row by id."""
        record_id = normalize_uuid(record_id)

        try:
            (
                self.client.table(self.table)
                .update(self.update_payload(data))
                .eq("id", record_id)
                .execute()
            )
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to update {self.entity} {record_id}: {error}")
            return MutationResult.failed(error)

        logger.info(f"Updated {self.entity}: {record_id}")
        return MutationResult.ok()

    def delete(self, record_id: str | UUID) -> MutationResult:
        """
        Delete one row by id.

        Dependent rows are handled by the foreign keys (SET NULL or CASCADE).
        """
        record_id = normalize_uuid(record_id)

        try:
            self.client.table(self.table).delete().eq("id", record_id).execute()
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to delete {self.entity} {record_id}: {error}")
            return MutationResult.failed(error)

        logger.info(f"Deleted {self.entity}: {record_id}")
        return MutationResult.ok()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _select_options(self, table: str) -> ListResult:
        """Fetch id/name pairs from a table for a select field, ordered by name."""
        try:
            response = (
                self.client.table(table)
                .select("id, name")
                .order("name", desc=False)
                .execute()
            )
        except Exception as e:
            error = SupabaseClient.error_message(e)
            logger.error(f"Failed to fetch {table} options: {error}")
            return ListResult(data=[], error=error)

        return ListResult(data=response.data or [])
