# =============================================================================
# core/listing.py - List Page Search & Filters
# =============================================================================
# List pages fetch the whole table once and narrow it in process:
# - search: case-insensitive substring match over a page's text columns
# - filters: exact match on status-like columns
# =============================================================================

from typing import Any, Iterable

from core.models.results import ListPage, ListResult
from lib.utils import contains_ignore_case

# Columns searched on each list page
CATEGORY_SEARCH_FIELDS = ("name", "description")
PRODUCT_SEARCH_FIELDS = ("name", "sku", "description", "category_name")
CUSTOMER_SEARCH_FIELDS = ("name", "email", "phone", "city")
ORDER_SEARCH_FIELDS = ("order_number", "customer_name", "payment_method")


def search_rows(
    rows: list[dict[str, Any]],
    term: str | None,
    fields: Iterable[str],
) -> list[dict[str, Any]]:
    """
    Keep rows where any of `fields` contains `term`, ignoring case.

    A blank term keeps everything.

    Example:
        search_rows(categories, "groom", ("name", "description"))
    """
    if not term or not term.strip():
        return rows

    fields = tuple(fields)
    return [
        row for row in rows
        if any(contains_ignore_case(row.get(field), term) for field in fields)
    ]


def filter_rows(rows: list[dict[str, Any]], **equals: Any) -> list[dict[str, Any]]:
    """Keep rows whose columns equal every given value. None values are ignored."""
    active = {column: value for column, value in equals.items() if value is not None}
    if not active:
        return rows

    return [
        row for row in rows
        if all(row.get(column) == value for column, value in active.items())
    ]


def build_list_page(
    result: ListResult,
    term: str | None = None,
    fields: Iterable[str] = (),
    **filters: Any,
) -> ListPage:
    """Apply search and filters to a fetched list. A failed fetch yields an empty page carrying the error."""
    if not result.ok:
        return ListPage(data=[], error=result.error, total=0)

    rows = search_rows(filter_rows(result.data, **filters), term, fields)
    return ListPage(data=rows, error=None, total=len(rows))
