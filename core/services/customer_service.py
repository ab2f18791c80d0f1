# =============================================================================
# core/services/customer_service.py - Customer Actions
# =============================================================================

from core.services.base import TableService


class CustomerService(TableService):
    """Customer CRUD, ordered by name. Deleting a customer keeps their orders (customer_id -> NULL)."""

    table = "customers"
    entity = "customer"
    order_by = "name"
