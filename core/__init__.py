# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the admin panel's logic, independent of HTTP:
# - models/: Pydantic payloads and uniform action results
# - services/: per-entity data-access actions over Supabase
# - forms.py: dialog form parsing
# - dialogs.py: create/edit dialog flows
# - listing.py: list page search and filters
# - seed.py: sample data loader
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
