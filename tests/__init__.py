# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Inventory Admin API:
# - test_forms.py: Dialog form parsing
# - test_services.py: Table CRUD actions against a fake Supabase client
# - test_listing.py: List page search and filters
# - test_dialogs.py: Create/edit dialog state and submit
# - test_routes.py: HTTP endpoints through TestClient
# - test_auth.py: JWT verification and user-scoped clients
# - test_schema.py: Static checks on the migration and seed SQL
# - test_seed.py: Sample data loader
#
# Run tests with: pytest
# =============================================================================
