# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the AskBoard API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_pagination.py: Tests for the pagination helper
# - test_store.py: Store semantics and concurrency
# - test_exceptions.py: Error kind -> status mapping
# - test_seed.py: Seed loading and startup
# - test_api.py: Endpoint tests through TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
