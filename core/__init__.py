# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the domain logic behind the API:
# - models/: Pydantic schemas for questions, answers and pagination
# - services/: The in-memory store and the pagination helper
# - data/: Bundled seed questions
#
# Route handlers stay thin and delegate to these services.
# =============================================================================
