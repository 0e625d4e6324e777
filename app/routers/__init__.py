# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - questions.py: Question CRUD endpoints
# - answers.py: Answer submission endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import questions
from . import answers

__all__ = [
    "health",
    "questions",
    "answers",
]
