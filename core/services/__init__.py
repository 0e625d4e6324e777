# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .store import Store
from .pagination import extract_pagination, paginate

__all__ = [
    "Store",
    "extract_pagination",
    "paginate",
]
