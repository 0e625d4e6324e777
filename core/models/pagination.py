# =============================================================================
# core/models/pagination.py - Pagination Window
# =============================================================================

from pydantic import BaseModel, Field


class Pagination(BaseModel):
    """
    Offset window over a listing: items[start:end].

    Both offsets are non-negative. Whether the window fits a particular
    listing (start <= end <= len) is checked when it is applied.
    """

    start: int = Field(..., ge=0, description="First index (inclusive)")
    end: int = Field(..., ge=0, description="Last index (exclusive)")
