# =============================================================================
# core/services/pagination.py - Pagination Helper
# =============================================================================
# Turns raw ?start=&end= query parameters into a Pagination window and
# applies it to a listing.
#
# Two separate failure stages:
# - extract_pagination: the parameters themselves are missing or not integers
# - paginate: the window doesn't fit the listing it's applied to
# =============================================================================

from collections.abc import Mapping, Sequence
from typing import TypeVar

from app.exceptions import (
    InvalidPaginationError,
    MissingParametersError,
    PaginationParseError,
)
from core.models.pagination import Pagination

T = TypeVar("T")

PAGINATION_PARAMS = ("start", "end")

# Offsets are unsigned 64-bit values
MAX_OFFSET = 2**64 - 1


def _parse_offset(params: Mapping[str, str], name: str) -> int:
    """
    Parse one offset.

    Accepts ASCII digits with an optional leading "+". Values above
    MAX_OFFSET are a parse error, not an out-of-range window.
    """
    raw = params[name]

    if not raw:
        raise PaginationParseError(name, raw, "cannot parse integer from empty string")

    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits and digits.isascii() and digits.isdigit()):
        raise PaginationParseError(name, raw, "invalid digit found in string")

    value = int(digits)
    if value > MAX_OFFSET:
        raise PaginationParseError(name, raw, "number too large to fit in target type")

    return value


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """
    Extract a pagination window from query parameters.

    Args:
        params: Query parameters of the request

    Returns:
        Pagination with start and end parsed

    Raises:
        MissingParametersError: If start or end (or both) is absent
        PaginationParseError: If start or end isn't a non-negative integer
    """
    if not all(name in params for name in PAGINATION_PARAMS):
        raise MissingParametersError(received=sorted(params))

    return Pagination(
        start=_parse_offset(params, "start"),
        end=_parse_offset(params, "end"),
    )


def paginate(items: Sequence[T], pagination: Pagination) -> list[T]:
    """
    Apply a window to a listing.

    Raises:
        InvalidPaginationError: Unless 0 <= start <= end <= len(items)
    """
    length = len(items)
    if pagination.start > pagination.end or pagination.end > length:
        raise InvalidPaginationError(pagination.start, pagination.end, length)

    return list(items[pagination.start:pagination.end])
