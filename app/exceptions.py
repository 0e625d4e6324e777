# =============================================================================
# app/exceptions.py - Error Taxonomy and Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every failure the API can report belongs to one ErrorKind. The kind decides
# the HTTP status through status_for(), so handlers never pick status codes
# themselves.
#
# Two status tables exist:
# - LEGACY: matches the responses of earlier releases, which report
#   "not found" and "bad integer" as 416 Range Not Satisfiable
# - CONVENTIONAL: 404 / 400 for those two kinds
# settings.LEGACY_STATUS_CODES selects between them.
# =============================================================================

import logging
from enum import Enum
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Every failure the API can report."""
    PARSE_ERROR = "PARSE_ERROR"
    MISSING_PARAMETERS = "MISSING_PARAMETERS"
    QUESTION_NOT_FOUND = "QUESTION_NOT_FOUND"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    CORS_FORBIDDEN = "CORS_FORBIDDEN"
    INVALID_BODY = "INVALID_BODY"
    ROUTE_NOT_FOUND = "ROUTE_NOT_FOUND"


# =============================================================================
# Status Tables
# =============================================================================

CONVENTIONAL_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.PARSE_ERROR: 400,
    ErrorKind.MISSING_PARAMETERS: 400,
    ErrorKind.QUESTION_NOT_FOUND: 404,
    ErrorKind.INVALID_PAGINATION: 400,
    ErrorKind.CORS_FORBIDDEN: 403,
    ErrorKind.INVALID_BODY: 422,
    ErrorKind.ROUTE_NOT_FOUND: 404,
}

LEGACY_STATUS_CODES: dict[ErrorKind, int] = {
    **CONVENTIONAL_STATUS_CODES,
    ErrorKind.PARSE_ERROR: 416,
    ErrorKind.QUESTION_NOT_FOUND: 416,
}

# Both tables must cover every kind
for _table in (CONVENTIONAL_STATUS_CODES, LEGACY_STATUS_CODES):
    _missing = set(ErrorKind) - set(_table)
    if _missing:
        raise RuntimeError(f"No status code for error kinds: {sorted(_missing)}")


def status_for(kind: ErrorKind, legacy: bool | None = None) -> int:
    """
    Look up the HTTP status for an error kind.

    Args:
        kind: The error kind
        legacy: Use the legacy table. Defaults to settings.LEGACY_STATUS_CODES

    Returns:
        HTTP status code
    """
    if legacy is None:
        legacy = settings.LEGACY_STATUS_CODES
    table = LEGACY_STATUS_CODES if legacy else CONVENTIONAL_STATUS_CODES
    return table[kind]


# =============================================================================
# Base Exception
# =============================================================================

class AskBoardException(Exception):
    """
    Base exception for AskBoard API.

    All domain failures inherit from this class and carry an ErrorKind.
    The HTTP status is derived from the kind when the response is built.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.suggestion = suggestion
        self.details = details or {}

    @property
    def code(self) -> str:
        return self.kind.value

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Pagination Exceptions
# =============================================================================

class PaginationParseError(AskBoardException):
    """Raised when start or end is not a non-negative integer."""

    def __init__(self, parameter: str, value: str, reason: str):
        super().__init__(
            message=f"Cannot parse parameter: {parameter}={value!r} ({reason})",
            kind=ErrorKind.PARSE_ERROR,
            suggestion="Pass start and end as non-negative integers, e.g. ?start=0&end=10",
            details={"parameter": parameter, "value": value, "reason": reason},
        )
        self.parameter = parameter
        self.value = value
        self.reason = reason


class MissingParametersError(AskBoardException):
    """Raised when query parameters are given without both start and end."""

    def __init__(self, received: list[str] | None = None):
        super().__init__(
            message="Missing parameters",
            kind=ErrorKind.MISSING_PARAMETERS,
            suggestion="Provide both start and end, or no query parameters at all",
            details={"received": received} if received else None,
        )


class InvalidPaginationError(AskBoardException):
    """Raised when start > end or end is past the end of the listing."""

    def __init__(self, start: int, end: int, length: int):
        super().__init__(
            message=(
                "Invalid pagination range: start cannot be greater than end "
                "or out of bounds"
            ),
            kind=ErrorKind.INVALID_PAGINATION,
            suggestion=f"Use 0 <= start <= end <= {length}",
            details={"start": start, "end": end, "length": length},
        )


# =============================================================================
# Question Exceptions
# =============================================================================

class QuestionNotFoundError(AskBoardException):
    """Raised when a question ID doesn't exist."""

    def __init__(self, question_id: str):
        super().__init__(
            message="Question not found",
            kind=ErrorKind.QUESTION_NOT_FOUND,
            suggestion="Check that the question id is correct and hasn't been deleted",
            details={"question_id": question_id},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

def error_response(
    kind: ErrorKind,
    content: dict[str, Any],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON response for an error kind."""
    return JSONResponse(
        status_code=status_for(kind),
        content=content,
        headers=headers,
    )


async def askboard_exception_handler(
    request: Request,
    exc: AskBoardException
) -> JSONResponse:
    """
    Convert AskBoardException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error kind
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.code} {exc.message}")
    return error_response(exc.kind, exc.to_dict())


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Covers malformed JSON bodies and missing or mistyped form fields.
    """
    logger.warning(f"{request.method} {request.url.path} rejected: invalid body")
    return error_response(
        ErrorKind.INVALID_BODY,
        {
            "detail": "Request body deserialize error",
            "code": ErrorKind.INVALID_BODY.value,
            "errors": jsonable_errors(exc),
        },
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle framework-level HTTP errors.

    Unknown paths and known paths with an unsupported method are both
    reported as "Route not found".
    """
    if exc.status_code in (404, 405):
        return error_response(
            ErrorKind.ROUTE_NOT_FOUND,
            {"detail": "Route not found", "code": ErrorKind.ROUTE_NOT_FOUND.value},
        )

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Reduce pydantic error entries to JSON-safe location/message pairs."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
