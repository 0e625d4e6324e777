# =============================================================================
# app/middleware.py - CORS Middleware
# =============================================================================
# Starlette's CORSMiddleware answers a rejected preflight with
# 400 "Disallowed CORS ...". This API reports it as CORS_FORBIDDEN (403)
# with the same JSON error body as every other failure.
# =============================================================================

import logging

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

from app.exceptions import ErrorKind, error_response

logger = logging.getLogger(__name__)


class ForbiddingCORSMiddleware(CORSMiddleware):
    """CORSMiddleware that rejects disallowed preflights with CORS_FORBIDDEN."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 400:
            return response

        logger.warning(
            f"CORS preflight rejected: origin={request_headers.get('origin')} "
            f"method={request_headers.get('access-control-request-method')} "
            f"headers={request_headers.get('access-control-request-headers')} "
            f"({response.body.decode(errors='replace')})"
        )
        return error_response(
            ErrorKind.CORS_FORBIDDEN,
            {"detail": "CORS request forbidden", "code": ErrorKind.CORS_FORBIDDEN.value},
        )
