# =============================================================================
# tests/test_exceptions.py - Error Taxonomy Tests
# =============================================================================
# Every ErrorKind has a status in both tables, and the legacy table differs
# from the conventional one only for PARSE_ERROR and QUESTION_NOT_FOUND.
# =============================================================================

import pytest

from app.exceptions import (
    CONVENTIONAL_STATUS_CODES,
    LEGACY_STATUS_CODES,
    ErrorKind,
    MissingParametersError,
    QuestionNotFoundError,
    status_for,
)


class TestStatusTables:
    """Tests for the kind -> status mapping."""

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_mapped(self, kind):
        assert kind in LEGACY_STATUS_CODES
        assert kind in CONVENTIONAL_STATUS_CODES

    @pytest.mark.parametrize(
        "kind, legacy, conventional",
        [
            (ErrorKind.PARSE_ERROR, 416, 400),
            (ErrorKind.QUESTION_NOT_FOUND, 416, 404),
            (ErrorKind.MISSING_PARAMETERS, 400, 400),
            (ErrorKind.INVALID_PAGINATION, 400, 400),
            (ErrorKind.CORS_FORBIDDEN, 403, 403),
            (ErrorKind.INVALID_BODY, 422, 422),
            (ErrorKind.ROUTE_NOT_FOUND, 404, 404),
        ],
    )
    def test_status_for(self, kind, legacy, conventional):
        assert status_for(kind, legacy=True) == legacy
        assert status_for(kind, legacy=False) == conventional


class TestExceptionBodies:
    """Tests for to_dict()."""

    def test_not_found_body(self):
        body = QuestionNotFoundError("7").to_dict()

        assert body["detail"] == "Question not found"
        assert body["code"] == "QUESTION_NOT_FOUND"
        assert body["details"] == {"question_id": "7"}
        assert "suggestion" in body

    def test_details_omitted_when_empty(self):
        body = MissingParametersError().to_dict()

        assert "details" not in body
        assert body["detail"] == "Missing parameters"
