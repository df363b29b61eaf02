"""Tests covering the helper utilities that construct error responses."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from formfilter.schemas.error import ErrorType, ValidationErrorDetail
from formfilter.utils import error_responses
from formfilter.utils.error_responses import (
    build_error_response,
    build_validation_error_response,
)
from formfilter.utils.request_context import clear_request_id, set_request_id


def _freeze_timestamp(monkeypatch: pytest.MonkeyPatch, fixed: datetime) -> None:
    """Override ``_current_timestamp`` to yield the provided ``datetime``."""

    monkeypatch.setattr(error_responses, "_current_timestamp", lambda: fixed)


def test_build_validation_error_response_includes_context_metadata(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """The helper should embed the request ID and a timezone-aware timestamp."""

    fixed_timestamp = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)
    _freeze_timestamp(monkeypatch, fixed_timestamp)

    token = set_request_id("req-123")
    try:
        errors = [
            ValidationErrorDetail(
                field="query.limit",
                message="Input should be less than or equal to 150",
                value="500",
            )
        ]

        response = build_validation_error_response(
            message="Request validation failed",
            status_code=422,
            path="/api/forms/abc/filteredResponses",
            errors=errors,
        )

        assert response.request_id == "req-123"
        assert response.timestamp == fixed_timestamp
        assert response.errors == errors
        assert response.error == "Request validation failed"
    finally:
        clear_request_id(token)


def test_build_error_response_allows_request_id_override(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Explicit request identifiers should take precedence over context values."""

    fixed_timestamp = datetime(2024, 2, 2, 8, 30, 0, tzinfo=UTC)
    _freeze_timestamp(monkeypatch, fixed_timestamp)

    token = set_request_id("context-id")
    try:
        response = build_error_response(
            error_type=ErrorType.FILTER_ERROR,
            message="greater_than not supported for string values.",
            status_code=400,
            path="/api/forms/abc/filteredResponses",
            request_id="explicit-id",
        )
    finally:
        clear_request_id(token)

    assert response.request_id == "explicit-id"
    assert response.timestamp == fixed_timestamp
    assert response.model_dump(mode="json")["error"] == (
        "greater_than not supported for string values."
    )
