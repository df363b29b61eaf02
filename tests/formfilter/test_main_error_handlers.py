"""Tests asserting ``formfilter.main`` exception handlers delegate to helpers."""

from __future__ import annotations

import json

import pytest
from fastapi import Request, status
from starlette.datastructures import Headers

import formfilter.main as formfilter_main
from formfilter.errors import ClientFilterError, MalformedInputError, UpstreamError
from formfilter.utils.request_context import clear_request_id, set_request_id


def _build_request(path: str = "/resource") -> Request:
    """Create a minimal ``Request`` suitable for invoking handlers."""

    scope = {
        "type": "http",
        "method": "GET",
        "path": path,
        "headers": Headers().raw,
    }
    return Request(scope)


@pytest.mark.asyncio
async def test_client_filter_handler_returns_bad_request() -> None:
    token = set_request_id("req-1")
    try:
        response = await formfilter_main.client_filter_exception_handler(
            _build_request("/api/forms/abc/filteredResponses"),
            ClientFilterError("Unsupported question type 'Hologram'"),
        )
    finally:
        clear_request_id(token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = json.loads(response.body.decode())
    assert body["error"] == "Unsupported question type 'Hologram'"
    assert body["error_type"] == "filter_error"
    assert body["request_id"] == "req-1"
    assert body["path"] == "/api/forms/abc/filteredResponses"


@pytest.mark.asyncio
async def test_malformed_input_handler_returns_bad_request() -> None:
    response = await formfilter_main.malformed_input_exception_handler(
        _build_request(), MalformedInputError("filters must be valid JSON")
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert json.loads(response.body.decode())["error_type"] == "malformed_input"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("exc", "expected_status"),
    [
        (UpstreamError("Invalid API key", status_code=401), 401),
        (UpstreamError("Failed to reach submissions API"), 500),
    ],
)
async def test_upstream_handler_uses_upstream_status(
    exc: UpstreamError, expected_status: int
) -> None:
    response = await formfilter_main.upstream_exception_handler(_build_request(), exc)

    assert response.status_code == expected_status
    body = json.loads(response.body.decode())
    assert body["error"] == exc.message
    assert body["status_code"] == expected_status


@pytest.mark.asyncio
async def test_generic_handler_hides_exception_details(monkeypatch) -> None:
    called: dict[str, object] = {}
    original = formfilter_main.build_error_response

    def fake_builder(**kwargs):
        called["kwargs"] = kwargs
        return original(**kwargs)

    monkeypatch.setattr(formfilter_main, "build_error_response", fake_builder)

    response = await formfilter_main.generic_exception_handler(
        _build_request("/boom"), RuntimeError("secret detail")
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert called["kwargs"]["path"] == "/boom"
    assert "secret detail" not in response.body.decode()
