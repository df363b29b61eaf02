"""FastAPI dependency wiring for the service layer.

Separating dependency factories from service implementation modules keeps the
latter free of web-layer concerns, enabling reuse in tests and in the
command-line query script.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from formfilter.services.filtered_responses_service import FilteredResponsesService
from formfilter.services.submissions_client import SubmissionsClient
from formfilter.settings import AppSettings, get_settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Return the shared HTTP client opened by the application lifespan."""

    return request.app.state.http_client


def get_submissions_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: AppSettings = Depends(get_settings),
) -> SubmissionsClient:
    """Build a :class:`SubmissionsClient` bound to the configured upstream."""

    return SubmissionsClient(
        http_client,
        base_url=settings.normalized_upstream_base_url,
        timeout=settings.upstream_timeout_seconds,
    )


def get_filtered_responses_service(
    client: SubmissionsClient = Depends(get_submissions_client),
) -> FilteredResponsesService:
    """Provide a request-scoped :class:`FilteredResponsesService`."""

    return FilteredResponsesService(client)


__all__ = [
    "get_filtered_responses_service",
    "get_http_client",
    "get_submissions_client",
]
