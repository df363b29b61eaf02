"""HTTP client for the upstream paginated submissions API."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from fastapi import status
from pydantic import ValidationError

from formfilter.errors import UpstreamError
from formfilter.schemas.query import SubmissionQuery
from formfilter.schemas.submission import SubmissionPage

logger = logging.getLogger(__name__)

SUBMISSIONS_PATH = "/v1/api/forms/{form_id}/submissions"


def _upstream_message(response: httpx.Response) -> str:
    """Extract a readable error message from an upstream error response."""

    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]
    text = response.text.strip()
    return text or response.reason_phrase or f"HTTP {response.status_code}"


class SubmissionsClient:
    """Thin wrapper issuing page requests against the submissions endpoint.

    The ``httpx.AsyncClient`` is owned by the caller (the FastAPI lifespan in
    production, a ``MockTransport``-backed client in tests) so connection
    pooling is shared across requests while no request state is.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        base_url: str,
        timeout: float | None = None,
    ) -> None:
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def fetch_page(
        self, query: SubmissionQuery, *, offset: int, limit: int
    ) -> SubmissionPage:
        """Fetch one page of submissions starting at ``offset``.

        Raises:
            UpstreamError: when the request fails or upstream answers non-2xx.
        """

        url = self._base_url + SUBMISSIONS_PATH.format(form_id=query.form_id)
        headers: dict[str, str] = {}
        if query.authorization:
            headers["Authorization"] = query.authorization

        request_kwargs: dict[str, Any] = {
            "params": query.upstream_params(limit=limit, offset=offset),
            "headers": headers,
        }
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        try:
            response = await self._http.get(url, **request_kwargs)
        except httpx.HTTPError as exc:
            logger.error(
                "Submissions request for form %s at offset %s failed: %s",
                query.form_id,
                offset,
                exc,
            )
            raise UpstreamError(
                f"Failed to reach submissions API: {exc}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ) from exc

        if response.is_error:
            message = _upstream_message(response)
            logger.warning(
                "Submissions API returned %s for form %s at offset %s: %s",
                response.status_code,
                query.form_id,
                offset,
                message,
            )
            raise UpstreamError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(
                "Submissions API returned a non-JSON body",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ) from exc
        if not isinstance(payload, dict):
            raise UpstreamError(
                "Submissions API returned an unexpected payload",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        try:
            return SubmissionPage.from_payload(payload, offset=offset)
        except (TypeError, ValueError, ValidationError) as exc:
            raise UpstreamError(
                f"Submissions API returned a malformed page: {exc}",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            ) from exc


__all__ = ["SUBMISSIONS_PATH", "SubmissionsClient"]
