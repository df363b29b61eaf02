"""Exception hierarchy shared by the filtering pipeline and the HTTP layer."""

from __future__ import annotations

from fastapi import status

__all__ = [
    "ClientFilterError",
    "FormFilterError",
    "MalformedInputError",
    "UpstreamError",
]


class FormFilterError(Exception):
    """Base class for failures that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ClientFilterError(FormFilterError):
    """Raised when a filter cannot be evaluated against a submission.

    Covers unsupported conditions for a value domain, unknown question types,
    filters that target a question the submission does not carry, and values
    that do not belong to the question's domain.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class MalformedInputError(FormFilterError):
    """Raised when the ``filters`` payload is not a list of filter objects."""

    status_code = status.HTTP_400_BAD_REQUEST


class UpstreamError(FormFilterError):
    """Raised when the submissions API call fails.

    ``status_code`` mirrors the upstream response status when one was
    received and falls back to 500 for transport-level failures.
    """
