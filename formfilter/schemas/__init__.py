"""Pydantic schemas for upstream payloads and API responses."""

from formfilter.schemas.filter import FilterCondition, ResponseFilter  # noqa: F401
from formfilter.schemas.query import SubmissionQuery  # noqa: F401
from formfilter.schemas.submission import (  # noqa: F401
    Answer,
    FilteredResponses,
    Submission,
    SubmissionPage,
)
