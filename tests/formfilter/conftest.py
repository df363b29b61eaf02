"""Shared fixtures for the filtering pipeline tests."""

from __future__ import annotations

import pytest

from formfilter.schemas.query import SubmissionQuery


@pytest.fixture
def base_query() -> SubmissionQuery:
    """Query for a form with no filters and default pagination."""
    return SubmissionQuery(form_id="cLZojxk94ous", authorization="Bearer test-key")
