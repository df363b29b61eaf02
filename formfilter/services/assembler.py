"""Filter fetched submissions and re-paginate the survivors."""

from __future__ import annotations

import math
from collections.abc import Sequence

from formfilter.schemas.filter import ResponseFilter
from formfilter.schemas.submission import FilteredResponses, Submission
from formfilter.services.predicates import matches


def page_count(total_matching: int, limit: int) -> int:
    """Return how many pages of ``limit`` items hold ``total_matching`` items.

    A zero ``limit`` yields zero pages.
    """

    if limit <= 0:
        return 0
    return math.ceil(total_matching / limit)


def assemble(
    submissions: Sequence[Submission],
    filters: Sequence[ResponseFilter],
    offset: int,
    limit: int,
) -> FilteredResponses:
    """Keep matching submissions in order and slice the requested window."""

    matching = [submission for submission in submissions if matches(submission, filters)]
    start = max(offset, 0)
    window = matching[start : start + max(limit, 0)]
    return FilteredResponses(
        responses=window,
        total_responses=len(matching),
        page_count=page_count(len(matching), limit),
    )


__all__ = ["assemble", "page_count"]
