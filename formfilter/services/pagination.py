"""Fetch every upstream page a filtered query needs."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from formfilter.schemas.filter import ResponseFilter
from formfilter.schemas.query import SubmissionQuery
from formfilter.schemas.submission import Submission, SubmissionPage

logger = logging.getLogger(__name__)

# Upstream caps page size at 150 submissions.
RESPONSE_LIMIT = 150


class SubmissionsSource(Protocol):
    """Anything able to fetch one page of submissions."""

    async def fetch_page(
        self, query: SubmissionQuery, *, offset: int, limit: int
    ) -> SubmissionPage:
        """Return the page of submissions starting at ``offset``."""


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Submissions gathered for one query along with the upstream total."""

    submissions: list[Submission]
    declared_total: int
    first_page: SubmissionPage


def remaining_offsets(declared_total: int, page_size: int = RESPONSE_LIMIT) -> list[int]:
    """Return the offsets of every page after the first one."""

    if page_size <= 0 or declared_total <= page_size:
        return []
    page_total = math.ceil(declared_total / page_size)
    return [page * page_size for page in range(1, page_total)]


async def fetch_all(
    source: SubmissionsSource,
    query: SubmissionQuery,
    filters: Sequence[ResponseFilter],
) -> FetchResult:
    """Fetch the first page and, when filters are present, every other page.

    Without filters only the first page is requested.  Otherwise the remaining
    pages are fetched concurrently; the first failure cancels the pages
    still in flight and aborts the whole fetch.  Submissions are returned in
    page order.
    """

    first_page = await source.fetch_page(query, offset=0, limit=RESPONSE_LIMIT)
    declared_total = first_page.total_responses

    if not filters:
        return FetchResult(
            submissions=list(first_page.responses),
            declared_total=declared_total,
            first_page=first_page,
        )

    offsets = remaining_offsets(declared_total)
    logger.debug(
        "Form %s declares %s submissions; fetching %s additional page(s)",
        query.form_id,
        declared_total,
        len(offsets),
    )

    try:
        async with asyncio.TaskGroup() as group:
            tasks = [
                group.create_task(
                    source.fetch_page(query, offset=offset, limit=RESPONSE_LIMIT)
                )
                for offset in offsets
            ]
    except ExceptionGroup as failures:
        # Remaining pages are cancelled; surface the first failure as-is.
        raise failures.exceptions[0] from None

    submissions: list[Submission] = list(first_page.responses)
    for task in tasks:
        submissions.extend(task.result().responses)

    return FetchResult(
        submissions=submissions,
        declared_total=declared_total,
        first_page=first_page,
    )


__all__ = [
    "FetchResult",
    "RESPONSE_LIMIT",
    "SubmissionsSource",
    "fetch_all",
    "remaining_offsets",
]
