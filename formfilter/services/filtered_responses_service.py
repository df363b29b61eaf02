from __future__ import annotations

import logging
from typing import Any

from formfilter.schemas.query import SubmissionQuery
from formfilter.services.assembler import assemble
from formfilter.services.pagination import SubmissionsSource, fetch_all

logger = logging.getLogger(__name__)


class FilteredResponsesService:
    """Fetch, filter, and re-paginate submissions for a single request."""

    def __init__(self, source: SubmissionsSource) -> None:
        self._source = source

    async def get_filtered_responses(self, query: SubmissionQuery) -> dict[str, Any]:
        """Return the JSON payload answering ``query``.

        Without filters the upstream first page is forwarded untouched.
        """

        result = await fetch_all(self._source, query, query.filters)

        if not query.filters:
            logger.debug(
                "No filters for form %s; forwarding upstream page", query.form_id
            )
            return result.first_page.raw

        filtered = assemble(result.submissions, query.filters, query.offset, query.limit)
        logger.info(
            "Form %s: %s of %s submissions matched %s filter(s); returning %s",
            query.form_id,
            filtered.total_responses,
            len(result.submissions),
            len(query.filters),
            len(filtered.responses),
        )
        return filtered.to_payload()


__all__ = ["FilteredResponsesService"]
