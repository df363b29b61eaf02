from typing import Any, Literal

from fastapi import APIRouter, Depends, Header, Query

from formfilter.schemas.error import ErrorResponse
from formfilter.schemas.query import SubmissionQuery
from formfilter.services.dependencies import get_filtered_responses_service
from formfilter.services.filtered_responses_service import FilteredResponsesService
from formfilter.services.pagination import RESPONSE_LIMIT
from formfilter.services.predicates import parse_filters

router = APIRouter()

# Upstream only accepts millisecond-precision UTC timestamps.
ISO_TIMESTAMP_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$"


@router.get(
    "/{form_id}/filteredResponses",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid filters"},
        500: {"model": ErrorResponse, "description": "Submissions API failure"},
    },
)
async def get_filtered_responses(
    form_id: str,
    limit: int = Query(
        RESPONSE_LIMIT, ge=1, le=RESPONSE_LIMIT, description="Number of responses to return"
    ),
    offset: int = Query(0, ge=0, description="Number of matching responses to skip"),
    after_date: str | None = Query(
        None,
        alias="afterDate",
        pattern=ISO_TIMESTAMP_PATTERN,
        description="Only responses submitted after this instant (YYYY-MM-DDTHH:mm:ss.sssZ)",
    ),
    before_date: str | None = Query(
        None,
        alias="beforeDate",
        pattern=ISO_TIMESTAMP_PATTERN,
        description="Only responses submitted before this instant (YYYY-MM-DDTHH:mm:ss.sssZ)",
    ),
    submission_status: Literal["in_progress", "finished"] = Query(
        "finished", alias="status", description="Submission status to fetch"
    ),
    include_edit_link: bool = Query(
        False, alias="includeEditLink", description="Include edit links in responses"
    ),
    sort: Literal["asc", "desc"] = Query("asc", description="Sort by submission time"),
    filters: str | None = Query(
        None, description="JSON array of {id, condition, value} filter objects"
    ),
    authorization: str | None = Header(None),
    service: FilteredResponsesService = Depends(get_filtered_responses_service),
) -> dict[str, Any]:
    """List a form's responses that satisfy every supplied filter."""
    query = SubmissionQuery(
        form_id=form_id,
        limit=limit,
        offset=offset,
        after_date=after_date,
        before_date=before_date,
        status=submission_status,
        include_edit_link=include_edit_link,
        sort=sort,
        authorization=authorization,
        filters=parse_filters(filters),
    )
    return await service.get_filtered_responses(query)
