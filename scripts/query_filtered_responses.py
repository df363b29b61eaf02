"""Query a form's filtered responses straight from the submissions API.

Runs the same fetch/filter/re-paginate pipeline the HTTP endpoint uses,
without starting the server.

Usage:
    python scripts/query_filtered_responses.py cLZojxk94ous --api-key $FILLOUT_API_KEY
    python scripts/query_filtered_responses.py cLZojxk94ous \
        --filters '[{"id": "4KC356y4M6", "condition": "greater_than", "value": 5}]'
"""

import asyncio
import json
import sys

import click
import httpx

from formfilter.errors import FormFilterError
from formfilter.schemas.query import SubmissionQuery
from formfilter.services.filtered_responses_service import FilteredResponsesService
from formfilter.services.predicates import parse_filters
from formfilter.services.submissions_client import SubmissionsClient
from formfilter.settings import get_settings


@click.command()
@click.argument("form_id")
@click.option("--api-key", envvar="FILLOUT_API_KEY", help="Bearer token for the submissions API")
@click.option("--filters", "raw_filters", default=None, help="JSON array of filter objects")
@click.option("--limit", type=click.IntRange(1, 150), default=150, show_default=True)
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True)
@click.option("--after-date", default=None, help="YYYY-MM-DDTHH:mm:ss.sssZ")
@click.option("--before-date", default=None, help="YYYY-MM-DDTHH:mm:ss.sssZ")
@click.option(
    "--status",
    "submission_status",
    type=click.Choice(["in_progress", "finished"]),
    default="finished",
    show_default=True,
)
@click.option("--sort", type=click.Choice(["asc", "desc"]), default="asc", show_default=True)
@click.option("--include-edit-link", is_flag=True)
def main(
    form_id: str,
    api_key: str | None,
    raw_filters: str | None,
    limit: int,
    offset: int,
    after_date: str | None,
    before_date: str | None,
    submission_status: str,
    sort: str,
    include_edit_link: bool,
):
    """Print the filtered responses for FORM_ID as JSON."""
    try:
        query = SubmissionQuery(
            form_id=form_id,
            limit=limit,
            offset=offset,
            after_date=after_date,
            before_date=before_date,
            status=submission_status,
            include_edit_link=include_edit_link,
            sort=sort,
            authorization=f"Bearer {api_key}" if api_key else None,
            filters=parse_filters(raw_filters),
        )
        payload = asyncio.run(run_query(query))
    except FormFilterError as exc:
        click.echo(json.dumps({"error": exc.message}, indent=2), err=True)
        sys.exit(1)

    click.echo(json.dumps(payload, indent=2))


async def run_query(query: SubmissionQuery) -> dict:
    """Run the pipeline with a short-lived HTTP client."""
    settings = get_settings()
    async with httpx.AsyncClient() as http_client:
        client = SubmissionsClient(
            http_client,
            base_url=settings.normalized_upstream_base_url,
            timeout=settings.upstream_timeout_seconds,
        )
        return await FilteredResponsesService(client).get_filtered_responses(query)


if __name__ == "__main__":
    main()
