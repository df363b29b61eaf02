"""Query object describing one filtered-responses request."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from formfilter.schemas.filter import ResponseFilter

SubmissionStatus = Literal["in_progress", "finished"]
SortOrder = Literal["asc", "desc"]


class SubmissionQuery(BaseModel):
    """Everything needed to fetch, filter, and re-paginate submissions."""

    model_config = ConfigDict(frozen=True)

    form_id: str
    limit: int = Field(150, ge=0)
    offset: int = Field(0, ge=0)
    after_date: str | None = None
    before_date: str | None = None
    status: SubmissionStatus = "finished"
    include_edit_link: bool = False
    sort: SortOrder = "asc"
    authorization: str | None = Field(None, repr=False)
    filters: list[ResponseFilter] = Field(default_factory=list)

    def upstream_params(self, *, limit: int, offset: int) -> dict[str, Any]:
        """Return query parameters for one upstream page request.

        Filters, the caller's limit and the caller's offset are never sent
        upstream; the submissions API cannot evaluate filters and pages are
        always requested at the fixed upstream page size.
        """

        params: dict[str, Any] = {
            "limit": limit,
            "offset": offset,
            "status": self.status,
            "includeEditLink": "true" if self.include_edit_link else "false",
            "sort": self.sort,
        }
        if self.after_date is not None:
            params["afterDate"] = self.after_date
        if self.before_date is not None:
            params["beforeDate"] = self.before_date
        return params
