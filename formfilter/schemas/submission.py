"""Models describing form submissions returned by the upstream API.

Upstream records carry more keys than the filtering pipeline cares about
(calculations, URL parameters, quiz scores, documents, edit links).  The models
declare only the attributes the pipeline reads and keep every other key via
``extra="allow"`` so re-serialised submissions match what upstream sent.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Answer(BaseModel):
    """A single question value inside a submission."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    name: str | None = None
    type: str
    value: Any = None


class Submission(BaseModel):
    """One respondent's complete record for a form."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    submission_id: str = Field(..., alias="submissionId")
    questions: list[Answer] = Field(default_factory=list)

    def find_answer(self, question_id: str) -> Answer | None:
        """Return the answer for ``question_id`` or ``None`` when absent."""

        return next(
            (answer for answer in self.questions if answer.id == question_id), None
        )


class SubmissionPage(BaseModel):
    """One page fetched from the upstream submissions endpoint."""

    model_config = ConfigDict(frozen=True)

    responses: list[Submission]
    total_responses: int
    page_count: int | None = None
    offset: int = 0
    # Untouched upstream body, forwarded as-is when no filters are requested.
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any], *, offset: int) -> SubmissionPage:
        """Build a page from the decoded JSON body of an upstream response."""

        return cls(
            responses=[
                Submission.model_validate(item) for item in payload.get("responses", [])
            ],
            total_responses=int(payload.get("totalResponses", 0)),
            page_count=payload.get("pageCount"),
            offset=offset,
            raw=payload,
        )


class FilteredResponses(BaseModel):
    """Re-paginated set of submissions that satisfied every filter."""

    model_config = ConfigDict(populate_by_name=True)

    responses: list[Submission]
    total_responses: int = Field(..., alias="totalResponses")
    page_count: int = Field(..., alias="pageCount")

    def to_payload(self) -> dict[str, Any]:
        """Serialise using the upstream camelCase key names."""

        return self.model_dump(by_alias=True, mode="json")
