"""Builders for upstream-shaped submissions and an in-memory submissions source."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from formfilter.schemas.query import SubmissionQuery
from formfilter.schemas.submission import Submission, SubmissionPage


def submission_payload(submission_id: str, *questions: dict[str, Any]) -> dict[str, Any]:
    """Return an upstream-shaped submission body."""

    return {
        "submissionId": submission_id,
        "submissionTime": "2024-05-16T23:20:05.324Z",
        "lastUpdatedAt": "2024-05-16T23:20:05.324Z",
        "questions": list(questions),
        "calculations": [],
        "urlParameters": [],
        "quiz": {},
        "documents": [],
    }


def question(
    question_id: str, question_type: str, value: Any, name: str | None = None
) -> dict[str, Any]:
    return {"id": question_id, "name": name or question_id, "type": question_type, "value": value}


def make_submission(submission_id: str, *questions: dict[str, Any]) -> Submission:
    return Submission.model_validate(submission_payload(submission_id, *questions))


def numbered_submissions(count: int, start: int = 0) -> list[dict[str, Any]]:
    """Submissions ``sub-<n>`` each carrying a ``score`` NumberInput equal to ``n``."""

    return [
        submission_payload(f"sub-{n}", question("score", "NumberInput", n))
        for n in range(start, start + count)
    ]


class FakeSource:
    """In-memory stand-in for :class:`SubmissionsClient`.

    Serves slices of ``payloads`` and records every requested offset.  Offsets
    listed in ``failing_offsets`` raise the exception produced by ``error``.
    """

    def __init__(
        self,
        payloads: list[dict[str, Any]],
        *,
        declared_total: int | None = None,
        failing_offsets: set[int] | None = None,
        error: Callable[[], Exception] | None = None,
    ) -> None:
        self._payloads = payloads
        self._declared_total = len(payloads) if declared_total is None else declared_total
        self._failing_offsets = failing_offsets or set()
        self._error = error
        self.calls: list[tuple[int, int]] = []

    async def fetch_page(
        self, query: SubmissionQuery, *, offset: int, limit: int
    ) -> SubmissionPage:
        self.calls.append((offset, limit))
        if offset in self._failing_offsets and self._error is not None:
            raise self._error()
        body = {
            "responses": self._payloads[offset : offset + limit],
            "totalResponses": self._declared_total,
            "pageCount": -(-self._declared_total // limit) if limit else 0,
        }
        return SubmissionPage.from_payload(body, offset=offset)

    @property
    def offsets(self) -> list[int]:
        return [offset for offset, _ in self.calls]
