"""Compose filters into a per-submission predicate."""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import ValidationError

from formfilter.errors import ClientFilterError, MalformedInputError
from formfilter.schemas.filter import ResponseFilter
from formfilter.schemas.submission import Submission
from formfilter.services.conditions import evaluate
from formfilter.services.type_registry import domain_of


def parse_filters(raw: str | None) -> list[ResponseFilter]:
    """Decode the ``filters`` query parameter.

    ``None`` or blank text means no filtering.  Anything that is not a JSON
    array of ``{"id", "condition", "value"}`` objects raises
    :class:`MalformedInputError`.
    """

    if raw is None or not raw.strip():
        return []

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"filters must be valid JSON: {exc.msg}") from exc

    if payload is None:
        return []
    if not isinstance(payload, list):
        raise MalformedInputError("filters must be a JSON array of filter objects")

    try:
        return [ResponseFilter.model_validate(item) for item in payload]
    except ValidationError as exc:
        raise MalformedInputError(
            f"filters contain {exc.error_count()} invalid entr"
            f"{'y' if exc.error_count() == 1 else 'ies'}: {exc.errors()[0]['msg']}"
        ) from exc


def matches(submission: Submission, filters: Sequence[ResponseFilter]) -> bool:
    """Return ``True`` when ``submission`` satisfies every filter.

    A filter targeting a question the submission does not carry is a client
    error rather than a silent non-match.
    """

    for response_filter in filters:
        answer = submission.find_answer(response_filter.id)
        if answer is None:
            raise ClientFilterError(
                f"Question {response_filter.id!r} not found on submission "
                f"{submission.submission_id!r}"
            )
        domain = domain_of(answer.type)
        if not evaluate(
            domain, response_filter.condition, answer.value, response_filter.value
        ):
            return False
    return True


__all__ = ["matches", "parse_filters"]
