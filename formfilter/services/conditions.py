"""Evaluate a single filter condition against a question's value.

Each value domain accepts its own set of conditions.  Unsupported conditions
and values that cannot be read in the question's domain raise
:class:`~formfilter.errors.ClientFilterError`; they are never treated as a
non-match.
"""

from __future__ import annotations

import math
import operator
import re
from collections.abc import Callable
from datetime import UTC, date, datetime, time
from typing import Any

from formfilter.errors import ClientFilterError
from formfilter.schemas.filter import FilterCondition
from formfilter.services.type_registry import ValueDomain

Comparator = Callable[[Any, Any], bool]

# Day on which bare times of day are anchored before comparison.
TIME_REFERENCE_DATE = date(1970, 1, 1)
_TIME_OF_DAY = re.compile(r"^\d{2}:\d{2}")

_EQUALITY: dict[str, Comparator] = {
    FilterCondition.EQUALS.value: operator.eq,
    FilterCondition.DOES_NOT_EQUAL.value: operator.ne,
}
_ORDERED: dict[str, Comparator] = {
    **_EQUALITY,
    FilterCondition.GREATER_THAN.value: operator.gt,
    FilterCondition.LESS_THAN.value: operator.lt,
}

DOMAIN_CONDITIONS: dict[ValueDomain, dict[str, Comparator]] = {
    ValueDomain.STRING: _EQUALITY,
    ValueDomain.NUMBER: _ORDERED,
    ValueDomain.DATE: _ORDERED,
}


def _quoted(conditions: dict[str, Comparator]) -> list[str]:
    return [f'"{name}"' for name in conditions]


def _unsupported_condition(domain: ValueDomain, condition: str) -> ClientFilterError:
    names = _quoted(DOMAIN_CONDITIONS[domain])
    if domain is ValueDomain.STRING:
        return ClientFilterError(
            f"{condition} not supported for string values. "
            f"Must be either {names[0]} or {names[1]}."
        )
    return ClientFilterError(
        f"{condition} not supported for {domain.value} values. "
        f"Must be one of {', '.join(names)}."
    )


def _to_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        raise ClientFilterError(f"Expected a numeric value, received {value!r}")
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        raise ClientFilterError(
            f"Expected a finite numeric value, received {value!r}"
        ) from None
    if not math.isfinite(number):
        raise ClientFilterError(f"Expected a finite numeric value, received {value!r}")
    return number


def parse_instant(value: Any) -> datetime:
    """Parse an ISO-8601 date-time string into an aware ``datetime``.

    A trailing ``Z`` is accepted and naive values are read as UTC so that
    differently formatted representations of one instant compare equal.
    Time-of-day text such as ``"09:30"`` (TimePicker answers) is placed on
    ``TIME_REFERENCE_DATE`` so times compare with each other.
    """

    if not isinstance(value, str) or not value.strip():
        raise ClientFilterError(f"Expected an ISO-8601 date-time, received {value!r}")
    text = value.strip().replace("Z", "+00:00")
    try:
        if _TIME_OF_DAY.match(text):
            parsed = datetime.combine(TIME_REFERENCE_DATE, time.fromisoformat(text))
        else:
            parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ClientFilterError(
            f"Expected an ISO-8601 date-time, received {value!r}"
        ) from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


_COERCERS: dict[ValueDomain, Callable[[Any], Any]] = {
    ValueDomain.STRING: lambda value: value,
    ValueDomain.NUMBER: _to_number,
    ValueDomain.DATE: parse_instant,
}


def evaluate(
    domain: ValueDomain, condition: str, actual: Any, expected: Any
) -> bool:
    """Return whether ``actual`` satisfies ``condition`` against ``expected``.

    Strings compare exactly, ``None`` included. For number and date questions
    an unanswered value (``None``) only satisfies ``does_not_equal``.
    """

    comparator = DOMAIN_CONDITIONS[domain].get(condition)
    if comparator is None:
        raise _unsupported_condition(domain, condition)

    coerce = _COERCERS[domain]
    expected_value = coerce(expected)
    if actual is None and domain is not ValueDomain.STRING:
        return condition == FilterCondition.DOES_NOT_EQUAL.value
    return comparator(coerce(actual), expected_value)


__all__ = ["DOMAIN_CONDITIONS", "evaluate", "parse_instant"]
