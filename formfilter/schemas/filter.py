"""Filter definitions supplied by API callers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class FilterCondition(str, Enum):
    """Comparison operators understood by the condition evaluator."""

    EQUALS = "equals"
    DOES_NOT_EQUAL = "does_not_equal"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"


class ResponseFilter(BaseModel):
    """A single ``(question id, condition, value)`` constraint.

    ``condition`` stays a plain string so unsupported operators survive parsing
    and are rejected by the evaluator with a message listing the operators
    valid for the targeted question.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    condition: str
    value: Any = None
