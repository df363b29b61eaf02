"""Tests for the question type to value domain table."""

from __future__ import annotations

import pytest

from formfilter.errors import ClientFilterError
from formfilter.services.type_registry import QUESTION_TYPE_DOMAINS, ValueDomain, domain_of


@pytest.mark.parametrize(
    ("question_type", "expected"),
    [
        ("ShortAnswer", ValueDomain.STRING),
        ("MultipleChoice", ValueDomain.STRING),
        ("CurrencyInput", ValueDomain.STRING),
        ("NumberInput", ValueDomain.NUMBER),
        ("StarRating", ValueDomain.NUMBER),
        ("Slider", ValueDomain.NUMBER),
        ("DatePicker", ValueDomain.DATE),
        ("DateTimePicker", ValueDomain.DATE),
        ("TimePicker", ValueDomain.DATE),
    ],
)
def test_domain_of_known_types(question_type: str, expected: ValueDomain) -> None:
    assert domain_of(question_type) is expected


def test_registry_covers_every_question_type() -> None:
    assert len(QUESTION_TYPE_DOMAINS) == 29
    assert set(QUESTION_TYPE_DOMAINS.values()) == set(ValueDomain)


def test_unknown_type_is_a_client_error() -> None:
    with pytest.raises(ClientFilterError) as excinfo:
        domain_of("Hologram")

    assert excinfo.value.status_code == 400
    assert "Hologram" in excinfo.value.message


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        QUESTION_TYPE_DOMAINS["Hologram"] = ValueDomain.STRING  # type: ignore[index]
