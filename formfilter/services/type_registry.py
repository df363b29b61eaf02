"""Mapping from upstream question types to comparison domains."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from formfilter.errors import ClientFilterError


class ValueDomain(str, Enum):
    """How values of a question type are compared."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"


# Adding a question type is a table edit; keep the keys sorted.
QUESTION_TYPE_DOMAINS: MappingProxyType[str, ValueDomain] = MappingProxyType(
    {
        "Address": ValueDomain.STRING,
        "AudioRecording": ValueDomain.STRING,
        "Calcom": ValueDomain.STRING,
        "Calendly": ValueDomain.STRING,
        "Captcha": ValueDomain.STRING,
        "ColorPicker": ValueDomain.STRING,
        "CurrencyInput": ValueDomain.STRING,
        "DatePicker": ValueDomain.DATE,
        "DateTimePicker": ValueDomain.DATE,
        "Dropdown": ValueDomain.STRING,
        "EmailInput": ValueDomain.STRING,
        "FileUpload": ValueDomain.STRING,
        "ImagePicker": ValueDomain.STRING,
        "LocationCoordinates": ValueDomain.STRING,
        "LongAnswer": ValueDomain.STRING,
        "MultipleChoice": ValueDomain.STRING,
        "NumberInput": ValueDomain.NUMBER,
        "OpinionScale": ValueDomain.STRING,
        "Password": ValueDomain.STRING,
        "Payment": ValueDomain.STRING,
        "PhoneNumber": ValueDomain.STRING,
        "Ranking": ValueDomain.NUMBER,
        "RecordPicker": ValueDomain.STRING,
        "ShortAnswer": ValueDomain.STRING,
        "Signature": ValueDomain.STRING,
        "Slider": ValueDomain.NUMBER,
        "StarRating": ValueDomain.NUMBER,
        "TimePicker": ValueDomain.DATE,
        "URLInput": ValueDomain.STRING,
    }
)


def domain_of(question_type: str) -> ValueDomain:
    """Return the comparison domain for ``question_type``.

    Raises:
        ClientFilterError: if the question type is not a known one.
    """

    try:
        return QUESTION_TYPE_DOMAINS[question_type]
    except KeyError:
        raise ClientFilterError(
            f"Unsupported question type {question_type!r}; filters apply to "
            "date, number, or string questions only."
        ) from None


__all__ = ["QUESTION_TYPE_DOMAINS", "ValueDomain", "domain_of"]
