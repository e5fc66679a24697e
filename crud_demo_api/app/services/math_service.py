"""
Service layer for the average calculation.

Incoming values are parsed one by one by ``parse_numbers`` into a
``NumbersParseResult`` instead of being silently coerced.  Accepted
values:

* JSON numbers,
* booleans, counted as 1 and 0,
* strings holding an ASCII decimal or ``0x``/``0o``/``0b`` integer
  literal, or an ASCII decimal float; surrounding whitespace is ignored.

Everything else is rejected: ``null``, empty strings, arrays, objects,
non-numeric text and non-finite values such as NaN or Infinity.  The
first rejected element is reported back to the caller.

Every value is converted to ``float`` and the sum is accumulated left
to right with plain ``+`` starting from 0.0, so large integers round
exactly as IEEE-754 doubles do.  ``sum()`` is avoided because newer
interpreters use compensated summation for floats.  Integral results
are rendered as JSON integers (``25`` rather than ``25.0``).
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from crud_demo_api.app.core.config import settings
from crud_demo_api.app.core.errors import ValidationError
from crud_demo_api.app.schemas.average import AverageInput, AverageResponse, AverageResult

logger = logging.getLogger(__name__)

Number = Union[int, float]

AVERAGE_INFO = "This endpoint demonstrates reading data from the JSON body."

_PREFIXED_INT = ("0x", "0o", "0b")


@dataclass
class NumbersParseResult:
    """Outcome of ``parse_numbers``.

    ``values`` holds the parsed numbers when ``ok`` is true.  On failure
    ``bad_index`` and ``bad_value`` name the first element that could
    not be parsed.
    """

    ok: bool
    values: List[Number] = field(default_factory=list)
    bad_index: Optional[int] = None
    bad_value: Any = None


def parse_number(value: Any) -> Optional[Number]:
    """Parse a single JSON value into a finite number, or return ``None``."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    text = value.strip()
    # int() and float() accept digit separators and any Unicode digit,
    # literals do not.
    if not text or not text.isascii() or "_" in text:
        return None
    if text.lower().startswith(_PREFIXED_INT):
        try:
            return int(text, 0)
        except ValueError:
            return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def parse_numbers(values: List[Any]) -> NumbersParseResult:
    parsed: List[Number] = []
    for index, value in enumerate(values):
        number = parse_number(value)
        if number is None:
            return NumbersParseResult(ok=False, bad_index=index, bad_value=value)
        parsed.append(number)
    return NumbersParseResult(ok=True, values=parsed)


def invalid_body_payload() -> dict:
    base = settings.public_url
    return {
        "error": 'Missing or invalid "numbers" array in JSON body.',
        "how_to_use": 'Send a POST request with JSON body containing "numbers": an array of numbers.',
        "expected_body_schema": {"numbers": "number[] (required, non-empty)"},
        "example_body": {"numbers": [10, 20, 30, 40]},
        "example_curl": (
            f"curl -X POST {base}/math/average "
            "-H \"Content-Type: application/json\" "
            "-d '{\"numbers\":[10,20,30,40]}'"
        ),
    }


def non_numeric_payload(numbers: List[Any], result: NumbersParseResult) -> dict:
    return {
        "error": 'All elements in "numbers" must be valid numeric values.',
        "received": numbers,
        "invalid_element": {"index": result.bad_index, "value": result.bad_value},
        "example_valid_numbers": [1, 2.5, 100],
    }


def out_of_range_payload(numbers: List[Any]) -> dict:
    return {
        "error": 'The sum of "numbers" is too large to average.',
        "received": numbers,
        "example_valid_numbers": [1, 2.5, 100],
    }


def as_json_number(value: float) -> Number:
    return int(value) if value.is_integer() else value


class MathService:
    """Arithmetic over validated number sequences."""

    @staticmethod
    def accumulate(values: List[Number]) -> float:
        total = 0.0
        for value in values:
            total = total + float(value)
        return total

    @classmethod
    async def average(cls, body: Any) -> AverageResponse:
        """Compute count, sum and mean of ``body["numbers"]``.

        ``body`` is the decoded JSON request body.  Raises
        ``ValidationError`` when ``numbers`` is missing, not an array,
        empty, or contains an element that is not numeric.
        """
        numbers = body.get("numbers") if isinstance(body, dict) else None
        if not isinstance(numbers, list) or not numbers:
            logger.info("Rejected average: missing or invalid numbers array")
            raise ValidationError(invalid_body_payload())

        parsed = parse_numbers(numbers)
        if not parsed.ok:
            logger.info(
                "Rejected average: element %s (%r) is not numeric", parsed.bad_index, parsed.bad_value
            )
            raise ValidationError(non_numeric_payload(numbers, parsed))

        count = len(parsed.values)
        try:
            total = cls.accumulate(parsed.values)
            mean = total / count
        except OverflowError:
            mean = math.inf
        if not math.isfinite(mean):
            # Finite inputs can still overflow when added.
            logger.info("Rejected average: sum of %s values is out of range", count)
            raise ValidationError(out_of_range_payload(numbers))
        logger.debug("Average of %s values: %s", count, mean)
        return AverageResponse(
            input=AverageInput(numbers=numbers),
            result=AverageResult(
                count=count,
                sum=as_json_number(total),
                average=as_json_number(mean),
            ),
            info=AVERAGE_INFO,
        )
