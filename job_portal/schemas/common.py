# common.py
from __future__ import annotations

import math
import re
from typing import Any

from pydantic_core import PydanticCustomError


# local@domain.tld, no whitespace, at least one dot in the domain.
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@.]+$")


def reject_null(value: Any) -> Any:
    """Optional fields may be omitted, but an explicit null is a type error."""
    if value is None:
        raise PydanticCustomError("null_not_allowed", "Field may be omitted but must not be null")
    return value


def validate_email_form(value: str) -> str:
    candidate = (value or "").strip()
    if not _EMAIL_RE.match(candidate):
        raise PydanticCustomError("invalid_email", "Invalid email address")
    return candidate


def validate_non_negative_number(value: Any) -> int | float:
    """Accept a JSON number >= 0 as-is, so an integer salary stays an integer."""
    value = reject_null(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PydanticCustomError("number_type", "Input should be a valid number")
    if not math.isfinite(value):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    if value < 0:
        raise PydanticCustomError("greater_than_equal", "Input should be greater than or equal to 0", {"ge": 0})
    return value
