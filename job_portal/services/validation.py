# validation.py
from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from job_portal.errors import InputValidationError


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

REQUIRED_FIELD_MISSING = "required_field_missing"
WRONG_TYPE = "wrong_type"
STRING_TOO_SHORT = "string_too_short"
NUMBER_OUT_OF_RANGE = "number_out_of_range"
INVALID_EMAIL_FORMAT = "invalid_email_format"
INVALID_VALUE = "invalid_value"

_KIND_BY_ERROR_TYPE = {
    "missing": REQUIRED_FIELD_MISSING,
    "null_not_allowed": WRONG_TYPE,
    "string_too_short": STRING_TOO_SHORT,
    "too_short": STRING_TOO_SHORT,
    "greater_than": NUMBER_OUT_OF_RANGE,
    "greater_than_equal": NUMBER_OUT_OF_RANGE,
    "less_than": NUMBER_OUT_OF_RANGE,
    "less_than_equal": NUMBER_OUT_OF_RANGE,
    "invalid_email": INVALID_EMAIL_FORMAT,
    "model_attributes_type": WRONG_TYPE,
}


def _violation_kind(error_type: str) -> str:
    kind = _KIND_BY_ERROR_TYPE.get(error_type)
    if kind:
        return kind
    if error_type.endswith("_type") or error_type.endswith("_parsing"):
        return WRONG_TYPE
    return INVALID_VALUE


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def collect_violations(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic error into ``[{field, kind, message}]``, one entry per violation."""
    violations: list[dict[str, Any]] = []
    for err in exc.errors(include_url=False):
        violations.append(
            {
                "field": _field_path(tuple(err.get("loc", ()))),
                "kind": _violation_kind(str(err.get("type", ""))),
                "message": str(err.get("msg", "")),
            }
        )
    return violations


def validate_payload(model: type[ModelT], payload: Any) -> ModelT:
    if payload is None:
        payload = {}
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        violations = collect_violations(exc)
        logger.debug("validation failed model=%s violations=%s", model.__name__, violations)
        raise InputValidationError(violations) from exc


def record_fields(model: BaseModel) -> dict[str, Any]:
    """Provided fields only, under their wire names; absent optionals stay absent."""
    return model.model_dump(by_alias=True, exclude_unset=True)
