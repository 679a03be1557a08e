# envelope.py
from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, model_serializer


class ErrorObject(BaseModel):
    code: str
    message: str
    details: Any = None

    @model_serializer(mode="wrap")
    def _drop_missing_details(self, handler):
        data = handler(self)
        if data.get("details") is None:
            data.pop("details", None)
        return data


class SuccessResponse(BaseModel):
    success: Literal[True] = True
    data: Any
    error: None = None


class FailureResponse(BaseModel):
    success: Literal[False] = False
    data: None = None
    error: ErrorObject


# Every tool returns exactly one of these; the variant fixes which of data/error is set.
ToolResponse = Union[SuccessResponse, FailureResponse]


def make_success(data: Any) -> SuccessResponse:
    return SuccessResponse(data=data)


def make_error(code: str, message: str, details: Any = None) -> FailureResponse:
    return FailureResponse(error=ErrorObject(code=code, message=message, details=details))


TOOL_RESPONSE_JSON_SCHEMA: dict[str, Any] = {
    "type": "object",
    "description": "Uniform tool result: success with data, or failure with an error object",
    "properties": {
        "success": {"type": "boolean"},
        "data": {},
        "error": {
            "anyOf": [
                {
                    "type": "object",
                    "properties": {
                        "code": {"type": "string"},
                        "message": {"type": "string"},
                        "details": {},
                    },
                    "required": ["code", "message"],
                },
                {"type": "null"},
            ]
        },
    },
    "required": ["success", "data", "error"],
}
