"""
Explicit handler outcomes and their mapping onto HTTP responses.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

NOT_FOUND_BODY = "Not Found"


class Outcome(str, Enum):
    OK = "ok"
    CREATED = "created"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    INTERNAL_ERROR = "internal_error"


STATUS_CODES = {
    Outcome.OK: status.HTTP_200_OK,
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    Outcome.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass
class HandlerResult:
    outcome: Outcome
    data: Any = None
    message: Optional[str] = None
    errors: List[Any] = field(default_factory=list)

    @classmethod
    def ok(cls, data: Any) -> "HandlerResult":
        return cls(Outcome.OK, data=data)

    @classmethod
    def created(cls, data: Any) -> "HandlerResult":
        return cls(Outcome.CREATED, data=data)

    @classmethod
    def not_found(cls) -> "HandlerResult":
        return cls(Outcome.NOT_FOUND, message=NOT_FOUND_BODY)

    @classmethod
    def bad_request(cls, message: str, errors: Optional[List[Any]] = None) -> "HandlerResult":
        return cls(Outcome.BAD_REQUEST, message=message, errors=errors or [])

    @classmethod
    def internal_error(cls) -> "HandlerResult":
        return cls(Outcome.INTERNAL_ERROR, message="Internal server error")

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.outcome]


def error_envelope(message: str, errors: Optional[List[Any]] = None) -> dict:
    content = {"status": "error", "message": message}
    if errors:
        content["errors"] = jsonable_encoder(errors)
    return content


def to_response(result: HandlerResult) -> Response:
    """
    Render a handler result. Not-found is plain text; everything else is JSON.
    """
    if result.outcome is Outcome.NOT_FOUND:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=result.status_code)

    if result.outcome in (Outcome.OK, Outcome.CREATED):
        return JSONResponse(
            status_code=result.status_code,
            content=jsonable_encoder(result.data),
        )

    return JSONResponse(
        status_code=result.status_code,
        content=error_envelope(result.message, result.errors),
    )
