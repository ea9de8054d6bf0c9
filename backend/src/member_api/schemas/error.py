"""Error envelope for unexpected failures.

Domain errors answer with a bare status code. Only unhandled exceptions
produce a body: {"error": {"code": "...", "message": "..."}}.
"""

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from member_api.response_codes import ResponseCode


class ErrorDetail(BaseModel):
    """ResponseCode name plus its human-readable message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail


def internal_error_response() -> JSONResponse:
    """The generic 500 sent for any unhandled exception."""
    code = ResponseCode.INTERNAL_SERVER_ERROR
    body = ErrorResponse(error=ErrorDetail(code=code.name, message=code.message))
    return JSONResponse(status_code=code.status_code, content=body.model_dump())
