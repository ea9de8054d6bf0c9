"""FastAPI middleware for request tracing."""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from member_api.logging import get_logger
from member_api.schemas.error import internal_error_response

REQUEST_ID_HEADER = "X-Request-ID"

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its outcome.

    The id comes from the incoming X-Request-ID header or a fresh UUID. It
    is bound to the structlog context together with method and path, and
    echoed back in the response headers, including on 500 responses for
    exceptions no handler caught.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("unhandled_exception")
            response = internal_error_response()

        logger.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
