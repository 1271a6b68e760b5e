"""
ssr_first.observability.middleware

HTTP middleware for request-scoped logging context and access logs.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
- Emit one access-log event per request carrying the gate/locale outcome.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ssr_first.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Outermost middleware: every log line emitted while the request is handled
    carries `request_id`, `path` and `method`.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            resolution = getattr(request.state, "locale", None)
            log.info(
                "http.request",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
                locale=resolution.active.value if resolution is not None else None,
                redirected=response.headers.get("location"),
            )
        finally:
            # Avoid leaking context across requests under async concurrency.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Must be the outermost middleware so the gate and locale middlewares log with
# the request id already bound.
