"""Request context middleware for propagating request identity through the request lifecycle."""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from uuid_utils import uuid7

from metasearch.core.logging import LogContext


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that stamps each request with an ID and a start time.

    Sets:
        request.state.request_id: The generated request ID (UUIDv7)
        request.state.started_at: ``time.perf_counter()`` at request entry
        X-Request-ID response header: For client correlation

    The request ID is bound to structlog context variables, so every log
    line emitted while serving the request carries it.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request within a bound logging context."""
        request_id = str(uuid7())
        request.state.request_id = request_id
        request.state.started_at = time.perf_counter()

        with LogContext(request_id=request_id):
            response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        return response
