"""Error handling middleware for mapping exceptions to HTTP responses."""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from metasearch.core.exceptions import (
    EnvelopeSerializationError,
    InvalidTimeoutError,
    UnsupportedEngineError,
)
from metasearch.core.logging import get_logger, log_exception
from metasearch.search.assembler import ResponseAssembler

logger = get_logger("metasearch.api.errors")

# Exception -> HTTP status code
EXCEPTION_MAP: dict[type[Exception], int] = {
    UnsupportedEngineError: 400,
    InvalidTimeoutError: 400,
    EnvelopeSerializationError: 500,
}


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware that catches exceptions and answers with a failure envelope.

    Every error response has the same shape as a successful search:
    ``code = -1``, a ``msg``, the elapsed ``cost`` and empty ``data``.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request and handle any exceptions."""
        try:
            return await call_next(request)
        except Exception as exc:
            return self._handle_exception(request, exc)

    def _handle_exception(self, request: Request, exc: Exception) -> Response:
        """Convert exception to a JSON failure envelope."""
        status_code, message = self._map_exception(exc)
        if status_code >= 500:
            log_exception(logger, exc, path=request.url.path)

        assembler = ResponseAssembler(started_at=getattr(request.state, "started_at", None))
        return Response(
            content=assembler.failure(message).to_json(),
            status_code=status_code,
            media_type="application/json",
        )

    def _map_exception(self, exc: Exception) -> tuple[int, str]:
        """Map exception to (status_code, message)."""
        for exc_type, status_code in EXCEPTION_MAP.items():
            if isinstance(exc, exc_type):
                return status_code, str(exc)

        return 500, "internal server error"
