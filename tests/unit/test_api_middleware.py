"""Unit tests for API middleware."""

import json
import uuid

import pytest
import structlog
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from metasearch.api.middleware import (
    ErrorHandlingMiddleware,
    RequestContextMiddleware,
    RequestLoggingMiddleware,
)
from metasearch.core.exceptions import (
    EnvelopeSerializationError,
    InvalidTimeoutError,
    UnsupportedEngineError,
)


def _create_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    @app.get("/ok")
    async def ok(request: Request):
        return {"request_id": request.state.request_id}

    @app.get("/context")
    async def context():
        return structlog.contextvars.get_contextvars()

    @app.get("/unsupported")
    async def unsupported():
        raise UnsupportedEngineError(["Yahoo"])

    @app.get("/bad-timeout")
    async def bad_timeout():
        raise InvalidTimeoutError("soon")

    @app.get("/encode")
    async def encode():
        raise EnvelopeSerializationError("cannot encode")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret detail")

    return app


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=_create_app()), base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
class TestRequestContextMiddleware:
    """Tests for RequestContextMiddleware."""

    async def test_sets_request_id_header(self, client: AsyncClient):
        """Test every response carries a UUIDv7 request ID."""
        response = await client.get("/ok")

        request_id = response.headers["X-Request-ID"]
        assert uuid.UUID(request_id).version == 7
        assert response.json()["request_id"] == request_id

    async def test_request_id_bound_to_log_context(self, client: AsyncClient):
        """Test the request ID is bound for logs during the request only."""
        response = await client.get("/context")

        assert response.json()["request_id"] == response.headers["X-Request-ID"]
        assert "request_id" not in structlog.contextvars.get_contextvars()

    async def test_request_ids_are_unique(self, client: AsyncClient):
        """Test each request gets its own ID."""
        first = await client.get("/ok")
        second = await client.get("/ok")

        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]


@pytest.mark.asyncio
class TestErrorHandlingMiddleware:
    """Tests for ErrorHandlingMiddleware."""

    @pytest.mark.parametrize(
        ("path", "status_code", "message"),
        [
            ("/unsupported", 400, "unsupported search engine(s): Yahoo"),
            ("/bad-timeout", 400, "invalid duration: 'soon'"),
            ("/encode", 500, "cannot encode"),
        ],
    )
    async def test_known_errors_become_failure_envelopes(
        self, client: AsyncClient, path: str, status_code: int, message: str
    ):
        """Test mapped exceptions produce a failure envelope and status."""
        response = await client.get(path)

        assert response.status_code == status_code
        assert response.headers["content-type"] == "application/json"
        data = json.loads(response.text)
        assert data["code"] == -1
        assert data["msg"] == message
        assert data["cost"] >= 0
        assert data["data"] == {"index": 0, "size": 0, "list": []}

    async def test_unexpected_error_hides_detail(self, client: AsyncClient):
        """Test unmapped exceptions become a generic 500 envelope."""
        response = await client.get("/crash")

        assert response.status_code == 500
        data = response.json()
        assert data["code"] == -1
        assert data["msg"] == "internal server error"
        assert "secret" not in response.text

    async def test_error_responses_keep_request_id(self, client: AsyncClient):
        """Test failure envelopes still carry the request ID header."""
        response = await client.get("/unsupported")

        assert "X-Request-ID" in response.headers
