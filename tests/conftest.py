"""Pytest fixtures for metasearch tests."""

import asyncio
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from metasearch.config.settings import Settings
from metasearch.engines.registry import EngineRegistry
from metasearch.engines.types import Entity, EntityList


# =============================================================================
# Structlog Configuration Fixture
# =============================================================================


@pytest.fixture(scope="function", autouse=True)
def reset_structlog_after_test():
    """Reset structlog configuration after each test.

    This ensures tests that modify structlog global state
    don't affect other tests.
    """
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


# =============================================================================
# Fake backends
# =============================================================================


def make_entities(engine: str, *urls: str) -> list[Entity]:
    """Build unscored entities for an engine, one per URL."""
    return [
        Entity(title=f"{engine} result {i}", url=url, engine=engine)
        for i, url in enumerate(urls, start=1)
    ]


class FakeBackend:
    """In-memory backend with configurable latency and failure."""

    def __init__(
        self,
        name: str,
        query: str,
        entities: list[Entity] | None = None,
        delay: float = 0.0,
        error: Exception | None = None,
    ):
        self._name = name
        self.query = query
        self._entities = entities or []
        self._delay = delay
        self._error = error
        self.cancelled = False

    @property
    def name(self) -> str:
        return self._name

    async def search(self) -> EntityList:
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self._error is not None:
            raise self._error
        return EntityList.of([entity.model_copy() for entity in self._entities])


class FakeBackendFactory:
    """Backend factory that remembers every backend it built."""

    def __init__(self, name: str, **kwargs):
        self.name = name
        self.kwargs = kwargs
        self.built: list[FakeBackend] = []

    def __call__(self, query: str) -> FakeBackend:
        backend = FakeBackend(self.name, query, **self.kwargs)
        self.built.append(backend)
        return backend


BAIDU_URLS = ("https://www.example.com/a", "https://github.com/python/cpython")
BING_URLS = ("https://cn.example.org/1", "https://cn.example.org/2")


@pytest.fixture
def fake_factories() -> dict[str, FakeBackendFactory]:
    """Factories for a fast Baidu and Bing, a slow engine and a broken one."""
    return {
        "Baidu": FakeBackendFactory("Baidu", entities=make_entities("Baidu", *BAIDU_URLS)),
        "Bing": FakeBackendFactory("Bing", entities=make_entities("Bing", *BING_URLS)),
        "Slow": FakeBackendFactory(
            "Slow",
            entities=make_entities("Slow", "https://slow.example.net/"),
            delay=10.0,
        ),
        "Broken": FakeBackendFactory("Broken", error=RuntimeError("connection reset")),
    }


@pytest.fixture
def fake_registry(fake_factories: dict[str, FakeBackendFactory]) -> EngineRegistry:
    """Registry over the fake factories."""
    registry = EngineRegistry()
    for name, factory in fake_factories.items():
        registry.register(name, factory)
    return registry


# =============================================================================
# API test fixtures
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Create settings for API testing."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        DEBUG=True,
        log_level="DEBUG",
        static_dir=None,
        max_timeout=2.0,
        backend_timeout=1.0,
        default_engines=["Baidu", "Bing"],
    )


@pytest.fixture
def test_app(test_settings: Settings, fake_registry: EngineRegistry) -> FastAPI:
    """Create a FastAPI test application backed by fake engines."""
    from metasearch.api.app import create_app

    return create_app(settings=test_settings, registry=fake_registry)


@pytest_asyncio.fixture
async def test_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client for API testing.

    Provides an httpx.AsyncClient configured to call the test application
    directly without network overhead.
    """
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
