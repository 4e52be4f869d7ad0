"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from metasearch import __version__
from metasearch.api.middleware import (
    ErrorHandlingMiddleware,
    RequestContextMiddleware,
    RequestLoggingMiddleware,
)
from metasearch.api.routers import health_router, search_router
from metasearch.config.settings import Settings, get_settings
from metasearch.config.validation import validate_or_raise
from metasearch.core.logging import get_logger, setup_logging
from metasearch.engines.registry import EngineRegistry, create_default_registry
from metasearch.search.service import MetaSearchService

logger = get_logger("metasearch.api")


def create_app(
    settings: Settings | None = None,
    registry: EngineRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the application factory that assembles all components:
    - Engine registry and search service
    - Middleware (in correct order)
    - Routers, then static files

    Args:
        settings: Optional settings override (useful for testing). When
            omitted, settings are loaded and logging is configured here.
        registry: Optional engine registry (default: built-in engines
            sharing one HTTP client owned by the app)

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If the configuration does not validate

    Example:
        # Production
        app = create_app()

        # Testing
        app = create_app(settings=Settings(ENVIRONMENT="test"), registry=fake_registry)

        # Run with uvicorn
        uvicorn metasearch.api.app:create_app --factory
    """
    if settings is None:
        settings = get_settings()
        setup_logging(settings)

    http_client: httpx.AsyncClient | None = None
    if registry is None:
        http_client = httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            follow_redirects=True,
            timeout=settings.backend_timeout,
        )
        registry = create_default_registry(settings, http_client)

    validate_or_raise(settings, engine_names=registry.names)

    app = FastAPI(
        title="metasearch",
        description="Concurrent meta search API",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=_lifespan,
    )

    # Store shared objects on app state for access in dependencies
    app.state.settings = settings
    app.state.http_client = http_client
    app.state.search_service = MetaSearchService(registry, settings)

    _configure_middleware(app)
    _configure_routers(app, settings)

    return app


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Closes the shared HTTP client on shutdown.
    """
    logger.info(
        "application_starting",
        engines=app.state.search_service.registry.names,
        default_timeout=app.state.settings.default_timeout,
    )

    yield

    logger.info("application_stopping")
    if app.state.http_client is not None:
        await app.state.http_client.aclose()


def _configure_middleware(app: FastAPI) -> None:
    """Configure middleware stack.

    Middleware order (outermost to innermost execution):
    1. RequestContextMiddleware - Request ID and start time
    2. RequestLoggingMiddleware - Logs all requests
    3. ErrorHandlingMiddleware - Converts exceptions to failure envelopes

    Note: Middleware is added in reverse order because Starlette
    processes them from last-added to first-added.
    """
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)


def _configure_routers(app: FastAPI, settings: Settings) -> None:
    """Configure API routers and, last, the static file mount."""
    app.include_router(health_router)
    app.include_router(search_router)

    # Mounted at "/" so it must come after every API route
    if settings.static_dir is not None and settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
