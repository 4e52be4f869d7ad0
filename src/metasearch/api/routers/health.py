"""Health check endpoint."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from metasearch import __version__
from metasearch.api.dependencies import get_search_service
from metasearch.api.schemas.health import HealthResponse, HealthStatus
from metasearch.search.service import MetaSearchService

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Basic health check",
    description="Returns liveness status and the registered engines.",
)
async def health_check(
    service: Annotated[MetaSearchService, Depends(get_search_service)],
) -> HealthResponse:
    """Liveness check endpoint.

    Returns 200 whenever the application is running; engine
    reachability is not probed.
    """
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=__version__,
        timestamp=datetime.now(UTC),
        engines=service.registry.names,
    )
