"""Meta search endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from pydantic_core import PydanticSerializationError

from metasearch.api.dependencies import get_request_assembler, get_search_service
from metasearch.core.exceptions import EnvelopeSerializationError, InvalidTimeoutError
from metasearch.search.assembler import ResponseAssembler
from metasearch.search.service import MetaSearchService
from metasearch.utils.duration import parse_duration

router = APIRouter(tags=["search"])


def _parse_engines(engine: str | None) -> list[str] | None:
    """Split the comma-separated engine parameter; None when absent or blank."""
    if engine is None or not engine.strip():
        return None
    return engine.split(",")


def _parse_timeout(timeout: str | None) -> float | None:
    """Parse the timeout parameter; None when absent or blank."""
    if timeout is None or not timeout.strip():
        return None
    try:
        return parse_duration(timeout)
    except ValueError as e:
        raise InvalidTimeoutError(timeout, str(e)) from e


@router.get(
    "/search",
    summary="Search several engines at once",
    description=(
        "Queries the requested engines concurrently, waits up to `timeout` "
        "and returns one ranked list. Engines that miss the deadline are left out."
    ),
)
async def search(
    service: Annotated[MetaSearchService, Depends(get_search_service)],
    assembler: Annotated[ResponseAssembler, Depends(get_request_assembler)],
    q: Annotated[str, Query(description="Query text")] = "",
    engine: Annotated[
        str | None, Query(description="Comma-separated engine names (default: all)")
    ] = None,
    timeout: Annotated[
        str | None, Query(description="Deadline as a duration, e.g. 800ms or 2s")
    ] = None,
) -> Response:
    """Run a meta search and return the JSON envelope."""
    result = await service.search(
        q,
        engines=_parse_engines(engine),
        timeout=_parse_timeout(timeout),
        assembler=assembler,
    )

    try:
        body = result.to_json()
    except (PydanticSerializationError, ValueError) as e:
        raise EnvelopeSerializationError(str(e)) from e

    return Response(content=body, status_code=200, media_type="application/json")
