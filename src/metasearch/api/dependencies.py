"""FastAPI dependencies for API endpoints."""

from fastapi import Request

from metasearch.search.assembler import ResponseAssembler
from metasearch.search.service import MetaSearchService

__all__ = [
    "get_request_assembler",
    "get_search_service",
]


def get_search_service(request: Request) -> MetaSearchService:
    """Get the search service built by the application factory."""
    return request.app.state.search_service


def get_request_assembler(request: Request) -> ResponseAssembler:
    """Get a response assembler timed from request entry.

    The start time is set by RequestContextMiddleware; without it the
    clock starts now.
    """
    return ResponseAssembler(started_at=getattr(request.state, "started_at", None))
