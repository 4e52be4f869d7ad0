"""Search backend protocol for metasearch engine abstraction.

This module defines the interface every search backend implements, plus a
base class carrying the HTTP fetch / HTML parse mechanics shared by the
scraping backends.
"""

import asyncio
from typing import ClassVar, Protocol, runtime_checkable
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup
from tenacity import retry, retry_if_exception_type, stop_after_attempt

from metasearch.core.logging import get_logger
from metasearch.utils.exceptions import BackendError

from .types import Entity, EntityList

logger = get_logger(__name__)


@runtime_checkable
class SearchBackend(Protocol):
    """Interface all search backends must implement.

    A backend is built for exactly one query and searched once. It bounds
    its own work with an internal timeout; callers may also cancel the
    awaiting task, which must release any in-flight network call.

    Example implementation:
        class StaticBackend:
            name = "Static"

            async def search(self) -> EntityList:
                return EntityList.of([Entity(title="a", url="https://a.example")])
    """

    @property
    def name(self) -> str:
        """Get the engine name (e.g., "Baidu", "Bing")."""
        ...

    async def search(self) -> EntityList:
        """Search the configured query.

        Returns:
            EntityList in the engine's own relevance order.

        Raises:
            BackendError: If the engine could not be queried.
        """
        ...


class BaseSearchBackend:
    """Base class for HTML scraping backends.

    Subclasses set ``engine_name`` and ``search_url`` and implement
    ``build_params`` and ``parse``.
    """

    engine_name: ClassVar[str] = "base"
    search_url: ClassVar[str] = ""

    def __init__(
        self,
        query: str,
        client: httpx.AsyncClient,
        *,
        timeout: float = 4.0,
    ) -> None:
        """Initialize the backend.

        Args:
            query: Query text, passed to the engine unmodified.
            client: Shared HTTP client.
            timeout: Upper bound for the whole search in seconds.
        """
        self.query = query
        self._client = client
        self._timeout = timeout

    @property
    def name(self) -> str:
        """Get the engine name."""
        return self.engine_name

    def build_params(self) -> dict[str, str]:
        """Build query-string parameters for the search request.

        Subclasses must implement this method.
        """
        raise NotImplementedError("Subclasses must implement build_params")

    def parse(self, html: str) -> list[Entity]:
        """Extract results from a result page, in page order.

        Subclasses must implement this method.
        """
        raise NotImplementedError("Subclasses must implement parse")

    async def search(self) -> EntityList:
        """Fetch and parse one result page within the backend timeout."""
        async with asyncio.timeout(self._timeout):
            response = await self._fetch()
        entities = self.parse(response.text)
        logger.debug("backend_page_parsed", engine=self.name, results=len(entities))
        return EntityList.of(entities)

    @retry(
        stop=stop_after_attempt(2),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _fetch(self) -> httpx.Response:
        """Issue the search request, retrying once on transport errors."""
        response = await self._client.get(self.search_url, params=self.build_params())
        if not response.is_success:
            raise BackendError(self.name, f"HTTP {response.status_code} from {self.search_url}")
        return response

    def soup(self, html: str) -> BeautifulSoup:
        """Parse HTML with the stdlib parser."""
        return BeautifulSoup(html, "html.parser")

    def make_entity(self, title: str, href: str, snippet: str = "") -> Entity | None:
        """Build an entity for this engine, or None if title or link is missing.

        Relative links are resolved against the engine's search URL.
        """
        title = " ".join(title.split())
        href = href.strip()
        if not title or not href:
            return None
        return Entity(
            title=title,
            url=urljoin(self.search_url, href),
            engine=self.name,
            snippet=" ".join(snippet.split()),
        )
