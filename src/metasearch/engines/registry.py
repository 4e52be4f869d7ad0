"""Engine registry for metasearch backend management.

This module maps engine names to backend factories and resolves a
request's engine names into ready-to-search backend instances.
"""

from collections.abc import Callable, Iterable
from functools import partial

import httpx

from metasearch.config.settings import Settings
from metasearch.core.logging import get_logger

from .baidu import BaiduBackend
from .bing import BingBackend
from .google import GoogleBackend
from .protocol import SearchBackend
from .wx import WxBackend

logger = get_logger(__name__)

BackendFactory = Callable[[str], SearchBackend]
"""Builds a backend bound to one query."""


def normalize_engine_names(names: Iterable[str]) -> list[str]:
    """Strip blanks and collapse case-insensitive duplicates, keeping order.

    Args:
        names: Raw engine names, e.g. from a comma-separated parameter.

    Returns:
        Cleaned names, first spelling of each kept.
    """
    seen: set[str] = set()
    result = []
    for name in names:
        name = name.strip()
        if not name or name.lower() in seen:
            continue
        seen.add(name.lower())
        result.append(name)
    return result


class EngineRegistry:
    """Registry mapping engine names to backend factories.

    Lookup ignores case. Resolution is all-or-nothing: a single unknown
    name means no backend is built at all.

    Usage:
        registry = EngineRegistry()
        registry.register("Bing", lambda q: BingBackend(q, client))

        backends, unsupported = registry.resolve(["Bing"], "python asyncio")
        if unsupported:
            ...  # reject the request, nothing was constructed
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        # lower-cased name -> (canonical name, factory)
        self._factories: dict[str, tuple[str, BackendFactory]] = {}

    def register(self, name: str, factory: BackendFactory) -> None:
        """Register a backend factory under an engine name.

        Args:
            name: Canonical engine name (e.g., "Baidu").
            factory: Callable building a backend for a query.

        Raises:
            ValueError: If an engine with the same name is already registered.
        """
        key = name.lower()
        if key in self._factories:
            raise ValueError(f"Engine already registered: {name}")

        self._factories[key] = (name, factory)
        logger.debug("engine_registered", engine=name)

    def unregister(self, name: str) -> bool:
        """Unregister an engine.

        Returns:
            True if the engine was removed, False if it was not registered.
        """
        return self._factories.pop(name.lower(), None) is not None

    def is_registered(self, name: str) -> bool:
        """Check whether an engine name is known."""
        return name.strip().lower() in self._factories

    @property
    def names(self) -> list[str]:
        """Canonical names of all registered engines, in registration order."""
        return [canonical for canonical, _ in self._factories.values()]

    def resolve(
        self,
        names: Iterable[str],
        query: str,
    ) -> tuple[list[SearchBackend], list[str]]:
        """Resolve engine names into backends bound to ``query``.

        Args:
            names: Requested engine names.
            query: Query text each backend will search.

        Returns:
            ``(backends, unsupported)``. When ``unsupported`` is non-empty,
            ``backends`` is empty and no factory was called. Otherwise there
            is one backend per requested name, in request order.
        """
        requested = normalize_engine_names(names)
        unsupported = [name for name in requested if name.lower() not in self._factories]
        if unsupported:
            return [], unsupported

        backends = [self._factories[name.lower()][1](query) for name in requested]
        return backends, []


def create_default_registry(settings: Settings, client: httpx.AsyncClient) -> EngineRegistry:
    """Create a registry with every built-in engine.

    Args:
        settings: Application settings (backend timeout).
        client: HTTP client shared by all backends.

    Returns:
        Registry with Baidu, Bing, Google and Wx.
    """
    registry = EngineRegistry()
    for backend_cls in (BaiduBackend, BingBackend, GoogleBackend, WxBackend):
        registry.register(
            backend_cls.engine_name,
            partial(backend_cls, client=client, timeout=settings.backend_timeout),
        )
    return registry
