"""Search engine backends for metasearch.

This package holds the result types, the backend protocol, the built-in
scraping backends and the registry that resolves engine names.

Usage:
    from metasearch.engines import EngineRegistry, Entity, EntityList

    registry = EngineRegistry()
    registry.register("Static", lambda query: MyBackend(query))
    backends, unsupported = registry.resolve(["Static"], "query text")
"""

from .baidu import BaiduBackend
from .bing import BingBackend
from .google import GoogleBackend
from .protocol import BaseSearchBackend, SearchBackend
from .registry import (
    BackendFactory,
    EngineRegistry,
    create_default_registry,
    normalize_engine_names,
)
from .types import Entity, EntityList
from .wx import WxBackend

__all__ = [
    # Types
    "Entity",
    "EntityList",
    # Protocol
    "BaseSearchBackend",
    "SearchBackend",
    # Registry
    "BackendFactory",
    "EngineRegistry",
    "create_default_registry",
    "normalize_engine_names",
    # Backends
    "BaiduBackend",
    "BingBackend",
    "GoogleBackend",
    "WxBackend",
]
