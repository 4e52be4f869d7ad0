"""Utility modules for metasearch."""

from metasearch.utils.duration import parse_duration
from metasearch.utils.exceptions import (
    BackendError,
    ConfigurationError,
    MetaSearchError,
)

__all__ = [
    "BackendError",
    "ConfigurationError",
    "MetaSearchError",
    "parse_duration",
]
