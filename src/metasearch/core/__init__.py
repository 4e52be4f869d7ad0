"""Core services and utilities for metasearch."""

from .exceptions import (
    EnvelopeSerializationError,
    InvalidTimeoutError,
    UnsupportedEngineError,
)
from .logging import (
    LogContext,
    get_logger,
    setup_logging,
)

__all__ = [
    # Exceptions
    "EnvelopeSerializationError",
    "InvalidTimeoutError",
    "UnsupportedEngineError",
    # Logging
    "LogContext",
    "get_logger",
    "setup_logging",
]
