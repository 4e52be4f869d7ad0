"""API request/response schemas."""

from .health import HealthResponse, HealthStatus

__all__ = ["HealthResponse", "HealthStatus"]
