"""Custom exceptions for metasearch."""


class MetaSearchError(Exception):
    """Base exception for all metasearch errors."""

    pass


class BackendError(MetaSearchError):
    """A search backend failed to produce results.

    Attributes:
        engine: Name of the engine that failed.
    """

    def __init__(self, engine: str, message: str):
        super().__init__(message)
        self.engine = engine

    def __str__(self) -> str:
        return f"BackendError({self.engine}): {self.args[0]}"


class ConfigurationError(MetaSearchError):
    """Error in configuration or settings."""

    pass
