"""Request-level exceptions surfaced to API callers."""

from metasearch.utils.exceptions import MetaSearchError


class UnsupportedEngineError(MetaSearchError):
    """Raised when a request names one or more engines that are not registered.

    Raised before any backend is constructed or dispatched.

    Attributes:
        engines: The unrecognized names, as the caller wrote them
    """

    def __init__(self, engines: list[str]):
        super().__init__(f"unsupported search engine(s): {', '.join(engines)}")
        self.engines = list(engines)

    def __str__(self) -> str:
        return self.args[0]


class InvalidTimeoutError(MetaSearchError):
    """Raised when the timeout parameter is not a valid duration string.

    Attributes:
        value: The rejected input
    """

    def __init__(self, value: str, reason: str = "invalid duration"):
        super().__init__(f"{reason}: {value!r}")
        self.value = value

    def __str__(self) -> str:
        return self.args[0]


class EnvelopeSerializationError(MetaSearchError):
    """Raised when the final response envelope cannot be encoded."""

    def __init__(self, message: str):
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]
