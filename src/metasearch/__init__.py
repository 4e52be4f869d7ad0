"""metasearch - concurrent meta search over several web search engines."""

__version__ = "0.1.0"

__all__ = ["__version__"]
