"""HTTP API for metasearch."""

from .app import create_app

__all__ = ["create_app"]
