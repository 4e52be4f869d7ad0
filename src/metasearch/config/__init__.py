"""Configuration module for metasearch."""

from metasearch.config.settings import ScoringWeights, Settings, get_settings

__all__ = ["ScoringWeights", "Settings", "get_settings"]
