"""Configuration for YouTube Caption Fetcher."""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = ["Settings", "DEFAULT_SETTINGS"]
