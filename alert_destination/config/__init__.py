"""Configuration module for alert destinations.

Loads and validates settings from environment variables or .env file.
Settings are read on first get_settings() call, never at import time.

Created: 2026-10-19
Version: 1.0.0
"""

from functools import lru_cache

from alert_destination.config.settings import DestinationSettings

__all__ = ["DestinationSettings", "get_settings"]


@lru_cache(maxsize=1)
def get_settings() -> DestinationSettings:
    """Get the shared settings instance, loading it on first use."""
    return DestinationSettings()
