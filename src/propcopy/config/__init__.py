"""Configuration module for propcopy.

Provides Pydantic Settings-based configuration with environment variable support.
"""

from propcopy.config.settings import CopierSettings, get_settings

__all__ = [
    "CopierSettings",
    "get_settings",
]
