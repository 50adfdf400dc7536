"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copier.

Usage:
    from propcopy.config import CopierSettings

    # Load from environment variables (PROPCOPY_*)
    settings = CopierSettings()

    # Or override with explicit values
    settings = CopierSettings(max_depth=32, warn_on_skip=True)
"""

from __future__ import annotations

from functools import lru_cache

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for the config module. "
        "Install with: pip install propcopy"
    ) from e


class CopierSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for copy_properties.

    Attributes:
        max_depth: Maximum nesting depth before DepthLimitExceededError (None = unbounded).
        warn_on_skip: Emit a CopySkipWarning for every skipped field or element.
        include_properties: Treat ``property`` members of typed classes as fields.

    Environment Variables:
        PROPCOPY_MAX_DEPTH
        PROPCOPY_WARN_ON_SKIP
        PROPCOPY_INCLUDE_PROPERTIES
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    max_depth: int | None = Field(default=None, ge=0)
    warn_on_skip: bool = False
    include_properties: bool = True


@lru_cache(maxsize=1)
def get_settings() -> CopierSettings:
    """Load settings from the environment once per process."""
    return CopierSettings()
