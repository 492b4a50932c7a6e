"""
Unified pipeline settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the pipeline
"""

from functools import lru_cache

from pydantic import Field

from catalogue.configs.base import BaseSettings
from catalogue.configs.geo_scope import GeoScopeSettings
from catalogue.configs.rewriter import LinkRewriterSettings


class Settings(BaseSettings):
    """Unified pipeline settings aggregating all config modules."""

    # Aggregated settings
    geo_scope: GeoScopeSettings = Field(default_factory=GeoScopeSettings)
    rewriter: LinkRewriterSettings = Field(default_factory=LinkRewriterSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get pipeline settings singleton.

    Environment variables loaded once, on first call.

    Returns:
        Settings: Pipeline settings instance

    Usage:
        from catalogue.configs import get_settings
        settings = get_settings()
    """
    return Settings()
