"""
Geo-scope ranking configuration.

The ordering of geographic specificity levels is defined by the content
backend, so the rank table is loaded as configuration rather than fixed in code.

Dependencies: pydantic_settings
System role: Rank table for ordering content blocks by geo-scope
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_GEO_SCOPE_RANKS: dict[str, int] = {
    "country": 0,
    "admin_area": 1,
    "locality": 2,
    "sub_locality": 3,
    "geohash": 4,
    "poi": 5,
}


class GeoScopeSettings(BaseSettings):
    """Geo-scope rank table. Higher rank means more locally specific."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOGUE_GEO_SCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ranks: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_GEO_SCOPE_RANKS),
        description="Geo-scope identifier to specificity rank (JSON object in env)",
    )

    @field_validator("ranks")
    @classmethod
    def validate_ranks(cls, v: dict[str, int]) -> dict[str, int]:
        """Reject empty identifiers; the empty string never names a scope."""
        if any(not identifier.strip() for identifier in v):
            raise ValueError("Geo-scope identifiers must be non-empty")
        return v
