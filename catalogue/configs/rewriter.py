"""
Semantic link rewriter configuration.

Dependencies: pydantic_settings
System role: Toggles for markdown link preprocessing
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LinkRewriterSettings(BaseSettings):
    """Semantic link rewriter behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOGUE_REWRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    collapse_duplicates: bool = Field(
        default=True,
        description="Merge a mention written right before a bare reference into the link",
    )
