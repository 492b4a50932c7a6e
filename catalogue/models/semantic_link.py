"""
Semantic link domain model.

Inline `scheme://term` annotations that link catalogue prose to a dish,
cuisine, landscape or place.

Dependencies: pydantic, urllib.parse (stdlib)
System role: Semantic reference parsing for the UI link handler
"""

import re
from enum import Enum
from urllib.parse import quote, unquote_to_bytes, urlsplit

from pydantic import BaseModel, Field

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class SemanticLinkCategory(str, Enum):
    """Closed set of schemes recognised as semantic references."""

    LANDSCAPE = "landscape"
    CUISINE = "cuisine"
    DISH = "dish"
    PLACE = "place"

    @classmethod
    def from_scheme(cls, scheme: str | None) -> "SemanticLinkCategory | None":
        """Return the category for scheme, or None if it is not semantic."""
        if not scheme:
            return None
        try:
            return cls(scheme)
        except ValueError:
            return None

    @classmethod
    def pattern(cls) -> str:
        """Regex alternation matching any recognised scheme name."""
        return "|".join(re.escape(category.value) for category in cls)


class SemanticLink(BaseModel):
    """
    Parsed semantic reference.

    Attributes:
        category: Domain entity kind taken from the URL scheme
        term: Percent-decoded entity name
    """

    category: SemanticLinkCategory = Field(description="Semantic scheme")
    term: str = Field(description="Decoded entity term")

    @property
    def url(self) -> str:
        """Rebuild the `scheme://percent-encoded-term` form."""
        return f"{self.category.value}://{quote(self.term, safe='')}"


def percent_decode(text: str) -> str | None:
    """
    Strictly percent-decode text.

    Args:
        text: Possibly percent-encoded text

    Returns:
        str | None: Decoded text, or None if an escape is malformed or the
            decoded bytes are not UTF-8
    """
    if _INVALID_ESCAPE.search(text):
        return None
    try:
        return unquote_to_bytes(text).decode("utf-8")
    except UnicodeDecodeError:
        return None


def reference_authority(url: str) -> str | None:
    """Return the raw (still encoded) authority of `scheme://authority/...`."""
    try:
        authority = urlsplit(url).netloc
    except ValueError:
        return None
    return authority or None


def parse_semantic_url(url: str) -> SemanticLink | None:
    """
    Parse a clicked URL into a semantic link.

    Args:
        url: URL intercepted by the link-click handler

    Returns:
        SemanticLink | None: Parsed link, or None for non-semantic URLs
            (regular http links, unknown schemes)

    Example:
        >>> parse_semantic_url("landscape://the%20Alps").term
        'the Alps'
    """
    try:
        scheme = urlsplit(url).scheme
    except ValueError:
        return None
    category = SemanticLinkCategory.from_scheme(scheme)
    if category is None:
        return None
    authority = reference_authority(url) or ""
    term = percent_decode(authority)
    return SemanticLink(category=category, term=authority if term is None else term)
