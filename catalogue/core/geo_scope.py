"""
Geo-scope ranking.

Total order over named geographic specificity levels, used purely as a sort
key for content blocks. Higher rank means more locally specific.

Dependencies: catalogue.configs
System role: Ordering key for the content tree resolver
"""

from collections.abc import Mapping
from enum import Enum
from functools import lru_cache

from catalogue.configs import get_settings
from catalogue.configs.geo_scope import DEFAULT_GEO_SCOPE_RANKS


class GeoScopeLevel(str, Enum):
    """Geographic hierarchy levels known to the content backend, broad to specific."""

    COUNTRY = "country"
    ADMIN_AREA = "admin_area"
    LOCALITY = "locality"
    SUB_LOCALITY = "sub_locality"
    GEOHASH = "geohash"
    POI = "poi"

    @property
    def identifier(self) -> str:
        """Backend identifier string for this level."""
        return self.value

    @classmethod
    def from_identifier(cls, identifier: str | None) -> "GeoScopeLevel | None":
        """Return the level named by identifier, or None if unrecognised."""
        if not identifier:
            return None
        try:
            return cls(identifier)
        except ValueError:
            return None


class GeoScopeRanker:
    """Rank lookup over a configured geo-scope table."""

    def __init__(self, ranks: Mapping[str, int] | None = None) -> None:
        """
        Initialize ranker.

        Args:
            ranks: Identifier to rank table; defaults to the built-in hierarchy
        """
        self._ranks = dict(DEFAULT_GEO_SCOPE_RANKS if ranks is None else ranks)

    def rank(self, identifier: str | None) -> int | None:
        """
        Look up the specificity rank of a geo-scope identifier.

        Args:
            identifier: Geo-scope identifier such as "country" or "poi"

        Returns:
            int | None: Rank, or None when the identifier is missing or unknown
        """
        if not identifier:
            return None
        return self._ranks.get(identifier)

    def sort_key(self, identifier: str | None) -> tuple[bool, int]:
        """Ascending sort key: most specific first, unranked last."""
        rank = self.rank(identifier)
        if rank is None:
            return (True, 0)
        return (False, -rank)

    def levels(self) -> list[str]:
        """Configured identifiers ordered from broadest to most specific."""
        return sorted(self._ranks, key=self._ranks.__getitem__)


@lru_cache
def get_default_ranker() -> GeoScopeRanker:
    """Ranker built from the configured rank table."""
    return GeoScopeRanker(get_settings().geo_scope.ranks)


def rank(identifier: str | None) -> int | None:
    """Rank identifier with the configured table."""
    return get_default_ranker().rank(identifier)
