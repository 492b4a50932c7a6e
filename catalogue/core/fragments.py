"""
Catalogue fragment helpers.

Pure operations on catalogue section content used when sections arrive in
pieces: merging an update into the current content, and splitting content
into per-geo-scope fragments.

Dependencies: catalogue.models.json_value, catalogue.core.content_resolver, catalogue.core.geo_scope
System role: Section content merging and geo-scope partitioning
"""

from catalogue.core.content_resolver import extract_metadata, is_private_key
from catalogue.core.geo_scope import GeoScopeLevel, GeoScopeRanker, get_default_ranker
from catalogue.models.json_value import JSONObject, JSONValue


def merge_content(base: JSONValue, override: JSONValue) -> JSONValue:
    """
    Merge two section contents.

    Args:
        base: Current content
        override: Incoming content

    Returns:
        JSONValue: Shallow merge where keys in override win when both are
            objects; otherwise override replaces base entirely
    """
    if not isinstance(base, JSONObject) or not isinstance(override, JSONObject):
        return override
    return JSONObject(value={**base.value, **override.value})


def extract_geo_scoped_fragments(
    content: JSONValue,
    default_level: GeoScopeLevel | str,
    ranker: GeoScopeRanker | None = None,
) -> list[tuple[str, JSONValue]]:
    """
    Split section content into fragments keyed by geo-scope identifier.

    Each topic keeps its full `_metadata` so interface hints and location
    identity survive. Topics whose geo-scope is missing from the rank table
    go to default_level.

    Args:
        content: Section content
        default_level: Level for topics without a ranked geo-scope
        ranker: Rank table used to recognise and order levels; defaults to the configured one

    Returns:
        list[tuple[str, JSONValue]]: Fragments ordered broad to specific, unranked
            levels last; `[(default_level, content)]` when there is nothing to split
    """
    ranker = ranker or get_default_ranker()
    if isinstance(default_level, GeoScopeLevel):
        default_level = default_level.identifier

    if not isinstance(content, JSONObject):
        return [(default_level, content)]

    fragments: dict[str, dict[str, JSONValue]] = {}
    for key, topic in content.value.items():
        if is_private_key(key):
            continue
        level = None
        if isinstance(topic, JSONObject):
            level = extract_metadata(topic).geo_scope
        if ranker.rank(level) is None:
            level = default_level
        fragments.setdefault(level, {})[key] = topic

    if not fragments:
        return [(default_level, content)]

    ordered = sorted(fragments.items(), key=lambda item: _broad_first(ranker, item[0]))
    return [(level, JSONObject(value=items)) for level, items in ordered]


def _broad_first(ranker: GeoScopeRanker, level: str) -> tuple[bool, int]:
    rank = ranker.rank(level)
    return (rank is None, rank or 0)
