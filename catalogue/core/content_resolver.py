"""
Content tree resolver.

Turns a loosely-structured catalogue document into an ordered list of content
blocks. Two document shapes are accepted without a schema:

- flat: `markdown` and/or `cards` at the root, resolved to one "root" block
- topic-keyed: each non-private root key holds a topic object with its own
  header, markdown, cards and `_metadata`

Malformed input degrades to fewer blocks; nothing here raises.

Dependencies: catalogue.models, catalogue.core.geo_scope
System role: Content resolution stage of the catalogue pipeline
"""

import logging

from catalogue.core.geo_scope import GeoScopeRanker, get_default_ranker
from catalogue.models.content_block import ContentBlock, ContentMetadata
from catalogue.models.json_value import JSONArray, JSONObject, JSONValue

logger = logging.getLogger(__name__)

ROOT_BLOCK_ID = "root"
METADATA_KEY = "_metadata"


def is_private_key(key: str) -> bool:
    """Keys starting with "_" carry metadata, never content."""
    return key.startswith("_")


def _string_field(obj: JSONValue, key: str) -> str | None:
    value = obj.get(key)
    return value.string_value if value is not None else None


def _cards_field(obj: JSONValue) -> tuple[JSONValue, ...] | None:
    value = obj.get("cards")
    if isinstance(value, JSONArray) and value.value:
        return value.value
    return None


def is_flat(document: JSONValue) -> bool:
    """
    Check whether a document carries its content at the root.

    Args:
        document: Catalogue document

    Returns:
        bool: True for a string `markdown` or a non-empty `cards` array at the root
    """
    if not isinstance(document, JSONObject):
        return False
    return _string_field(document, "markdown") is not None or _cards_field(document) is not None


def extract_metadata(topic: JSONValue) -> ContentMetadata:
    """
    Read interface hints and geo-scope from a topic's `_metadata`.

    The geo-scope is taken from `_metadata.geo_scope` when present, otherwise
    from `_metadata.location.geoscope`.

    Args:
        topic: Topic object

    Returns:
        ContentMetadata: Extracted metadata (empty if `_metadata` is absent)
    """
    metadata = topic.get(METADATA_KEY)
    if not isinstance(metadata, JSONObject):
        return ContentMetadata()

    geo_scope = _string_field(metadata, "geo_scope")
    if geo_scope is None:
        location = metadata.get("location")
        if location is not None:
            geo_scope = _string_field(location, "geoscope")

    return ContentMetadata(interface=metadata.get("interface"), geo_scope=geo_scope)


class ContentTreeResolver:
    """Resolves catalogue documents into ordered content blocks."""

    def __init__(self, ranker: GeoScopeRanker | None = None) -> None:
        """
        Initialize resolver.

        Args:
            ranker: Geo-scope ranker used for ordering; defaults to the configured one
        """
        self.ranker = ranker or get_default_ranker()

    def resolve(self, document: JSONValue | None) -> list[ContentBlock]:
        """
        Resolve a document into content blocks.

        Args:
            document: Catalogue document (any JSON value)

        Returns:
            list[ContentBlock]: Blocks ordered most geographically specific first;
                empty for a non-object document
        """
        if not isinstance(document, JSONObject):
            logger.debug(
                "Skipping non-object catalogue document",
                extra={"document_type": type(document).__name__},
            )
            return []

        if is_flat(document):
            return [self._resolve_flat(document)]

        return self._resolve_topics(document)

    def _resolve_flat(self, document: JSONObject) -> ContentBlock:
        cleaned = document.without_private_keys()
        return ContentBlock(
            id=ROOT_BLOCK_ID,
            header=document.get("header"),
            markdown=_string_field(cleaned, "markdown"),
            cards=_cards_field(cleaned),
            interface=None,
        )

    def _resolve_topics(self, document: JSONObject) -> list[ContentBlock]:
        ranked: list[tuple[ContentBlock, str | None]] = []

        for key, topic in document.value.items():
            if is_private_key(key):
                continue
            if not isinstance(topic, JSONObject):
                logger.debug("Skipping non-object topic", extra={"topic": key})
                continue

            metadata = extract_metadata(topic)
            cleaned = topic.without_private_keys()
            block = ContentBlock(
                id=key,
                header=topic.get("header"),
                markdown=_string_field(cleaned, "markdown"),
                cards=_cards_field(cleaned),
                interface=metadata.interface,
            )
            if not block.has_content:
                logger.debug("Skipping topic without content", extra={"topic": key})
                continue

            ranked.append((block, metadata.geo_scope))

        ranked.sort(key=lambda item: self.ranker.sort_key(item[1]))
        return [block for block, _ in ranked]


def resolve(document: JSONValue | None) -> list[ContentBlock]:
    """Resolve document with the configured geo-scope ranking."""
    return ContentTreeResolver().resolve(document)
