"""
Catalogue service orchestrator.

Coordinates decoding, resolution, and render-time link rewriting of
catalogue section content.

Dependencies: catalogue.core, catalogue.models, catalogue.configs
System role: Catalogue content use case orchestration
"""

import logging
from functools import lru_cache

from catalogue.configs import get_settings
from catalogue.core.content_resolver import ContentTreeResolver
from catalogue.core.exceptions import JSONValueDecodeError
from catalogue.core.fragments import merge_content
from catalogue.core.geo_scope import GeoScopeRanker
from catalogue.core.link_rewriter import SemanticLinkRewriter
from catalogue.models.content_block import ContentBlock
from catalogue.models.json_value import JSONValue, decode
from catalogue.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class CatalogueService:
    """
    Catalogue service orchestrator.

    Resolution and rewriting are pure, so one service can be shared across
    concurrent callers as long as each call gets its own document.
    """

    def __init__(
        self,
        resolver: ContentTreeResolver | None = None,
        rewriter: SemanticLinkRewriter | None = None,
    ) -> None:
        """
        Initialize catalogue service.

        Args:
            resolver: Optional ContentTreeResolver (configured default if None)
            rewriter: Optional SemanticLinkRewriter (configured default if None)
        """
        self.resolver = resolver or ContentTreeResolver()
        self.rewriter = rewriter or SemanticLinkRewriter()

    def resolve(self, document: JSONValue | None) -> list[ContentBlock]:
        """
        Resolve section content into ordered content blocks.

        Args:
            document: Section content

        Returns:
            list[ContentBlock]: Ordered blocks (possibly empty)
        """
        blocks = self.resolver.resolve(document)
        log_with_context(
            logger,
            logging.DEBUG,
            "Resolved catalogue content",
            document=document,
            block_ids=",".join(block.id for block in blocks),
        )
        return blocks

    def resolve_payload(self, payload: str | bytes) -> list[ContentBlock]:
        """
        Decode a JSON payload and resolve it.

        Args:
            payload: Section content as JSON text

        Returns:
            list[ContentBlock]: Ordered blocks; empty if the payload is not JSON
        """
        try:
            document = decode(payload)
        except JSONValueDecodeError as e:
            logger.warning(
                "Discarding undecodable catalogue payload",
                extra={"error": str(e), "payload_length": len(payload)},
            )
            return []
        return self.resolve(document)

    def render_markdown(self, block: ContentBlock) -> str | None:
        """
        Rewrite a block's markdown for the markdown renderer.

        Args:
            block: Resolved content block

        Returns:
            str | None: Rewritten markdown, or None if the block has none
        """
        if block.markdown is None:
            return None
        return self.rewriter.rewrite(block.markdown)

    def merge_update(self, current: JSONValue, update: JSONValue) -> JSONValue:
        """
        Merge an incoming section update into the current content.

        Args:
            current: Content currently held
            update: Incoming content

        Returns:
            JSONValue: Merged content
        """
        return merge_content(current, update)


@lru_cache
def get_catalogue_service() -> CatalogueService:
    """
    Get catalogue service singleton wired from settings.

    Returns:
        CatalogueService: Service instance
    """
    settings = get_settings()
    return CatalogueService(
        resolver=ContentTreeResolver(GeoScopeRanker(settings.geo_scope.ranks)),
        rewriter=SemanticLinkRewriter(
            collapse_duplicates=settings.rewriter.collapse_duplicates,
        ),
    )
