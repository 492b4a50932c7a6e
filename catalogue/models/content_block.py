"""
Content block domain models.

Resolved, orderable units of catalogue content and the metadata read off
each topic while resolving them.

Dependencies: pydantic, catalogue.models.json_value
System role: Output records of the content tree resolver
"""

from pydantic import BaseModel, ConfigDict, Field

from catalogue.models.interface import CardRenderType
from catalogue.models.json_value import JSONValue


class ContentMetadata(BaseModel):
    """
    Metadata consumed from a topic's `_metadata` key.

    Attributes:
        interface: Opaque presentation hints, passed through untouched
        geo_scope: Geographic specificity identifier, if any
    """

    model_config = ConfigDict(frozen=True)

    interface: JSONValue | None = None
    geo_scope: str | None = None


class ContentBlock(BaseModel):
    """
    Resolved unit of catalogue content.

    Markdown is stored before semantic link rewriting; rewriting happens at
    render time.

    Attributes:
        id: Topic key, or "root" for flat documents
        header: Opaque header object (overline, headline, subhead, feature_img)
        markdown: Markdown body
        cards: Non-empty list of opaque card items
        interface: Presentation hints from `_metadata.interface`
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Stable block identifier")
    header: JSONValue | None = Field(default=None, description="Opaque header object")
    markdown: str | None = Field(default=None, description="Markdown before link rewriting")
    cards: tuple[JSONValue, ...] | None = Field(default=None, description="Card items")
    interface: JSONValue | None = Field(default=None, description="Per-item interface config")

    @property
    def has_content(self) -> bool:
        """True when the block carries a header, markdown or cards."""
        return self.header is not None or self.markdown is not None or bool(self.cards)

    @property
    def card_config(self) -> JSONValue | None:
        """Card rendering config from `interface.card`."""
        return self.interface.get("card") if self.interface is not None else None

    @property
    def markdown_config(self) -> JSONValue | None:
        """Markdown rendering config from `interface.markdown`."""
        return self.interface.get("markdown") if self.interface is not None else None

    @property
    def render_type_name(self) -> str | None:
        """Raw `interface.card.render_type` string as sent by the server."""
        config = self.card_config
        render_type = config.get("render_type") if config is not None else None
        return render_type.string_value if render_type is not None else None

    @property
    def card_render_type(self) -> CardRenderType:
        """
        Typed card renderer selected by `interface.card.render_type`.

        Missing or non-string values give GRID; unrecognised strings give
        UNKNOWN (see render_type_name for the original value).
        """
        name = self.render_type_name
        if name is None:
            return CardRenderType.GRID
        return CardRenderType(name)
