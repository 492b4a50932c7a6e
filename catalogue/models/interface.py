"""
Interface hint schemas.

Presentation hints carried in `_metadata.interface` are opaque to the
pipeline; only the card renderer selector is given a closed type here so
the rendering layer can dispatch on it.

Dependencies: None
System role: Card renderer selection for the rendering collaborator
"""

from enum import Enum


class CardRenderType(str, Enum):
    """
    Typed card renderers.

    Unrecognised server values map to UNKNOWN, which renders like GRID;
    a missing value selects GRID directly.
    """

    DISH = "dish"
    EVENT = "event"
    JOURNEY = "journey"
    FEATURE = "feature"
    SIGHT = "sight"
    GRID = "grid"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "CardRenderType":
        return cls.UNKNOWN

    @property
    def renderer(self) -> "CardRenderType":
        """Renderer to use; UNKNOWN degrades to the generic grid."""
        return CardRenderType.GRID if self is CardRenderType.UNKNOWN else self
