"""
Domain models module.

Pydantic value types shared by the resolver, rewriter and service layers.
"""

from catalogue.models.content_block import ContentBlock, ContentMetadata
from catalogue.models.interface import CardRenderType
from catalogue.models.json_value import (
    JSONArray,
    JSONBool,
    JSONDouble,
    JSONInt,
    JSONNode,
    JSONNull,
    JSONObject,
    JSONString,
    JSONValue,
    decode,
    encode,
    from_python,
    try_decode,
)
from catalogue.models.semantic_link import (
    SemanticLink,
    SemanticLinkCategory,
    parse_semantic_url,
    percent_decode,
)

__all__ = [
    "CardRenderType",
    "ContentBlock",
    "ContentMetadata",
    "JSONArray",
    "JSONBool",
    "JSONDouble",
    "JSONInt",
    "JSONNode",
    "JSONNull",
    "JSONObject",
    "JSONString",
    "JSONValue",
    "SemanticLink",
    "SemanticLinkCategory",
    "decode",
    "encode",
    "from_python",
    "parse_semantic_url",
    "percent_decode",
    "try_decode",
]
