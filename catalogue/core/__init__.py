"""
Core pipeline logic module.

Contains the exception hierarchy, geo-scope ranking, the content tree
resolver, the semantic link rewriter and catalogue fragment helpers.
"""

from catalogue.core.exceptions import (
    CatalogueException,
    JSONValueError,
    JSONValueDecodeError,
    JSONValueEncodeError,
    UnsupportedJSONTypeError,
)

__all__ = [
    "CatalogueException",
    "JSONValueError",
    "JSONValueDecodeError",
    "JSONValueEncodeError",
    "UnsupportedJSONTypeError",
]
