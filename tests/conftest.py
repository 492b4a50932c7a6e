"""
Shared test fixtures and configuration for entire test suite.

Provides: Sample catalogue documents, resolver/rewriter instances, settings cache reset
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import pytest

from catalogue.application.catalogue_service import get_catalogue_service
from catalogue.configs import get_settings
from catalogue.core.content_resolver import ContentTreeResolver
from catalogue.core.geo_scope import GeoScopeRanker, get_default_ranker
from catalogue.core.link_rewriter import SemanticLinkRewriter, get_default_rewriter
from catalogue.models.json_value import JSONValue, from_python


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Drop cached settings and singletons so env changes apply per test."""
    caches = (get_settings, get_default_ranker, get_default_rewriter, get_catalogue_service)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


@pytest.fixture
def ranker() -> GeoScopeRanker:
    """Ranker over the built-in geo-scope table."""
    return GeoScopeRanker()


@pytest.fixture
def resolver(ranker: GeoScopeRanker) -> ContentTreeResolver:
    """Resolver using the built-in geo-scope table."""
    return ContentTreeResolver(ranker)


@pytest.fixture
def rewriter() -> SemanticLinkRewriter:
    """Rewriter with duplicate-mention collapsing enabled."""
    return SemanticLinkRewriter()


@pytest.fixture
def flat_document() -> JSONValue:
    """
    Flat section content with markdown and cards at the root.

    Returns:
        JSONValue: Document resolving to a single "root" block
    """
    return from_python({
        "header": {"headline": "Porto", "_editor": "kept in header"},
        "markdown": "Wander along the [Douro](landscape://Douro).",
        "cards": [{"title": "Francesinha", "_score": 0.9}],
        "_metadata": {"interface": {"card": {"render_type": "dish"}}},
    })


@pytest.fixture
def nested_document() -> JSONValue:
    """
    Topic-keyed section content with mixed geo-scopes.

    Returns:
        JSONValue: Document with four renderable topics and assorted noise
    """
    return from_python({
        "_section": {"title": "Overview"},
        "portugal_history": {
            "header": {"overline": "HISTORY", "headline": "A Short History"},
            "markdown": "Founded by **Afonso I**place://Afonso%20I",
            "_metadata": {"geo_scope": "country"},
        },
        "ribeira": {
            "markdown": "The riverside quarter.",
            "_metadata": {
                "location": {"geoscope": "poi"},
                "interface": {"card": {"render_type": "sight"}},
            },
        },
        "porto_food": {
            "cards": [{"name": "Francesinha"}, {"name": "Tripas"}],
            "_metadata": {"geo_scope": "locality"},
        },
        "unscoped": {
            "markdown": "No scope here.",
        },
        "empty_topic": {"_metadata": {"geo_scope": "poi"}},
        "not_a_topic": "plain string",
    })
