"""Service orchestrators."""

from .catalogue_service import CatalogueService, get_catalogue_service

__all__ = [
    "CatalogueService",
    "get_catalogue_service",
]
