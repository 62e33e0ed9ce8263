"""Catalog domain - ModelCatalog documents and the catalog index."""

from neutree_catalog.domains.catalog.models import (
    ArtifactSelection,
    CatalogDocument,
    CatalogSummary,
    Engine,
    Task,
)
from neutree_catalog.domains.catalog.builder import build_catalog, slugify_name
from neutree_catalog.domains.catalog.index import CatalogIndex

__all__ = [
    "ArtifactSelection",
    "CatalogDocument",
    "CatalogIndex",
    "CatalogSummary",
    "Engine",
    "Task",
    "build_catalog",
    "slugify_name",
]
