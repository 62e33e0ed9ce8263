"""Utility functions and helpers for neutree-catalog."""

from neutree_catalog.utils.errors import (
    CatalogError,
    CatalogLoadError,
    FetchFailedError,
    InvalidReferenceError,
    MissingPipelineTagError,
    NoSupportedArtifactError,
    NotFoundError,
    UnsupportedPipelineTagError,
)
from neutree_catalog.utils.response import (
    PaginatedResponse,
    Verbosity,
    paginate,
)

__all__ = [
    # Errors
    "CatalogError",
    "InvalidReferenceError",
    "FetchFailedError",
    "NoSupportedArtifactError",
    "MissingPipelineTagError",
    "UnsupportedPipelineTagError",
    "CatalogLoadError",
    "NotFoundError",
    # Response formatting
    "Verbosity",
    "PaginatedResponse",
    "paginate",
]
