"""Hugging Face domain - hub metadata and conversion to ModelCatalog."""

from neutree_catalog.domains.huggingface.models import (
    RemoteModelMetadata,
    RepositoryReference,
    SiblingFile,
)

__all__ = [
    "RemoteModelMetadata",
    "RepositoryReference",
    "SiblingFile",
]
