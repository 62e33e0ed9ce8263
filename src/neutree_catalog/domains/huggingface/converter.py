"""Hub metadata to ModelCatalog conversion."""

from __future__ import annotations

import logging

from neutree_catalog.domains.catalog.builder import build_catalog
from neutree_catalog.domains.catalog.models import CatalogDocument
from neutree_catalog.domains.huggingface.inference import (
    map_pipeline_to_task,
    select_primary_artifact,
)
from neutree_catalog.domains.huggingface.models import (
    RemoteModelMetadata,
    RepositoryReference,
)

logger = logging.getLogger(__name__)


def convert_metadata(ref: RepositoryReference, meta: RemoteModelMetadata) -> CatalogDocument:
    """Convert fetched repository metadata into a catalog document.

    The artifact is selected before the task is classified, so a repository
    with neither usable weights nor a usable tag reports the missing weights.

    Raises:
        NoSupportedArtifactError: If the repo has no .gguf or .safetensors file.
        MissingPipelineTagError: If the metadata has no pipeline_tag.
        UnsupportedPipelineTagError: If the pipeline_tag is not supported.
    """
    selection = select_primary_artifact(meta.siblings)
    task = map_pipeline_to_task(meta.pipeline_tag)
    logger.info(
        f"Converted {ref}: engine={selection.engine.value} "
        f"file={selection.file} task={task.value}"
    )
    return build_catalog(ref, selection, task)
