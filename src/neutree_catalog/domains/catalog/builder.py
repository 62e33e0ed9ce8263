"""Synthesis of ModelCatalog documents."""

from __future__ import annotations

import re

from neutree_catalog.domains.catalog.models import (
    DEFAULT_SCHEDULER,
    ArtifactSelection,
    CatalogDocument,
    CatalogMetadata,
    CatalogSpec,
    DeploymentOptions,
    Engine,
    EngineArgs,
    EngineSpec,
    ModelSpec,
    Replicas,
    Task,
    Variables,
)
from neutree_catalog.domains.huggingface.models import RepositoryReference

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify_name(repo: str) -> str:
    """URL-safe catalog name: lowercase, non-alphanumeric runs become one hyphen."""
    return _NON_ALNUM.sub("-", repo.lower()).strip("-")


def build_catalog(
    ref: RepositoryReference,
    selection: ArtifactSelection,
    task: Task,
) -> CatalogDocument:
    """Assemble the catalog document for a repository.

    Only metadata.name is normalized; the owner/repo casing is kept in the
    model name and served model name.
    """
    engine_args = None
    if selection.engine is Engine.VLLM:
        engine_args = EngineArgs.defaults_for(ref.repo_id)

    return CatalogDocument(
        metadata=CatalogMetadata(name=slugify_name(ref.repo)),
        spec=CatalogSpec(
            model=ModelSpec(
                registry="",
                name=ref.repo_id,
                file=selection.file,
                version="latest",
                task=task,
            ),
            engine=EngineSpec(engine=selection.engine, version="v1"),
            resources={},
            replicas=Replicas(num=1),
            deployment_options=DeploymentOptions(scheduler=DEFAULT_SCHEDULER),
            variables=Variables(
                ray_scheduler_type=DEFAULT_SCHEDULER.type,
                engine_args=engine_args,
            ),
        ),
    )
