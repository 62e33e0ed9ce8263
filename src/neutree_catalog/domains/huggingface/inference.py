"""Inference of engine, weights file and task from hub metadata."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from neutree_catalog.domains.catalog.models import ArtifactSelection, Engine, Task
from neutree_catalog.domains.huggingface.models import SiblingFile
from neutree_catalog.utils.errors import (
    MissingPipelineTagError,
    NoSupportedArtifactError,
    UnsupportedPipelineTagError,
)

logger = logging.getLogger(__name__)

SUPPORTED_TASKS: tuple[Task, ...] = tuple(Task)

# Kept conservative: only well-established hub tags, exact match only.
PIPELINE_TO_TASK: Mapping[str, Task] = MappingProxyType(
    {
        "text-generation": Task.TEXT_GENERATION,
        "feature-extraction": Task.TEXT_EMBEDDING,
        "text-embedding": Task.TEXT_EMBEDDING,
        "sentence-similarity": Task.TEXT_EMBEDDING,
        "text-rerank": Task.TEXT_RERANK,
    }
)

GGUF_SUFFIX = ".gguf"
SAFETENSORS_SUFFIX = ".safetensors"
FIRST_SHARD_PATTERN = re.compile(r"-00001-of-")


def _first_with_suffix(siblings: Sequence[SiblingFile], suffix: str) -> str | None:
    for sibling in siblings:
        if sibling.rfilename.endswith(suffix):
            return sibling.rfilename
    return None


def select_primary_artifact(siblings: Sequence[SiblingFile]) -> ArtifactSelection:
    """Choose the weights file that represents the repository.

    Rules, first match wins and ties go to listing order:

    1. a ``.gguf`` file selects llama-cpp;
    2. the first shard of a split safetensors set selects vllm;
    3. any ``.safetensors`` file selects vllm.

    Raises:
        NoSupportedArtifactError: If none of the rules match.
    """
    gguf = _first_with_suffix(siblings, GGUF_SUFFIX)
    if gguf is not None:
        return ArtifactSelection(engine=Engine.LLAMA_CPP, file=gguf)

    for sibling in siblings:
        name = sibling.rfilename
        if name.endswith(SAFETENSORS_SUFFIX) and FIRST_SHARD_PATTERN.search(name):
            return ArtifactSelection(engine=Engine.VLLM, file=name)

    safetensors = _first_with_suffix(siblings, SAFETENSORS_SUFFIX)
    if safetensors is not None:
        return ArtifactSelection(engine=Engine.VLLM, file=safetensors)

    logger.debug(f"No supported weights among {len(siblings)} files")
    raise NoSupportedArtifactError()


def map_pipeline_to_task(pipeline_tag: str | None) -> Task:
    """Map a hub pipeline tag onto a supported task.

    Raises:
        MissingPipelineTagError: If the tag is absent or empty.
        UnsupportedPipelineTagError: If the tag is not in PIPELINE_TO_TASK.
    """
    if not pipeline_tag:
        raise MissingPipelineTagError()

    task = PIPELINE_TO_TASK.get(pipeline_tag)
    if task is None:
        raise UnsupportedPipelineTagError(
            pipeline_tag,
            supported_tags=list(PIPELINE_TO_TASK),
            supported_tasks=[t.value for t in SUPPORTED_TASKS],
        )
    return task
