"""Pydantic models for Neutree ModelCatalog documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field


class Engine(str, Enum):
    """Serving engines a catalog entry can target."""

    VLLM = "vllm"
    LLAMA_CPP = "llama-cpp"


class Task(str, Enum):
    """Tasks a catalog entry can serve."""

    TEXT_GENERATION = "text-generation"
    TEXT_EMBEDDING = "text-embedding"
    TEXT_RERANK = "text-rerank"


class ArtifactSelection(BaseModel):
    """The weights file chosen to represent a repository, and the engine it implies."""

    model_config = ConfigDict(frozen=True)

    engine: Engine = Field(..., description="Serving engine implied by the file format")
    file: str = Field(..., description="Relative path of the primary weights file")


class SchedulerOptions(BaseModel):
    """Ray scheduler settings for a deployment."""

    model_config = ConfigDict(frozen=True)

    type: str = Field("consistent_hash", description="Scheduler type")
    virtual_nodes: int = Field(150, description="Virtual nodes on the hash ring")
    load_factor: float = Field(1.25, description="Maximum load factor per replica")


DEFAULT_SCHEDULER = SchedulerOptions()

# vLLM arguments applied to every generated vllm entry
DEFAULT_VLLM_ARGS: Mapping[str, Any] = MappingProxyType(
    {
        "tensor_parallel_size": 1,
        "max_model_len": 32768,
        "enforce_eager": True,
        "gpu_memory_utilization": 0.95,
        "enable_chunked_prefill": True,
    }
)


class EngineArgs(BaseModel):
    """vLLM engine arguments."""

    model_config = ConfigDict(frozen=True)

    tensor_parallel_size: int
    max_model_len: int
    enforce_eager: bool
    gpu_memory_utilization: float
    enable_chunked_prefill: bool
    served_model_name: str

    @classmethod
    def defaults_for(cls, served_model_name: str) -> EngineArgs:
        """Build the default argument set for a served model name."""
        return cls(**DEFAULT_VLLM_ARGS, served_model_name=served_model_name)


class ModelSpec(BaseModel):
    """Identity of the model being served."""

    model_config = ConfigDict(frozen=True)

    registry: str = Field("", description="Model registry; left blank for the UI to fill")
    name: str = Field(..., description="Hub repository id, owner/repo")
    file: str = Field(..., description="Primary weights file")
    version: str = Field("latest", description="Model version")
    task: Task = Field(..., description="Task the model serves")


class EngineSpec(BaseModel):
    """Serving engine selection."""

    model_config = ConfigDict(frozen=True)

    engine: Engine
    version: str = "v1"


class Replicas(BaseModel):
    """Replica count."""

    model_config = ConfigDict(frozen=True)

    num: int = 1


class DeploymentOptions(BaseModel):
    """Deployment options, currently only the scheduler."""

    model_config = ConfigDict(frozen=True)

    scheduler: SchedulerOptions = DEFAULT_SCHEDULER


class Variables(BaseModel):
    """Runtime variables passed to the serving engine."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ray_scheduler_type: str = Field(DEFAULT_SCHEDULER.type, alias="RAY_SCHEDULER_TYPE")
    engine_args: EngineArgs | None = None


class CatalogSpec(BaseModel):
    """Body of a ModelCatalog document (its `spec` key)."""

    model_config = ConfigDict(frozen=True)

    model: ModelSpec
    engine: EngineSpec
    resources: dict[str, Any] = Field(default_factory=dict)
    replicas: Replicas = Field(default_factory=Replicas)
    deployment_options: DeploymentOptions = Field(default_factory=DeploymentOptions)
    variables: Variables = Field(default_factory=Variables)


class CatalogMetadata(BaseModel):
    """Metadata of a ModelCatalog. The workspace is left for the UI to fill."""

    model_config = ConfigDict(frozen=True)

    name: str


class CatalogDocument(BaseModel):
    """A complete ModelCatalog document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_version: str = Field("v1", alias="apiVersion")
    kind: Literal["ModelCatalog"] = "ModelCatalog"
    metadata: CatalogMetadata
    spec: CatalogSpec

    def to_dict(self) -> dict[str, Any]:
        """Plain dict with wire keys; unset engine_args is omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


class CatalogSummary(BaseModel):
    """Flattened view of a catalog document, as listed by the catalog index.

    Hand-written catalog files may carry tasks and engines outside the
    closed enums used for generated documents, so these are plain strings.
    """

    id: str = Field(..., description="Entry id (metadata.name)")
    name: str = Field(..., description="metadata.name")
    display_name: str = Field(..., description="metadata.display_name, falling back to name")
    task: str = Field(..., description="spec.model.task")
    engine: str = Field(..., description="spec.engine.engine")
    version: str = Field(..., description="spec.model.version")
    icon_url: str | None = Field(None, description="metadata.labels.icon_url")
    hf_repo_url: str | None = Field(None, description="metadata.labels.hf_repo_url")
    original: dict[str, Any] = Field(
        default_factory=dict, description="The full document as loaded"
    )

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> CatalogSummary:
        """Flatten a ModelCatalog mapping.

        Raises:
            KeyError: If a required section is missing.
            ValueError: If the model task is empty.
        """
        metadata = document["metadata"]
        spec = document["spec"]
        name = str(metadata["name"])
        task = spec["model"].get("task")
        if not task:
            raise ValueError(f"ModelCatalog '{name}' has no model task")
        labels = metadata.get("labels") or {}
        return cls(
            id=name,
            name=name,
            display_name=str(metadata.get("display_name") or name),
            task=str(task),
            engine=str(spec["engine"]["engine"]),
            version=str(spec["model"].get("version", "")),
            icon_url=labels.get("icon_url"),
            hf_repo_url=labels.get("hf_repo_url"),
            original=dict(document),
        )

    def matches(self, term: str | None = None, task: str | None = None) -> bool:
        """Case-insensitive search over display name, name and task, plus exact task filter."""
        if task and self.task != task:
            return False
        if not term:
            return True
        needle = term.lower()
        return (
            needle in self.display_name.lower()
            or needle in self.name.lower()
            or needle in self.task.lower()
        )
